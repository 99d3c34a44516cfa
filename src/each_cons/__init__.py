"""Lazy sliding windows (``each_cons``) over Python iterables."""

from importlib import metadata

from .arrays import window_array
from .config import ValidationResult, WindowConfig, load_window_config, validate_config
from .cons import Cons, ConsState, adapt, each_cons
from .errors import InvalidWindowSize
from .group import ConsGroup, cons_group
from .logging_utils import configure_logging, log_event

try:
    __version__ = metadata.version("each-cons")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.1.0"

__all__ = [
    "Cons",
    "ConsState",
    "adapt",
    "each_cons",
    "InvalidWindowSize",
    "ConsGroup",
    "cons_group",
    "window_array",
    "WindowConfig",
    "ValidationResult",
    "load_window_config",
    "validate_config",
    "configure_logging",
    "log_event",
    "__version__",
]
