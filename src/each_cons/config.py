"""Configuration loading and validation for window iterators."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, TypeVar

import yaml

from .cons import Cons
from .logging_utils import configure_logging, log_event

T = TypeVar("T")

SCHEMA: Dict[str, Dict[str, Any]] = {
    "types": {"window_size": int, "log_level": str, "json_logs": bool},
    "defaults": {"window_size": 2, "log_level": "INFO", "json_logs": False},
    "constraints": {"window_size": {"min": 1}},
}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    errors: list[str]
    warnings: list[str]
    normalized: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> Dict[str, Any]:
        return {
            "errors": self.errors,
            "warnings": self.warnings,
            "normalized": self.normalized,
        }


def _type_name(expected: Any) -> str:
    if isinstance(expected, type):
        return expected.__name__
    return str(expected)


def validate_config(config: Mapping[str, Any]) -> ValidationResult:
    """Validate a configuration mapping.

    Validation does not mutate the original config. Defaults are filled in,
    mistyped or out-of-range values are errors and unknown keys are warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []
    normalized = dict(config)
    for key, value in SCHEMA["defaults"].items():
        normalized.setdefault(key, value)

    for key, expected_type in SCHEMA["types"].items():
        value = normalized[key]
        # bool is an int subclass; keep "window_size: true" out
        if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
            errors.append(
                f"Field '{key}' should be of type {_type_name(expected_type)} (got {type(value).__name__})"
            )

    for key, constraint in SCHEMA["constraints"].items():
        value = normalized[key]
        if not isinstance(value, int) or isinstance(value, bool):
            continue
        min_value = constraint.get("min")
        if min_value is not None and value < min_value:
            errors.append(f"Field '{key}' must be >= {min_value} (got {value})")

    level = normalized["log_level"]
    if isinstance(level, str) and level.upper() not in LOG_LEVELS:
        warnings.append(f"Unknown log level '{level}', INFO will be used")

    for key in sorted(set(normalized) - set(SCHEMA["types"])):
        warnings.append(f"Unknown field '{key}' ignored")

    return ValidationResult(errors=errors, warnings=warnings, normalized=normalized)


@dataclass
class WindowConfig:
    window_size: int = 2
    log_level: str = "INFO"
    json_logs: bool = False
    warnings: list[str] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "WindowConfig":
        result = validate_config(config)
        if not result.ok:
            raise ValueError("Invalid window configuration: " + "; ".join(result.errors))
        for warning in result.warnings:
            logger.warning(warning)
        values = {key: result.normalized[key] for key in SCHEMA["types"]}
        return cls(**values, warnings=result.warnings)

    def apply_logging(self) -> None:
        configure_logging(self.log_level, json_logs=self.json_logs)

    def build(self, source: Iterable[T]) -> Cons[T]:
        """Wrap ``source`` in a window iterator using the configured size."""
        log_event(logger, "window_iterator_built", json_logs=self.json_logs, window_size=self.window_size)
        return Cons(source, self.window_size)


def load_window_config(path: str | Path) -> WindowConfig:
    """Load a window configuration from a YAML or JSON file."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        loaded = json.loads(text)
    else:
        loaded = yaml.safe_load(text)
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return WindowConfig.from_mapping(loaded)
