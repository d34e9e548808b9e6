"""Weight configuration for the operation complexity model."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ..core.exceptions import ConfigError

# Top-level key used when weights live inside a larger YAML document
WEIGHTS_SECTION = "complexity_weights"


@dataclass(frozen=True)
class ComplexityWeights:
    """Per-shape weights of the linear operation complexity model.

    Each field is the amount added to a method's complexity for every
    occurrence of the corresponding syntactic shape.
    """

    parameter: float = 0.3  # each declared parameter
    variable: float = 0.5  # each local variable declaration
    assignment: float = 0.5  # each assignment expression
    math_operation: float = 2.0  # each +, -, *, / binary expression
    message_with_parameters: float = 3.0  # invocation with >= 1 argument
    call: float = 7.0  # Foo()
    method_call: float = 5.0  # obj.Foo()
    message_without_parameters: float = 1.0  # any other zero-argument callee

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(
                    f"Weight '{f.name}' must be a number, got {value!r}",
                    context={"field": f.name},
                )
            if not math.isfinite(value):
                raise ConfigError(
                    f"Weight '{f.name}' must be finite, got {value}",
                    context={"field": f.name},
                )
            if value < 0:
                raise ConfigError(
                    f"Weight '{f.name}' must be non-negative, got {value}",
                    context={"field": f.name},
                )
            # Store every weight as float so accumulated scores stay floats
            object.__setattr__(self, f.name, float(value))

    @classmethod
    def load(cls, path: Path) -> ComplexityWeights:
        """Load weights from a YAML file.

        Missing files yield the defaults. Keys may be given at the top level
        or nested under ``complexity_weights``.

        Args:
            path: Path to YAML configuration file

        Returns:
            ComplexityWeights instance

        Raises:
            ConfigError: If the file is not valid YAML or holds unknown keys
        """
        if not path.exists():
            logger.debug(f"No weights file at {path}, using defaults")
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in weights file {path}: {e}", context={"path": str(path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Weights file {path} must contain a mapping",
                context={"path": str(path)},
            )

        weights = cls.from_dict(data)
        logger.debug(f"Loaded complexity weights from {path}")
        return weights

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComplexityWeights:
        """Create weights from a dictionary, falling back to defaults per key.

        Args:
            data: Weight mapping, optionally nested under ``complexity_weights``

        Returns:
            ComplexityWeights instance
        """
        section = data.get(WEIGHTS_SECTION, data)
        if not isinstance(section, dict):
            raise ConfigError(f"'{WEIGHTS_SECTION}' must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise ConfigError(
                f"Unknown complexity weight(s): {', '.join(unknown)}",
                context={"unknown": unknown, "known": sorted(known)},
            )

        return cls(**section)

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    def save(self, path: Path) -> None:
        """Save weights to a YAML file under the ``complexity_weights`` key.

        Args:
            path: Path to save configuration
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                {WEIGHTS_SECTION: self.to_dict()},
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def with_overrides(self, **overrides: float) -> ComplexityWeights:
        """Return a copy with the given weights replaced."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown complexity weight(s): {', '.join(unknown)}")
        return replace(self, **overrides)


DEFAULT_WEIGHTS = ComplexityWeights()
