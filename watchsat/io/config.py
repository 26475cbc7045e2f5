"""Solver run options, read from a YAML ``options`` block and CLI flags."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

OUTPUT_FORMATS = ("text", "yaml")


class ConfigError(ValueError):
    """Raised for unknown or invalid option values."""


@dataclass(frozen=True)
class SolverOptions:
    verify: bool = False
    output_format: str = "text"
    log_level: str = "WARNING"
    show_instance: bool = True

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"unknown output format {self.output_format!r}")
        if not isinstance(self.log_level, str) or not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SolverOptions":
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown option(s): {', '.join(unknown)}")
        return cls(**data)

    def merged(self, **overrides: Any) -> "SolverOptions":
        """Copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())
