from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from shamir_recovery.interpolation import METHODS

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class SolverConfig:
    """
    Runtime options for the recovery pipeline.

    Attributes:
        method: Interpolation strategy ("lagrange" or "gaussian").
        cross_check: Also run the other strategy and require agreement.
        log_level: Root log level name.
        json_logs: Emit log records as JSON lines.
    """

    method: str = "lagrange"
    cross_check: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"Unknown interpolation method '{self.method}'")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "SolverConfig":
        if not data:
            return cls()
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key in ("cross_check", "json_logs"):
                if not isinstance(value, bool):
                    raise ValueError(f"Solver config '{key}' must be true or false, got {value!r}")
                kwargs[key] = value
            elif key in ("method", "log_level"):
                if not isinstance(value, str):
                    raise ValueError(f"Solver config '{key}' must be a string, got {value!r}")
                kwargs[key] = value
            else:
                raise ValueError(f"Unknown solver config key '{key}'")
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "SolverConfig":
        """Return a copy with every non-None override applied."""
        data = {
            "method": self.method,
            "cross_check": self.cross_check,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
        }
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SolverConfig.from_mapping(data)
