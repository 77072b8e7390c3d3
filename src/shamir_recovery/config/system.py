"""Locating and loading the solver configuration file."""

import json
import os
from pathlib import Path
from typing import Optional, Tuple

from shamir_recovery.config.models import SolverConfig

CONFIG_FILENAME = "shamir-recovery.json"
CONFIG_ENV_VAR = "SHAMIR_RECOVERY_CONFIG"


def resolve_config_path(path: Optional[Path] = None) -> Path:
    """
    Resolve the configuration file path.

    An explicit path wins, then the SHAMIR_RECOVERY_CONFIG environment
    variable, then shamir-recovery.json in the working directory.
    """
    if path is not None:
        return Path(path).resolve()
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    return (Path.cwd() / CONFIG_FILENAME).resolve()


def load_solver_config(path: Optional[Path] = None) -> Tuple[SolverConfig, Path]:
    """
    Load solver configuration.

    Returns:
        (config, resolved_path); defaults when the file does not exist.

    Raises:
        ValueError: if the JSON is invalid or holds unknown settings.
    """
    resolved = resolve_config_path(path)
    if not resolved.exists():
        return SolverConfig(), resolved
    try:
        data = json.loads(resolved.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid solver config JSON at {resolved}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Solver config at {resolved} must be a JSON object")
    return SolverConfig.from_mapping(data), resolved
