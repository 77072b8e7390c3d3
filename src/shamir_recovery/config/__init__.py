from .models import SolverConfig
from .system import CONFIG_ENV_VAR, CONFIG_FILENAME, load_solver_config, resolve_config_path

__all__ = [
    "SolverConfig",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "load_solver_config",
    "resolve_config_path",
]
