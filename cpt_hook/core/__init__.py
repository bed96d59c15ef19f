"""Core modules for cpt-hook."""

from .config_loader import ConfigLoadError, load_config
from .models import (
    CptHookConfig,
    CptHookError,
    ExecutionResult,
    HookName,
    RunReport,
    SyncResult,
)

__all__ = [
    # Models
    "CptHookConfig",
    "CptHookError",
    "ExecutionResult",
    "HookName",
    "RunReport",
    "SyncResult",
    # Loaders
    "ConfigLoadError",
    "load_config",
]
