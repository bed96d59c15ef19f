"""Git hook script synchronization."""

from .install import (
    HookScriptManager,
    HookStatus,
    HookWriteError,
    render_hook_script,
    synchronize,
)

__all__ = [
    "HookScriptManager",
    "HookStatus",
    "HookWriteError",
    "render_hook_script",
    "synchronize",
]
