"""Checks that can run when a hook fires."""

from .base import Action, run_command
from .cargo import FormatCheck, TestRun
from .registry import ACTION_CLASSES, action_keys, build_registry

__all__ = [
    "Action",
    "run_command",
    "FormatCheck",
    "TestRun",
    "ACTION_CLASSES",
    "action_keys",
    "build_registry",
]
