"""
cpt-hook - Action Registry
Lista estática e ordenada das actions conhecidas.
"""

from typing import List, Optional, Type

from ..core.models import CptHookConfig
from .base import Action
from .cargo import FormatCheck, TestRun


# Ordem aqui = ordem apresentada ao usuário
ACTION_CLASSES: List[Type[Action]] = [
    FormatCheck,
    TestRun,
]


def action_keys() -> List[str]:
    """Keys de todas as actions conhecidas."""
    return [cls.key for cls in ACTION_CLASSES]


def build_registry(config: Optional[CptHookConfig] = None) -> List[Action]:
    """
    Instancia as actions habilitadas pela config.

    Args:
        config: Configuração do projeto (opcional)

    Returns:
        Lista de actions na ordem do registry
    """
    config = config or CptHookConfig()
    actions: List[Action] = []

    for cls in ACTION_CLASSES:
        if not config.is_action_enabled(cls.key):
            continue
        actions.append(cls(command=config.command_for(cls.key)))

    return actions


__all__ = [
    "ACTION_CLASSES",
    "action_keys",
    "build_registry",
]
