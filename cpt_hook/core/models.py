"""
cpt-hook - Core Data Models
Estruturas de dados fundamentais: hooks, resultados e configuração.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional
from enum import Enum


# =============================================================================
# Exceptions
# =============================================================================

class CptHookError(Exception):
    """Erro base do cpt-hook. Tudo que herda daqui é tratado pela CLI."""
    pass


# =============================================================================
# Enums
# =============================================================================

class HookName(str, Enum):
    """Hooks do git gerenciados pelo cpt-hook."""
    PRE_COMMIT = "pre-commit"
    PRE_PUSH = "pre-push"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["HookName"]:
        """Converte string em HookName. Retorna None se desconhecido."""
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def names(cls) -> List[str]:
        """Lista de nomes na ordem de declaração."""
        return [hook.value for hook in cls]


# =============================================================================
# Sync Result (InitFlow)
# =============================================================================

@dataclass
class SyncResult:
    """Resultado da sincronização de um hook."""
    hook: str
    enabled: bool
    success: bool = True
    message: str = ""

    @property
    def state(self) -> str:
        """Estado pedido, para exibição."""
        return "enabled" if self.enabled else "disabled"


# =============================================================================
# Execution Result (RunFlow)
# =============================================================================

@dataclass
class ExecutionResult:
    """Resultado da execução de uma action."""
    action: str
    label: str
    success: bool
    returncode: Optional[int] = None
    message: str = ""

    @classmethod
    def ok(cls, action: str, label: str, returncode: int = 0) -> "ExecutionResult":
        return cls(action=action, label=label, success=True, returncode=returncode)

    @classmethod
    def failed(
        cls,
        action: str,
        label: str,
        message: str,
        returncode: Optional[int] = None,
    ) -> "ExecutionResult":
        return cls(
            action=action,
            label=label,
            success=False,
            returncode=returncode,
            message=message,
        )


@dataclass
class RunReport:
    """Resultado completo de um `run`."""
    hook: str
    results: List[ExecutionResult] = field(default_factory=list)
    applicable: int = 0

    @property
    def failed(self) -> List[ExecutionResult]:
        """Actions que falharam, na ordem de execução."""
        return [r for r in self.results if not r.success]

    @property
    def exit_code(self) -> int:
        """
        Exit code agregado.

        0 = nada executado ou tudo passou
        1 = pelo menos uma action falhou
        """
        return 1 if self.failed else 0


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_COMMAND = "cpt-hook"


@dataclass
class CptHookConfig:
    """Configuração de projeto (.cpt-hook.yaml)."""
    command: str = DEFAULT_COMMAND
    disabled_actions: List[str] = field(default_factory=list)
    commands: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        """Valida campos."""
        if not self.command or not self.command.strip():
            raise ValueError("'command' não pode ser vazio")
        for key, argv in self.commands.items():
            if not argv:
                raise ValueError(f"comando vazio para action '{key}'")

    def is_action_enabled(self, key: str) -> bool:
        """Verifica se uma action está habilitada."""
        return key not in self.disabled_actions

    def command_for(self, key: str) -> Optional[List[str]]:
        """Override de comando para uma action (None = padrão)."""
        argv = self.commands.get(key)
        return list(argv) if argv else None


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Exceptions
    "CptHookError",

    # Enums
    "HookName",

    # Results
    "SyncResult",
    "ExecutionResult",
    "RunReport",

    # Configuration
    "DEFAULT_COMMAND",
    "CptHookConfig",
]
