"""
cpt-hook - Actions
Interface comum das verificações executadas quando um hook dispara.
"""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import FrozenSet, List, Optional

from ..core.models import ExecutionResult, HookName


# =============================================================================
# Action (interface)
# =============================================================================

class Action(ABC):
    """
    Verificação plugável executada por um hook.

    Subclasses definem `key`, `label`, `manifest`, `default_command`
    e os hooks em que fazem sentido. `validate` só olha o disco;
    `execute` dispara exatamente um processo externo.
    """

    key: str = ""
    label: str = ""
    manifest: str = ""
    default_command: List[str] = []
    hooks: FrozenSet[HookName] = frozenset(HookName)

    def __init__(self, command: Optional[List[str]] = None):
        """
        Args:
            command: Override do comando padrão (vem da config)
        """
        self.command = list(command) if command else list(self.default_command)

    @property
    def display_name(self) -> str:
        """Label exibido na seleção."""
        return self.label

    def validate(self, repo_path: Path, hook_name: str) -> bool:
        """
        Verifica se a action se aplica ao repositório e ao hook.

        Não tem efeitos colaterais e não executa processos.

        Args:
            repo_path: Raiz do repositório
            hook_name: Hook que disparou

        Returns:
            True se a action pode ser oferecida ao usuário
        """
        hook = HookName.parse(hook_name)
        if hook is None or hook not in self.hooks:
            return False

        return self._applies_to(Path(repo_path))

    def _applies_to(self, repo_path: Path) -> bool:
        """Por padrão, exige o manifest na raiz do repositório."""
        if not self.manifest:
            return True
        return (repo_path / self.manifest).is_file()

    def execute(self, repo_path: Path, hook_name: str) -> ExecutionResult:
        """
        Executa o comando da action na raiz do repositório.

        Args:
            repo_path: Raiz do repositório
            hook_name: Hook que disparou

        Returns:
            ExecutionResult (falha em exit code != 0 ou comando ausente)
        """
        return run_command(self.key, self.label, self.command, Path(repo_path))

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(command={self.command!r})"


# =============================================================================
# Process Helper
# =============================================================================

def run_command(key: str, label: str, cmd: List[str], cwd: Path) -> ExecutionResult:
    """
    Executa um comando externo e converte o resultado.

    O stdout/stderr do processo vão direto para o terminal.

    Args:
        key: Identificador da action
        label: Label da action
        cmd: Lista com comando e argumentos
        cwd: Diretório de trabalho

    Returns:
        ExecutionResult
    """
    try:
        result = subprocess.run(cmd, cwd=cwd, check=False)
    except FileNotFoundError:
        return ExecutionResult.failed(key, label, f"Comando não encontrado: {cmd[0]}")
    except OSError as e:
        return ExecutionResult.failed(key, label, f"Erro ao executar {cmd[0]}: {e}")

    if result.returncode != 0:
        return ExecutionResult.failed(
            key,
            label,
            f"{' '.join(cmd)} terminou com código {result.returncode}",
            returncode=result.returncode,
        )

    return ExecutionResult.ok(key, label, result.returncode)


__all__ = [
    "Action",
    "run_command",
]
