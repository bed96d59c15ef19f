"""
cpt-hook - Hook Script Manager
Sincroniza os scripts em .git/hooks com o estado pedido pelo usuário.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from ..core.models import CptHookError, HookName, DEFAULT_COMMAND


# =============================================================================
# Exceptions
# =============================================================================

class HookWriteError(CptHookError):
    """Falha de filesystem ao sincronizar um hook."""

    def __init__(self, hook_name: str, cause: OSError):
        self.hook_name = hook_name
        self.cause = cause
        super().__init__(f"Não foi possível atualizar o hook '{hook_name}': {cause}")


# =============================================================================
# Hook Template
# =============================================================================

HOOK_MARKER = "Auto-generated by cpt-hook"

HOOK_TEMPLATE = """#!/bin/sh
# cpt-hook {hook} hook
# {marker} - DO NOT EDIT MANUALLY

# git não liga o stdin do hook ao terminal; a seleção precisa dele
if (exec < /dev/tty) 2>/dev/null; then
    exec < /dev/tty
fi

exec {command} run --hook {hook}
"""


def render_hook_script(hook_name: str, command: str = DEFAULT_COMMAND) -> str:
    """Gera o conteúdo do dispatcher script para um hook."""
    return HOOK_TEMPLATE.format(hook=hook_name, marker=HOOK_MARKER, command=command)


# =============================================================================
# Hook Status
# =============================================================================

@dataclass
class HookStatus:
    """Estado de um hook no disco."""
    installed: bool
    executable: bool = False
    is_cpt_hook: bool = False


# =============================================================================
# Hook Script Manager
# =============================================================================

class HookScriptManager:
    """
    Gerencia os dispatcher scripts de um repositório.

    Responsabilidades:
    - Escrever (ou remover) .git/hooks/<hook> conforme o estado pedido
    - Manter a escrita idempotente (mesmo conteúdo byte a byte)
    - Reportar o estado atual dos hooks
    """

    def __init__(self, git_dir: Path, command: str = DEFAULT_COMMAND):
        """
        Args:
            git_dir: Diretório .git do repositório
            command: Comando gravado no script (binário gerenciador)
        """
        self.git_dir = Path(git_dir)
        self.hooks_dir = self.git_dir / "hooks"
        self.command = command

    def hook_path(self, hook_name: str) -> Path:
        return self.hooks_dir / hook_name

    def synchronize(self, hook_name: str, enabled: bool) -> None:
        """
        Converge o script do hook para o estado pedido.

        Args:
            hook_name: Nome do hook (pre-commit, pre-push)
            enabled: True grava o script, False remove

        Raises:
            HookWriteError: Qualquer erro de filesystem
        """
        hook_path = self.hook_path(hook_name)

        try:
            if enabled:
                hook_path.write_text(render_hook_script(hook_name, self.command))
                hook_path.chmod(0o755)
            else:
                # Ausência não é erro
                hook_path.unlink(missing_ok=True)
        except OSError as e:
            raise HookWriteError(hook_name, e) from e

    def status(self) -> Dict[str, HookStatus]:
        """Retorna o estado de cada hook conhecido."""
        result: Dict[str, HookStatus] = {}

        for hook_name in HookName.names():
            hook_path = self.hook_path(hook_name)

            if not hook_path.is_file():
                result[hook_name] = HookStatus(installed=False)
                continue

            try:
                content = hook_path.read_text()
            except OSError:
                content = ""

            result[hook_name] = HookStatus(
                installed=True,
                executable=hook_path.stat().st_mode & 0o111 != 0,
                is_cpt_hook=HOOK_MARKER in content,
            )

        return result


# =============================================================================
# Helper Functions
# =============================================================================

def synchronize(
    git_dir: Path,
    hook_name: str,
    enabled: bool,
    command: Optional[str] = None,
) -> None:
    """Atalho para HookScriptManager(git_dir).synchronize(...)."""
    manager = HookScriptManager(git_dir, command or DEFAULT_COMMAND)
    manager.synchronize(hook_name, enabled)


def print_status(statuses: Dict[str, HookStatus], git_dir: Path, console=None):
    """Printa status dos hooks (helper para CLI)."""
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    console = console or Console()

    hooks_dir = escape(str(Path(git_dir) / "hooks"))
    console.print(f"\n📂 Hooks dir: {hooks_dir}\n")

    table = Table(title="Status dos Hooks")
    table.add_column("Hook", style="cyan")
    table.add_column("Instalado", style="yellow")
    table.add_column("cpt-hook", style="green")
    table.add_column("Executável", style="magenta")

    for hook_name, hook_status in statuses.items():
        installed = "✅" if hook_status.installed else "❌"
        is_cpt_hook = "✅" if hook_status.is_cpt_hook else "❌"
        executable = "✅" if hook_status.executable else "❌"

        table.add_row(hook_name, installed, is_cpt_hook, executable)

    console.print(table)


__all__ = [
    "HookScriptManager",
    "HookStatus",
    "HookWriteError",
    "HOOK_MARKER",
    "render_hook_script",
    "synchronize",
    "print_status",
]
