"""
cpt-hook - Pipeline
Valida o repositório e orquestra os fluxos `init` e `run`.
"""

from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console
from rich.markup import escape

from .models import CptHookConfig, CptHookError, HookName, RunReport, SyncResult
from ..actions.base import Action
from ..hooks.install import HookScriptManager, HookWriteError
from ..ui.selection import Selector


# =============================================================================
# Exceções
# =============================================================================

class PathNotFoundError(CptHookError):
    """Diretório do repositório não existe."""
    pass


class NotAGitRepositoryError(CptHookError):
    """Diretório não é um repositório git."""
    pass


class MissingHookArgumentError(CptHookError):
    """`run` chamado sem --hook."""
    pass


# =============================================================================
# Repository Validation
# =============================================================================

def resolve_git_dir(repo_path: Union[str, Path]) -> Path:
    """
    Valida o repositório e retorna o diretório git.

    Suporta worktrees/submódulos, onde .git é um arquivo `gitdir: <path>`.

    Raises:
        PathNotFoundError: Se o diretório não existir
        NotAGitRepositoryError: Se não houver .git
    """
    repo_path = Path(repo_path)

    if not repo_path.exists():
        raise PathNotFoundError(f"O diretório especificado não existe: {repo_path}")

    git_path = repo_path / ".git"

    if git_path.is_dir():
        return git_path

    if git_path.is_file():
        try:
            content = git_path.read_text().strip()
        except OSError as e:
            raise NotAGitRepositoryError(f"Não foi possível ler {git_path}: {e}")

        if content.startswith("gitdir:"):
            real_git_dir = Path(content.split(":", 1)[1].strip())
            if not real_git_dir.is_absolute():
                real_git_dir = repo_path / real_git_dir
            if real_git_dir.is_dir():
                return real_git_dir

    raise NotAGitRepositoryError(
        f"O diretório especificado não é um repositório git: {repo_path}\n"
        "Para usar o cpt-hook aqui, rode `git init` e depois `cpt-hook init`."
    )


# =============================================================================
# Pipeline
# =============================================================================

class Pipeline:
    """
    Orquestra uma invocação do cpt-hook.

    Responsabilidades:
    - Validar o repositório antes de qualquer efeito colateral
    - init: sincronizar todos os hooks conforme a seleção
    - run: filtrar actions aplicáveis, pedir seleção e executar
    - Agregar falhas sem interromper as operações irmãs
    """

    def __init__(
        self,
        repo_path: Union[str, Path],
        selector: Selector,
        actions: Optional[List[Action]] = None,
        config: Optional[CptHookConfig] = None,
        console: Optional[Console] = None,
        verbose: bool = False,
    ):
        """
        Args:
            repo_path: Raiz do repositório
            selector: Fronteira de seleção (interativa ou stub)
            actions: Actions disponíveis (default: registry da config)
            config: Configuração do projeto
            console: Console para mensagens
            verbose: Mostra mensagens de diagnóstico

        Raises:
            PathNotFoundError, NotAGitRepositoryError
        """
        self.repo_path = Path(repo_path)
        self.git_dir = resolve_git_dir(self.repo_path)
        self.selector = selector
        self.config = config or CptHookConfig()
        self.console = console or Console()
        self.verbose = verbose

        if actions is None:
            from ..actions.registry import build_registry
            actions = build_registry(self.config)
        self.actions = list(actions)

    # =========================================================================
    # Init
    # =========================================================================

    def init(self) -> List[SyncResult]:
        """
        Pergunta quais hooks habilitar e sincroniza todos.

        Falha em um hook não impede os demais.

        Returns:
            Lista de SyncResult, um por hook conhecido
        """
        self._debug("Inicializando hooks")

        hooks_available = HookName.names()
        selected = self.selector.select("Escolha os hooks", hooks_available)
        hooks_to_set = {hooks_available[i] for i in selected}

        self._debug(f"Hooks selecionados: {sorted(hooks_to_set)}")

        manager = HookScriptManager(self.git_dir, self.config.command)
        results: List[SyncResult] = []

        for hook in hooks_available:
            enabled = hook in hooks_to_set
            try:
                manager.synchronize(hook, enabled)
                results.append(SyncResult(hook=hook, enabled=enabled))
            except HookWriteError as e:
                self.console.print(
                    f"❌ Não foi possível atualizar o script do hook {hook}: {escape(str(e.cause))}",
                    style="bold red",
                )
                results.append(SyncResult(hook=hook, enabled=enabled, success=False, message=str(e)))

        self.console.print("✅ Configuração dos hooks concluída", style="bold green")
        return results

    # =========================================================================
    # Run
    # =========================================================================

    def applicable_actions(self, hook_name: str) -> List[Action]:
        """Actions cujo validate aceita o repositório e o hook, na ordem do registry."""
        return [a for a in self.actions if a.validate(self.repo_path, hook_name)]

    def run(self, hook_name: Optional[str]) -> RunReport:
        """
        Filtra, pede seleção e executa as actions escolhidas.

        Todas as actions selecionadas rodam, mesmo após falhas.

        Args:
            hook_name: Hook que disparou

        Returns:
            RunReport com os resultados na ordem de execução

        Raises:
            MissingHookArgumentError: Se hook_name for vazio
        """
        if not hook_name:
            raise MissingHookArgumentError("Nenhum hook especificado (use --hook)")

        self._debug(f"Rodando hook: {hook_name}")

        applicable = self.applicable_actions(hook_name)
        report = RunReport(hook=hook_name, applicable=len(applicable))

        if not applicable:
            self.console.print(
                "cpt-hook não encontrou nenhuma action aplicável",
                style="bold yellow",
            )
            return report

        selected = self.selector.select(
            "Escolha as actions",
            [action.display_name for action in applicable],
        )

        for index in sorted(set(selected)):
            action = applicable[index]
            self._debug(f"Executando {action.key}: {' '.join(action.command)}")

            result = action.execute(self.repo_path, hook_name)
            report.results.append(result)

            if result.success:
                self.console.print(f"✅ {escape(action.display_name)}", style="green")
            else:
                self.console.print(f"❌ {escape(action.display_name)}: {escape(result.message)}", style="red")

        if report.failed:
            self.console.print(
                "Pelo menos uma das verificações selecionadas falhou",
                style="bold red",
            )

        return report

    # =========================================================================
    # Helpers Privados
    # =========================================================================

    def _debug(self, message: str):
        if self.verbose:
            self.console.print(escape(message), style="dim")


__all__ = [
    'Pipeline',
    'PathNotFoundError',
    'NotAGitRepositoryError',
    'MissingHookArgumentError',
    'resolve_git_dir',
]
