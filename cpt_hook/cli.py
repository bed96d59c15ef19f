"""
cpt-hook - Command Line Interface
Entry point principal para todos os comandos do cpt-hook.
"""

from pathlib import Path
from typing import Optional, List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cpt_hook.__version__ import __version__
from cpt_hook.core.config_loader import load_config
from cpt_hook.core.models import CptHookError, SyncResult
from cpt_hook.core.pipeline import Pipeline, resolve_git_dir
from cpt_hook.hooks.install import HookScriptManager, print_status
from cpt_hook.ui.selection import RichSelector


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="cpt-hook",
    help="🪝 cpt-hook - Interactive management of hooks in your Git repositories",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"🪝 cpt-hook version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    repository: Optional[Path] = typer.Option(
        None,
        "--repository",
        "-r",
        help="Repositório alvo. Default: diretório atual"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Mostra mensagens de diagnóstico"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do cpt-hook"
    ),
):
    """
    🪝 cpt-hook - Interactive management of hooks in your Git repositories

    Instala hooks no repositório e escolhe, a cada disparo, quais
    verificações rodar.
    """
    ctx.obj = {
        "repository": repository or Path.cwd(),
        "verbose": verbose,
    }


def _build_pipeline(ctx: typer.Context) -> Pipeline:
    """Valida o repositório, carrega a config e monta o pipeline."""
    repo_path = ctx.obj["repository"]

    # Repositório primeiro: config inválida num path inexistente não importa
    resolve_git_dir(repo_path)
    config = load_config(repo_path)

    return Pipeline(
        repo_path,
        selector=RichSelector(console),
        config=config,
        console=console,
        verbose=ctx.obj["verbose"],
    )


def print_sync_summary(results: List[SyncResult]):
    """Printa resumo da sincronização (helper para CLI)."""
    table = Table(title="Hooks")

    table.add_column("Hook", style="cyan")
    table.add_column("Estado", style="yellow")
    table.add_column("Status", style="green")
    table.add_column("Mensagem")

    for result in results:
        status = "✅" if result.success else "❌"
        table.add_row(result.hook, result.state, status, escape(result.message))

    console.print(table)


# =============================================================================
# Command: init
# =============================================================================

@app.command()
def init(ctx: typer.Context):
    """
    🪝 Configura os hooks do repositório

    Exemplos:

    \b
    # Repositório atual
    cpt-hook init

    \b
    # Outro repositório
    cpt-hook -r ../my-crate init
    """

    try:
        pipeline = _build_pipeline(ctx)
        results = pipeline.init()
    except CptHookError as e:
        console.print(f"❌ {escape(str(e))}", style="bold red")
        raise typer.Exit(1)

    if ctx.obj["verbose"]:
        print_sync_summary(results)


# =============================================================================
# Command: run
# =============================================================================

@app.command()
def run(
    ctx: typer.Context,
    hook: Optional[str] = typer.Option(
        None,
        "--hook",
        help="Hook que disparou: pre-commit, pre-push"
    ),
):
    """
    ▶️ Roda as verificações de um hook (chamado pelos dispatcher scripts)

    Exemplo:

    \b
    cpt-hook run --hook pre-commit
    """

    try:
        pipeline = _build_pipeline(ctx)
        report = pipeline.run(hook)
    except CptHookError as e:
        console.print(f"❌ {escape(str(e))}", style="bold red")
        raise typer.Exit(1)

    raise typer.Exit(report.exit_code)


# =============================================================================
# Command: status
# =============================================================================

@app.command()
def status(ctx: typer.Context):
    """
    📊 Mostra status dos git hooks

    Exemplo:

    \b
    cpt-hook status
    """

    try:
        git_dir = resolve_git_dir(ctx.obj["repository"])
    except CptHookError as e:
        console.print(f"❌ {escape(str(e))}", style="bold red")
        raise typer.Exit(1)

    print_status(HookScriptManager(git_dir).status(), git_dir, console=console)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
