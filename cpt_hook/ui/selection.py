"""
cpt-hook - Interactive Selection
Apresenta uma lista de opções e devolve os índices escolhidos.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..core.models import CptHookError


class SelectionUnavailableError(CptHookError):
    """Não há terminal de onde ler a seleção do usuário."""
    pass


class Selector(ABC):
    """
    Fronteira de seleção usada pelo pipeline.

    Dada uma lista ordenada de labels, retorna os índices escolhidos
    (0-based, na ordem apresentada).
    """

    @abstractmethod
    def select(self, prompt: str, options: Sequence[str]) -> List[int]:
        pass


class RichSelector(Selector):
    """
    Multi-seleção no terminal com rich.

    O usuário digita os números separados por vírgula ou espaço,
    `all` para tudo, ou Enter vazio para nada.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def select(self, prompt: str, options: Sequence[str]) -> List[int]:
        if not options:
            return []

        self.console.print(f"\n[bold cyan]{escape(prompt)}[/bold cyan]")
        for number, option in enumerate(options, start=1):
            self.console.print(f"  [yellow]{number}[/yellow]) {escape(option)}")

        while True:
            try:
                answer = Prompt.ask(
                    "Números separados por vírgula ([bold]all[/bold] = todos, Enter = nenhum)",
                    default="",
                    show_default=False,
                    console=self.console,
                )
            except EOFError:
                raise SelectionUnavailableError(
                    "Nenhum terminal disponível para a seleção (stdin encerrado)"
                )

            indices = parse_selection(answer, len(options))
            if indices is not None:
                return indices

            self.console.print(
                f"[red]Seleção inválida: {escape(repr(answer))}. Use números de 1 a {len(options)}.[/red]"
            )


def parse_selection(answer: str, total: int) -> Optional[List[int]]:
    """
    Converte a resposta do usuário em índices 0-based.

    Args:
        answer: Texto digitado (ex: "1, 3", "all", "")
        total: Quantidade de opções

    Returns:
        Índices ordenados e sem repetição, ou None se a resposta for inválida
    """
    answer = answer.strip().lower()

    if not answer:
        return []

    if answer in ("all", "a", "*"):
        return list(range(total))

    chosen = set()
    for token in re.split(r"[,\s]+", answer):
        if not token:
            continue
        if not token.isdigit():
            return None
        number = int(token)
        if not 1 <= number <= total:
            return None
        chosen.add(number - 1)

    return sorted(chosen)


__all__ = [
    "Selector",
    "SelectionUnavailableError",
    "RichSelector",
    "parse_selection",
]
