"""
cpt-hook - Cargo Actions
Verificações para projetos Rust (cargo fmt, cargo test).
"""

from .base import Action


class FormatCheck(Action):
    """Verifica formatação; falha se houver diff ou se o cargo não existir."""
    key = "format-check"
    label = "Format check (cargo fmt)"
    manifest = "Cargo.toml"
    default_command = ["cargo", "fmt", "--", "--check"]


class TestRun(Action):
    """Roda a suíte de testes; falha em qualquer teste quebrado."""
    # Evita que o pytest tente coletar esta classe
    __test__ = False

    key = "test-run"
    label = "Test suite (cargo test)"
    manifest = "Cargo.toml"
    default_command = ["cargo", "test"]


__all__ = ["FormatCheck", "TestRun"]
