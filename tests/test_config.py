"""Tests for the project configuration loader."""

import pytest

from cpt_hook.core.config_loader import ConfigLoader, ConfigLoadError, load_config
from cpt_hook.core.models import DEFAULT_COMMAND


@pytest.fixture
def loader():
    return ConfigLoader(["format-check", "test-run"])


def test_missing_file_gives_defaults(repo):
    config = load_config(repo)

    assert config.command == DEFAULT_COMMAND
    assert config.disabled_actions == []
    assert config.commands == {}


def test_empty_file_gives_defaults(repo):
    (repo / ".cpt-hook.yaml").write_text("")

    assert load_config(repo).command == DEFAULT_COMMAND


def test_full_file(repo):
    (repo / ".cpt-hook.yaml").write_text(
        "command: cpt-hook-dev\n"
        "disabled_actions: [test-run]\n"
        "commands:\n"
        "  format-check: cargo fmt --all -- --check\n"
    )

    config = load_config(repo)

    assert config.command == "cpt-hook-dev"
    assert not config.is_action_enabled("test-run")
    assert config.command_for("format-check") == ["cargo", "fmt", "--all", "--", "--check"]
    assert config.command_for("test-run") is None


def test_invalid_yaml(repo):
    (repo / ".cpt-hook.yaml").write_text("command: [unclosed\n")

    with pytest.raises(ConfigLoadError):
        load_config(repo)


@pytest.mark.parametrize("data", [
    ["not", "a", "mapping"],
    {"unknown": 1},
    {"command": 3},
    {"command": "   "},
    {"disabled_actions": "test-run"},
    {"disabled_actions": ["lint"]},
    {"commands": ["cargo"]},
    {"commands": {"format-check": []}},
    {"commands": {"clippy": ["cargo", "clippy"]}},
])
def test_invalid_content(loader, data):
    with pytest.raises(ConfigLoadError):
        loader.load_from_dict(data, source_file=".cpt-hook.yaml")


def test_error_mentions_source_file(loader):
    with pytest.raises(ConfigLoadError, match="custom.yaml"):
        loader.load_from_dict({"unknown": 1}, source_file="custom.yaml")
