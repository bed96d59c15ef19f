"""
cpt-hook - Config Loader
Carrega e valida a configuração de projeto (.cpt-hook.yaml).
"""

from pathlib import Path
from typing import Dict, Any, List, Union
import yaml

from ..config import CONFIG_FILENAME
from .models import CptHookConfig, CptHookError


# =============================================================================
# Exceções Customizadas
# =============================================================================

class ConfigLoadError(CptHookError):
    """Erro ao carregar arquivo de configuração."""
    pass


# =============================================================================
# Loader Principal
# =============================================================================

KNOWN_FIELDS = {"command", "disabled_actions", "commands"}


class ConfigLoader:
    """
    Carrega e valida a configuração do YAML.

    Responsabilidades:
    - Ler arquivo YAML (ausente = defaults)
    - Validar estrutura e tipos
    - Validar keys de actions contra o registry
    """

    def __init__(self, known_actions: List[str]):
        """
        Args:
            known_actions: Keys das actions do registry
        """
        self.known_actions = list(known_actions)

    def load_from_file(self, filepath: Union[str, Path]) -> CptHookConfig:
        """
        Carrega configuração de um arquivo YAML.

        Args:
            filepath: Caminho para o arquivo

        Returns:
            CptHookConfig (defaults se o arquivo não existir)

        Raises:
            ConfigLoadError: Se o arquivo for ilegível ou inválido
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return CptHookConfig()

        if not filepath.is_file():
            raise ConfigLoadError(f"Path não é um arquivo: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Erro ao parsear YAML ({filepath}): {e}")
        except OSError as e:
            raise ConfigLoadError(f"Erro ao ler arquivo ({filepath}): {e}")

        return self.load_from_dict(data, source_file=str(filepath))

    def load_from_dict(self, data: Any, source_file: str = "unknown") -> CptHookConfig:
        """
        Carrega configuração de um dicionário (já parseado do YAML).

        Args:
            data: Conteúdo do YAML
            source_file: Nome do arquivo de origem (para mensagens)

        Returns:
            CptHookConfig validada
        """
        # Arquivo vazio
        if data is None:
            return CptHookConfig()

        if not isinstance(data, dict):
            raise ConfigLoadError(f"{source_file}: YAML deve conter um objeto no nível raiz")

        unknown = sorted(set(data) - KNOWN_FIELDS)
        if unknown:
            raise ConfigLoadError(
                f"{source_file}: campos desconhecidos: {', '.join(map(str, unknown))}. "
                f"Campos válidos: {sorted(KNOWN_FIELDS)}"
            )

        kwargs: Dict[str, Any] = {}

        if 'command' in data:
            command = data['command']
            if not isinstance(command, str):
                raise ConfigLoadError(f"{source_file}: 'command' deve ser uma string")
            kwargs['command'] = command

        if 'disabled_actions' in data:
            kwargs['disabled_actions'] = self._load_disabled(data['disabled_actions'], source_file)

        if 'commands' in data:
            kwargs['commands'] = self._load_commands(data['commands'], source_file)

        try:
            return CptHookConfig(**kwargs)
        except ValueError as e:
            raise ConfigLoadError(f"{source_file}: {e}")

    def _load_disabled(self, value: Any, source_file: str) -> List[str]:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigLoadError(f"{source_file}: 'disabled_actions' deve ser uma lista de strings")

        for key in value:
            self._check_action_key(key, source_file)

        return value

    def _load_commands(self, value: Any, source_file: str) -> Dict[str, List[str]]:
        if not isinstance(value, dict):
            raise ConfigLoadError(f"{source_file}: 'commands' deve ser um mapa action -> comando")

        commands: Dict[str, List[str]] = {}

        for key, argv in value.items():
            self._check_action_key(key, source_file)

            # Aceita string ("cargo fmt") ou lista
            if isinstance(argv, str):
                argv = argv.split()

            if not isinstance(argv, list) or not argv or not all(isinstance(a, str) for a in argv):
                raise ConfigLoadError(
                    f"{source_file}: comando de '{key}' deve ser uma string ou lista de strings não vazia"
                )

            commands[key] = argv

        return commands

    def _check_action_key(self, key: Any, source_file: str):
        if key not in self.known_actions:
            raise ConfigLoadError(
                f"{source_file}: action desconhecida: {key}. "
                f"Valores válidos: {self.known_actions}"
            )


# =============================================================================
# Helper Functions
# =============================================================================

def load_config(repo_path: Union[str, Path]) -> CptHookConfig:
    """
    Carrega .cpt-hook.yaml da raiz do repositório.

    Args:
        repo_path: Raiz do repositório

    Returns:
        CptHookConfig (defaults se não houver arquivo)
    """
    from ..actions.registry import action_keys

    loader = ConfigLoader(action_keys())
    return loader.load_from_file(Path(repo_path) / CONFIG_FILENAME)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'ConfigLoader',
    'ConfigLoadError',
    'load_config',
]
