"""Project configuration file for cpt-hook."""

CONFIG_FILENAME = ".cpt-hook.yaml"

__all__ = ["CONFIG_FILENAME"]
