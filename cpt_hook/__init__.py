"""
cpt-hook - Interactive management of hooks in your Git repositories

Instala dispatcher scripts em .git/hooks e, quando um hook dispara,
deixa o usuário escolher quais verificações rodar.
"""

from .__version__ import __version__

__all__ = ["__version__"]
