# catr/config/__init__.py
# Configuration exports

from .settings import CatSettings

__all__ = ["CatSettings"]
