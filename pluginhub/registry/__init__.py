# Static registry of community and commercial system plugins
from .store import SystemPluginRegistry

__all__ = ['SystemPluginRegistry']
