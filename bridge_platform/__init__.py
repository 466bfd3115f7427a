"""Persistent configuration for the game-server chat bridge."""

from .config import Settings, get_settings
from .models import Configuration
from .services.loader import LoadResult, load_configuration

__all__ = ["Configuration", "LoadResult", "Settings", "get_settings", "load_configuration"]
