"""Helpers that are not part of the sync pipeline itself."""

from .env_manager import EnvManager

__all__ = ["EnvManager"]
