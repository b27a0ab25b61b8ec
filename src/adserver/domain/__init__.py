"""Domain layer: pure selection rules."""

from .selection import is_applicable, select_creative

__all__ = ["is_applicable", "select_creative"]
