"""Node storage for expression trees."""

from .memory_pool import NodeArena

__all__ = ['NodeArena']
