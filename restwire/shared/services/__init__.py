"""
Services

Ready-made resource handler implementations.

Usage:
======
    from restwire.shared.services import InMemoryResourceHandler
"""

from restwire.shared.services.memory_handler import InMemoryResourceHandler

__all__ = [
    "InMemoryResourceHandler",
]
