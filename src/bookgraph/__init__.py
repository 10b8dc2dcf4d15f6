"""
bookgraph backend
GraphQL API for authors, books and users
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
