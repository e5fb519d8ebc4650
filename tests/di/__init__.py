"""Test DI helpers.

The in-memory persistence provider ships with the application
(InMemoryPersistenceProvider) and doubles as the mock implementation.
"""

from .container import build_test_container

__all__ = [
    "build_test_container",
]
