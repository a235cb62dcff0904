"""Infrastructure providers."""

# Import bases
from .local_store import LocalStoreProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .local_store import ProdLocalStoreProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "LocalStoreProvider",
    "PersistenceProvider",
    "ProdLocalStoreProvider",
    "ProdPersistenceProvider",
]
