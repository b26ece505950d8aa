"""Infrastructure providers."""

# Import bases
from .identity import IdentityAdapterProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .identity import ProdIdentityAdapterProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "IdentityAdapterProvider",
    "PersistenceProvider",
    "ProdIdentityAdapterProvider",
    "ProdPersistenceProvider",
]
