"""Dependency injection module.

Every provider in ``PROVIDERS`` is either concrete (no subclasses, always
used as-is) or a component base whose subclasses are one production and one
mock implementation, told apart by ``__is_mock__``.
"""

from typing import Type

from commentary.util.di.application import ProdApplicationProvider
from commentary.util.di.base import Component, ProviderBase
from commentary.util.di.core import ProdConfigProvider
from commentary.util.di.domain import ProdDomainProvider
from commentary.util.di.infrastructure import (
    IdentityAdapterProvider,
    PersistenceProvider,
    ProdIdentityAdapterProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Concrete
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    IdentityAdapterProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Whether a component should use its mock implementation

    Returns:
        ``base`` itself if it is concrete, otherwise the matching subclass

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "IdentityAdapterProvider",
    "PersistenceProvider",
    "ProdIdentityAdapterProvider",
    "ProdPersistenceProvider",
]
