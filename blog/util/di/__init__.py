"""Dependency injection wiring.

Every provider base in ``PROVIDERS`` is either concrete (used as is) or a
swappable component base whose subclasses are one production and one mock
implementation, told apart by ``__is_mock__``.
"""

from typing import Type

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ConfigProvider, ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    ConfigProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider base.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Whether the mock implementation is wanted

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If a component has no implementation of the wanted kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "ConfigProvider",
    "PersistenceProvider",
    "ProdConfigProvider",
    "ProdPersistenceProvider",
]
