"""Dependency injection module.

Concrete providers are used as-is. Component providers (Flickr, persistence)
have one production and one mock subclass; which one is used is chosen per
container by component name.
"""

from typing import Collection, Type

from puppies.util.di.application import ProdApplicationProvider
from puppies.util.di.base import Component, ProviderBase
from puppies.util.di.core import ProdConfigProvider
from puppies.util.di.domain import ProdDomainProvider
from puppies.util.di.infrastructure import (
    FlickrProvider,
    PersistenceProvider,
    ProdFlickrProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    FlickrProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have swappable implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class that should be instantiated.

    Mock subclasses register themselves by being imported, so the mock
    variant is only available once ``tests.di`` has been loaded.

    Raises:
        ValueError: If the requested variant of a component is not defined
    """
    if base.__mock_component__ is None:
        return base

    variants = {sub.__is_mock__: sub for sub in base.__subclasses__()}
    if use_mock not in variants:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")

    return variants[use_mock]


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider, using mocks for the named components.

    Args:
        mocked: Components to replace with their mock implementation

    Raises:
        ValueError: If a named component is unknown or has no mock
    """
    unknown = set(mocked) - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "FlickrProvider",
    "PersistenceProvider",
    "ProdFlickrProvider",
    "ProdPersistenceProvider",
]
