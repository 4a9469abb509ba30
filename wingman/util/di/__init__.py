"""Dependency injection wiring.

Config, domain services and use cases have a single provider each. Email and
persistence are swappable components: the base provider declares what the
component provides, and one production and one mock subclass implement it.
"""

from typing import Type

from wingman.util.di.application import ProdApplicationProvider
from wingman.util.di.base import Component, ProviderBase
from wingman.util.di.core import ProdConfigProvider
from wingman.util.di.domain import ProdDomainProvider
from wingman.util.di.infrastructure import (
    EmailProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
)
from wingman.util.error import DependencyInjectionError

# Swappable components are listed by their base provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EmailProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve an entry of PROVIDERS to the class to instantiate.

    A provider without subclasses is returned unchanged. For a swappable
    component the subclass whose ``__is_mock__`` equals ``use_mock`` is
    chosen, e.g. ``MockPersistenceProvider`` (in-memory repositories) over
    ``ProdPersistenceProvider`` (PostgreSQL).

    Raises:
        DependencyInjectionError: If the component has no matching subclass
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "EmailProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]
