"""Registry layer for invoicero."""

from invoicero.registry.base import EntityResolver, resolve_entity
from invoicero.registry.ares import AresResolver
from invoicero.registry.factories import create_ares_resolver

__all__ = ["EntityResolver", "resolve_entity", "AresResolver", "create_ares_resolver"]
