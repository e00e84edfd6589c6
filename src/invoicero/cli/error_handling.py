"""CLI helpers for error reporting and registry resolution."""

from __future__ import annotations

import click

from invoicero.domain.entity import Entity
from invoicero.domain.errors import DomainError, RegistryUnavailableError
from invoicero.registry.base import EntityResolver, resolve_entity


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print an error and exit with status 1.

    Registry outages get a hint, because the usual fix is a different
    ARES endpoint rather than different input.
    """
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, RegistryUnavailableError):
        click.echo("Hint: set --ares-url or INVOICERO_ARES_URL to use another registry endpoint", err=True)
    ctx.exit(1)


def resolve_entity_or_exit(
    ctx: click.Context, resolver: EntityResolver, registration_number: str
) -> Entity:
    """Resolve a registration number, or exit with a CLI error."""
    try:
        return resolve_entity(registration_number, resolver)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
