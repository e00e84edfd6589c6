"""Registry lookup command."""

import click

from invoicero.cli.error_handling import resolve_entity_or_exit
from invoicero.cli.render import render_entity
from invoicero.domain.entity import EntityRole


@click.command("lookup")
@click.argument("registration_number", metavar="ICO")
@click.option(
    "--role",
    type=click.Choice(["contractor", "client"]),
    default="client",
    show_default=True,
    help="Heading to print above the entity",
)
@click.pass_context
def lookup_entity(ctx, registration_number: str, role: str):
    """Look up a company in the business registry.

    Examples:
        invoicero lookup 27082440
        invoicero lookup 679313 --role contractor
    """
    resolver = ctx.obj["resolver"]

    entity = resolve_entity_or_exit(ctx, resolver, registration_number)

    entity_role = EntityRole.CONTRACTOR if role == "contractor" else EntityRole.CLIENT
    for line in render_entity(entity, entity_role):
        click.echo(line)


def register_commands(cli):
    """Register lookup command with main CLI."""
    cli.add_command(lookup_entity)
