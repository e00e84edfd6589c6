"""Main CLI entry point."""

import logging

import click
from invoicero.registry.factories import create_ares_resolver

# Import and register all commands at module level
from invoicero.cli.commands import (
    check,
    create,
    lookup,
)


@click.group()
@click.option(
    "--ares-url",
    help="ARES REST base URL (overrides INVOICERO_ARES_URL environment variable)",
    envvar="INVOICERO_ARES_URL",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output, including registry requests")
@click.pass_context
def cli(ctx, ares_url: str | None, verbose: bool):
    """Invoicero - invoices for Czech and Slovak freelancers.

    Validates registration numbers and IBANs, looks companies up in the
    ARES registry and computes invoice totals with the payment QR payload.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Create the registry client only when actually running a command
    # (not when showing help); tests may provide their own resolver
    if ctx.invoked_subcommand is not None and "resolver" not in ctx.obj:
        try:
            ctx.obj["resolver"] = create_ares_resolver(base_url=ares_url)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


# Register all commands
check.register_commands(cli)
create.register_commands(cli)
lookup.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
