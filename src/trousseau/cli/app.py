"""
Trousseau CLI.

Usage:
    trousseau generate [--count N] [--output FILE]
    trousseau balance ADDRESS [--commitment LEVEL] [--timeout SECONDS]
    trousseau accounts [--file FILE]
"""

import sys

import click
from pydantic import ValidationError

from trousseau.config.settings import load_config
from trousseau.di.container import Container
from trousseau.domain.exceptions import TrousseauException
from trousseau.domain.value_objects.commitment import Commitment


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML config file",
)
@click.option("--env", "-e", default=None, help="Environment name")
@click.pass_context
def cli(ctx, config, env):
    """Trousseau - Solana account generation and balance lookup."""
    try:
        settings = load_config(config_file=config, env=env)
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}")
    except FileNotFoundError as e:
        raise click.ClickException(str(e))
    ctx.obj = Container(settings)
    ctx.call_on_close(ctx.obj.close)


@cli.command()
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Number of accounts to generate (default: accounts_count)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Accounts JSON file (default: accounts_file)",
)
@click.pass_obj
def generate(container: Container, count, output):
    """Generate keypairs and save them to a JSON file."""
    if count is None:
        count = container.settings.accounts_count
    use_case = container.generate_accounts(output)
    path = use_case.account_store.path

    try:
        use_case.execute(count)
    except TrousseauException as e:
        click.echo(f"❌ {e.message}", err=True)
        sys.exit(1)

    click.echo(f"✅ Successfully generated and saved {count} accounts to {path}")


@cli.command()
@click.argument("address")
@click.option(
    "--commitment",
    type=click.Choice([level.value for level in Commitment]),
    default=None,
    help="Commitment level (default: from config)",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Request timeout in seconds",
)
@click.option("--rpc-url", default=None, help="Solana JSON-RPC endpoint")
@click.pass_obj
def balance(container: Container, address, commitment, timeout, rpc_url):
    """Print the SOL balance of ADDRESS."""
    overrides = {}
    if commitment:
        overrides["commitment"] = Commitment(commitment)
    if rpc_url:
        overrides["solana_rpc_url"] = rpc_url
    if overrides:
        container.settings = container.settings.model_copy(update=overrides)

    try:
        reading = container.get_balance().execute(address, timeout=timeout)
    except TrousseauException as e:
        click.echo(f"❌ {e.message}", err=True)
        sys.exit(1)

    click.echo(
        f"✅ Finished! The balance for the wallet at address "
        f"{reading.address} is {reading.sol} SOL!"
    )


@cli.command()
@click.option(
    "--file",
    "-f",
    "path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Accounts JSON file (default: accounts_file)",
)
@click.pass_obj
def accounts(container: Container, path):
    """List public keys stored in an accounts file."""
    store = container.account_store(path)

    try:
        record = store.load()
    except TrousseauException as e:
        click.echo(f"❌ {e.message}", err=True)
        sys.exit(1)

    for index, public_key in enumerate(record.public_keys(), start=1):
        click.echo(f"{index:>4}  {public_key}")
    click.echo(f"{len(record)} accounts in {store.path}")


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
