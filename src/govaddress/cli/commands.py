"""CLI commands for govaddress."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import click
import pandas as pd

from govaddress import (
    DEFAULT_OVERRIDES,
    Address,
    AddressExtractor,
    CheckpointError,
    CheckpointStore,
    Entity,
    ExtractionError,
    LineEditor,
    OverrideTable,
    StandardizationClient,
    StandardizationError,
    ValidatorUnavailableError,
    filter_noise,
    normalize_text,
)


@click.group()
@click.version_option(package_name="govaddress")
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool):
    """Govaddress: extract and standardize US government office addresses."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("lines_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--first-name", default="", help="First name, to select per-entity overrides")
@click.option("--last-name", default="", help="Last name, to select per-entity overrides")
@click.option(
    "--overrides",
    "overrides_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Extra overrides JSON file",
)
def extract(lines_file: str, first_name: str, last_name: str, overrides_file: Optional[str]):
    """Extract addresses from a text file with one scraped line per row."""
    overrides = DEFAULT_OVERRIDES
    if overrides_file:
        overrides = overrides.merged(OverrideTable.from_json(overrides_file))

    raw = Path(lines_file).read_text().splitlines()
    entity = Entity(first_name=first_name, last_name=last_name)
    lines = overrides.apply(entity.identity, normalize_text(filter_noise(raw)))
    lines = LineEditor().edit(lines)

    try:
        addresses = AddressExtractor().extract(lines)
    except ExtractionError as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps([address.to_dict() for address in addresses], indent=2))


@cli.command()
@click.argument("address1")
@click.argument("city")
@click.argument("state")
@click.option("--address2", help="Secondary address line")
@click.option("--zip", "zip_code", default="", help="5 or 5+4 digit zip code")
def standardize(address1: str, city: str, state: str, address2: Optional[str], zip_code: str):
    """Standardize a single address against the USPS lookup."""
    address = Address(
        address1=address1.upper(),
        address2=address2.upper() if address2 else None,
        city=city.upper(),
        state=state.upper(),
        zip=zip_code,
    )
    asyncio.run(_standardize_async(address))


async def _standardize_async(address: Address):
    """Async implementation of standardize command."""
    async with StandardizationClient() as client:
        try:
            result = await client.standardize(address)
        except (StandardizationError, ValidatorUnavailableError) as e:
            raise click.ClickException(str(e))
    click.echo(json.dumps(result.to_dict(), indent=2))


def _load_checkpoint(path: str):
    """Load a checkpoint or fail with a CLI error."""
    try:
        return CheckpointStore(path).load()
    except CheckpointError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("checkpoint", type=click.Path(exists=True, dir_okay=False))
def status(checkpoint: str):
    """Show progress recorded in a checkpoint file."""
    collection = _load_checkpoint(checkpoint)
    if collection is None:
        raise click.ClickException(f"No checkpoint at {checkpoint}")

    resolved = collection.resolved()
    pending = collection.pending()
    click.echo(f"\n{collection.name} ({collection.role.value})")
    click.echo(f"  Resolved: {len(resolved)}/{len(collection.entities)}")
    click.echo(f"  Pending:  {len(pending)}")
    for entity in pending:
        click.echo(f"    {entity.display_name}")


@cli.command()
@click.argument("checkpoint", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_file", type=click.Path())
def export(checkpoint: str, output_file: str):
    """Write resolved addresses to CSV or Parquet, one row per address."""
    collection = _load_checkpoint(checkpoint)
    if collection is None:
        raise click.ClickException(f"No checkpoint at {checkpoint}")

    rows = [
        {"first_name": entity.first_name, "last_name": entity.last_name, **address.to_dict()}
        for entity in collection.resolved()
        for address in entity.addresses or []
    ]
    columns = ["first_name", "last_name", "address1", "address2", "city", "state", "zip"]
    df = pd.DataFrame(rows, columns=columns)

    output_path = Path(output_file)
    if output_path.suffix == ".parquet":
        df.to_parquet(output_path)
    else:
        df.to_csv(output_path, index=False)

    click.echo(f"Exported {len(df)} addresses -> {output_file}")


if __name__ == "__main__":
    cli()
