"""
seedkeys CLI - Print deterministic fixture keys for test suites.
"""

from __future__ import annotations

import sys

import typer
from loguru import logger

from seedkeys.config import get_settings
from seedkeys.derivation import SeedKeyError, derive_keys, seed_range
from seedkeys.models import FixtureSet
from seedkeys.script import (
    create_multisig_redeem_script,
    majority_threshold,
    script_to_p2wsh_address,
)

app = typer.Typer(
    name="seedkeys",
    help="Deterministic secp256k1 test keys from seed strings",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def _emit(fixture: FixtureSet, json_output: bool | None) -> None:
    if json_output is None:
        json_output = get_settings().output_format == "json"
    if json_output:
        typer.echo(fixture.model_dump_json(indent=2))
    elif fixture.keys or fixture.redeem_script:
        typer.echo(fixture.to_text())


def _derive_fixture(seeds: list[str], sort: bool | None) -> FixtureSet:
    if sort is None:
        sort = get_settings().sort_keys
    try:
        keys = derive_keys(seeds, sorted=sort)
    except SeedKeyError as e:
        logger.error(f"Key derivation failed: {e}")
        raise typer.Exit(1)
    return FixtureSet.from_keypairs(keys, sorted=sort)


@app.command()
def derive(
    seeds: list[str] | None = typer.Argument(None, help="Seed strings, one key per seed"),
    sort: bool | None = typer.Option(
        None, "--sorted/--unsorted", help="Order keys by compressed public key"
    ),
    json_output: bool | None = typer.Option(None, "--json/--text", help="Output format"),
    log_level: str | None = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Derive one keypair per seed."""
    setup_logging(log_level or get_settings().log_level)
    _emit(_derive_fixture(seeds or [], sort), json_output)


@app.command("range")
def range_(
    prefix: str = typer.Argument(..., help="Seed prefix, e.g. 'fed'"),
    count: int = typer.Argument(..., help="Number of seeds"),
    start: int = typer.Option(1, "--start", help="First seed index"),
    sort: bool | None = typer.Option(None, "--sorted/--unsorted"),
    json_output: bool | None = typer.Option(None, "--json/--text"),
    log_level: str | None = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Derive keys for numbered seeds PREFIX<start>..PREFIX<start+count-1>."""
    setup_logging(log_level or get_settings().log_level)

    try:
        seeds = seed_range(prefix, count, start)
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    _emit(_derive_fixture(seeds, sort), json_output)


@app.command()
def multisig(
    prefix: str = typer.Argument(..., help="Seed prefix, e.g. 'fed'"),
    count: int = typer.Argument(..., help="Number of federation keys"),
    threshold: int | None = typer.Option(
        None, "--threshold", "-m", help="Required signatures (default: majority)"
    ),
    network: str | None = typer.Option(None, "--network", "-n", help="Address network"),
    json_output: bool | None = typer.Option(None, "--json/--text"),
    log_level: str | None = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Build a sorted multisig redeem script and its P2WSH address."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    try:
        seeds = seed_range(prefix, count)
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if threshold is None:
        threshold = majority_threshold(count)

    try:
        keys = derive_keys(seeds, sorted=True)
        redeem_script = create_multisig_redeem_script(threshold, keys)
        address = script_to_p2wsh_address(redeem_script, network or settings.network)
    except (SeedKeyError, ValueError) as e:
        logger.error(f"Cannot build multisig: {e}")
        raise typer.Exit(1)

    logger.info(f"{threshold}-of-{count} multisig for seeds {seeds[0]}..{seeds[-1]}")
    fixture = FixtureSet.from_keypairs(keys, sorted=True)
    fixture.threshold = threshold
    fixture.redeem_script = redeem_script.hex()
    fixture.address = address
    _emit(fixture, json_output)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
