"""
Command-line interface for standing calculations.

Usage:
    relative-standing percentile 25 10 20 30 40
    relative-standing percentile 12.5 10 20 30 --lower-is-better
    relative-standing value-at 75 10 20 30 40
    relative-standing rank 20 10 20 30 --metric turnovers
    relative-standing summary 10 20 30 40 50
"""

from __future__ import annotations

import functools
import logging
import sys
from decimal import Decimal
from typing import Callable, Optional

import click

from .core.config import get_settings
from .core.errors import StandingError
from .formatting import add_ordinal, format_two_decimal_places_if_they_exist
from .percentiles import (
    StandingsCalculator,
    percentile_of,
    rank_of,
    resolve_direction,
    value_at_percentile,
)

logger = logging.getLogger(__name__)

# Negative sample values ("-5") must reach the arguments, not the option parser
_COMMAND_SETTINGS = {"ignore_unknown_options": True}


def _format_decimal(value: Decimal) -> str:
    return format(value.normalize(), "f")


def _direction(higher: bool, lower: bool, metric: Optional[str]) -> bool:
    if higher and lower:
        raise click.UsageError("--higher-is-better and --lower-is-better are mutually exclusive")
    flag = True if higher else False if lower else None
    return resolve_direction(flag, metric)


def direction_options(func: Callable) -> Callable:
    """Add --higher-is-better/--lower-is-better/--metric and pass the resolved direction."""

    @click.option("--higher-is-better", "higher", is_flag=True, help="Rank larger values first")
    @click.option("--lower-is-better", "lower", is_flag=True, help="Rank smaller values first")
    @click.option("--metric", default=None, help="Take the direction from the metric registry")
    @functools.wraps(func)
    def wrapper(*args, higher: bool, lower: bool, metric: Optional[str], **kwargs):
        kwargs["higher_is_better"] = _direction(higher, lower, metric)
        return func(*args, **kwargs)

    return wrapper


def _fail(error: StandingError) -> None:
    logger.debug("Calculation failed: %s (%s)", error.message, error.code)
    click.echo(f"ERROR: {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=get_settings().app_version, prog_name="relative-standing")
def cli(verbose: bool):
    """Percentile, value-at-percentile and rank of values within a sample."""
    settings = get_settings()
    level = "DEBUG" if verbose or settings.debug else settings.log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.command(context_settings=_COMMAND_SETTINGS)
@click.argument("value")
@click.argument("sample", nargs=-1, required=True)
@direction_options
def percentile(value: str, sample: tuple[str, ...], higher_is_better: bool):
    """Print the percentile (0-100) of VALUE within SAMPLE."""
    try:
        result = percentile_of(sample, value, higher_is_better)
    except StandingError as e:
        _fail(e)
    else:
        click.echo(result)


@cli.command("value-at", context_settings=_COMMAND_SETTINGS)
@click.argument("percentile_value", metavar="PERCENTILE")
@click.argument("sample", nargs=-1, required=True)
@direction_options
def value_at(percentile_value: str, sample: tuple[str, ...], higher_is_better: bool):
    """Print the value found at PERCENTILE of SAMPLE."""
    try:
        result = value_at_percentile(sample, percentile_value, higher_is_better)
    except StandingError as e:
        _fail(e)
    else:
        click.echo(_format_decimal(result))


@cli.command(context_settings=_COMMAND_SETTINGS)
@click.argument("value")
@click.argument("sample", nargs=-1, required=True)
@direction_options
def rank(value: str, sample: tuple[str, ...], higher_is_better: bool):
    """Print the rank of VALUE within SAMPLE (1st = best)."""
    try:
        result = rank_of(sample, value, higher_is_better)
    except StandingError as e:
        _fail(e)
    else:
        click.echo(f"{add_ordinal(result)} of {len(sample)}")


@cli.command(context_settings=_COMMAND_SETTINGS)
@click.argument("sample", nargs=-1, required=True)
@direction_options
def summary(sample: tuple[str, ...], higher_is_better: bool):
    """Print the best, quartile and worst values of SAMPLE."""
    try:
        result = StandingsCalculator().summarize_sample(sample, higher_is_better)
    except StandingError as e:
        _fail(e)
    else:
        direction = "higher is better" if result.higher_is_better else "lower is better"
        click.echo(f"Sample size: {result.sample_size} ({direction})")
        for label, value in (
            ("best", result.best),
            ("p75", result.p75),
            ("median", result.median),
            ("p25", result.p25),
            ("worst", result.worst),
        ):
            click.echo(f"  {label}: {format_two_decimal_places_if_they_exist(value)}")


if __name__ == "__main__":
    cli()
