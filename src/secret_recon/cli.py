# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

"""Command line interface: solve share records or generate new ones."""

from __future__ import annotations

import logging
import random
from typing import Any, List, Optional, Tuple

import click

from .config import LOG_LEVELS, settings
from .decoder import MAX_BASE, MIN_BASE, from_decimal
from .errors import DecodingError, ReconstructionError
from .records import dump_records, load_records, parse_record
from .reconstruct import solve_many, verify_shares
from .shares import make_record, split_secret

_logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=settings.log_level,
    show_default=True,
)
def cli(log_level: str) -> None:
    """Reconstruct polynomial secrets from mixed-base share records."""
    _configure_logging(log_level.upper())


class SecretType(click.ParamType):
    """Non-negative decimal integer of any length."""

    name = "secret"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> int:
        if isinstance(value, int):
            return value
        try:
            result = from_decimal(value)
        except DecodingError:
            self.fail(f"{value!r} is not a decimal integer", param, ctx)
        if result < 0:
            self.fail("secret must be non-negative", param, ctx)
        return result


def _report_failure(label: str, exc: Exception) -> None:
    click.echo(f"error: {label}: {exc}", err=True)


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--fail-fast/--keep-going", default=settings.fail_fast, show_default=True)
@click.option("--verify", is_flag=True, help="Cross-check the secret over several k-subsets.")
@click.option("--verify-limit", type=click.IntRange(min=1), default=settings.verify_limit, show_default=True)
@click.pass_context
def solve(ctx: click.Context, files: Tuple[str, ...], fail_fast: bool, verify: bool, verify_limit: int) -> None:
    """Print the secret of every record found in FILES, one per line."""

    batch: List[Tuple[str, Any]] = []
    failed = False
    for path in files:
        try:
            batch.extend(load_records(path))
        except (OSError, ReconstructionError) as exc:
            _report_failure(path, exc)
            failed = True
            if fail_fast:
                ctx.exit(1)

    by_label = dict(batch)
    for outcome in solve_many(batch, fail_fast=fail_fast):
        if not outcome.ok:
            _report_failure(outcome.label, outcome.error)  # type: ignore[arg-type]
            failed = True
            continue
        click.echo(outcome.secret)
        if verify:
            report = verify_shares(parse_record(by_label[outcome.label]), limit=verify_limit)
            if not report.consistent:
                click.echo(
                    f"warning: {outcome.label}: {report.subsets_checked} subsets disagree "
                    f"({len(report.candidates)} distinct results)",
                    err=True,
                )
                failed = True
    if failed:
        ctx.exit(1)


@cli.command()
@click.argument("secret", type=SecretType())
@click.option("-n", "total", type=click.IntRange(min=1), required=True, help="Number of points.")
@click.option("-k", "threshold", type=click.IntRange(min=1), required=True, help="Points needed to recover.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option(
    "--base",
    "bases",
    multiple=True,
    type=click.IntRange(MIN_BASE, MAX_BASE),
    help="Allowed encoding base (repeatable, defaults to 2-36).",
)
@click.option("--format", "fmt", type=click.Choice(["json", "yaml"]), default="json", show_default=True)
def split(secret: int, total: int, threshold: int, seed: Optional[int], bases: Tuple[int, ...], fmt: str) -> None:
    """Generate a share record that reconstructs to SECRET."""

    if threshold > total:
        raise click.BadParameter("k must not exceed n", param_hint="-k")
    rng = random.Random(seed) if seed is not None else None
    points = split_secret(secret, n=total, k=threshold, rng=rng)
    allowed = bases or tuple(range(MIN_BASE, MAX_BASE + 1))
    record = make_record(points, k=threshold, bases=allowed, rng=rng)
    _logger.info("Generated %d points with threshold %d", total, threshold)
    click.echo(dump_records([record], fmt=fmt), nl=False)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
