"""Command-line interface for blickline.

Small inspection tools over the time axis and automation curves:

- ``convert``: blick / quarter / second conversion under a tempo map
- ``measures``: measure numbers and effective signatures under a signature map
- ``simplify``: simplify a two-column point file with CurveStore.simplify
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

import numpy as np
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blickline.core.config.loader import configure_logging, load_app_config
from blickline.core.config.models import AppConfig
from blickline.core.curves.store import CurveStore
from blickline.core.errors import BlicklineError
from blickline.core.timing.time_axis import TimeAxis
from blickline.core.timing.units import blick_to_quarter, quarter_to_blick

console = Console()
logger = logging.getLogger(__name__)


# ============================================================================
# Argument types
# ============================================================================


def parse_tempo(text: str) -> tuple[float, float]:
    """Parse ``QUARTER:BPM`` (e.g. ``16:90``)."""
    try:
        position, bpm = text.split(":")
        return float(position), float(bpm)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected QUARTER:BPM, got {text!r}") from e


def parse_signature(text: str) -> tuple[int, int, int]:
    """Parse ``MEASURE:NUM/DEN`` (e.g. ``4:3/4``)."""
    try:
        measure, signature = text.split(":")
        numerator, denominator = signature.split("/")
        return int(measure), int(numerator), int(denominator)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected MEASURE:NUM/DEN, got {text!r}") from e


# ============================================================================
# Commands
# ============================================================================


def build_time_axis(
    config: AppConfig,
    tempos: list[tuple[float, float]],
    signatures: list[tuple[int, int, int]],
) -> TimeAxis:
    """Build a TimeAxis from config defaults plus command-line marks."""
    axis = TimeAxis.from_config(config.time_axis)
    for quarter, bpm in tempos:
        axis.add_tempo_mark(quarter_to_blick(quarter), bpm)
    for measure, numerator, denominator in signatures:
        axis.add_measure_mark(measure, numerator, denominator)
    return axis


def run_convert(args: argparse.Namespace, config: AppConfig) -> int:
    """Print blick/quarter/second equivalents for each requested position."""
    axis = build_time_axis(config, args.tempo, args.signature)

    positions: list[tuple[str, int]] = []
    positions += [(f"{b} blk", b) for b in args.blick]
    positions += [(f"{q} q", quarter_to_blick(q)) for q in args.quarter]
    positions += [(f"{s} s", axis.get_blick_from_seconds(s)) for s in args.seconds]

    if not positions:
        console.print("[yellow]Nothing to convert (use --blick, --quarter or --seconds)[/yellow]")
        return 1

    table = Table(title="Time conversion")
    table.add_column("Input")
    table.add_column("Blicks", justify="right")
    table.add_column("Quarters", justify="right")
    table.add_column("Seconds", justify="right")
    table.add_column("Measure", justify="right")
    table.add_column("BPM", justify="right")

    for label, blick in positions:
        table.add_row(
            label,
            str(blick),
            f"{blick_to_quarter(blick):.6g}",
            f"{axis.get_seconds_from_blick(blick):.6f}",
            str(axis.get_measure_at(blick)),
            f"{axis.get_tempo_mark_at(blick).bpm:g}",
        )

    console.print(table)
    return 0


def run_measures(args: argparse.Namespace, config: AppConfig) -> int:
    """Print measure numbers for positions, or the signature map itself."""
    axis = build_time_axis(config, args.tempo, args.signature)

    if not args.quarter:
        table = Table(title="Measure marks")
        table.add_column("Measure", justify="right")
        table.add_column("Quarter", justify="right")
        table.add_column("Signature")
        for mark in axis.get_all_measure_marks():
            table.add_row(
                str(mark.position), f"{blick_to_quarter(mark.position_blick):g}", mark.signature
            )
        console.print(table)
        return 0

    table = Table(title="Measures")
    table.add_column("Quarter", justify="right")
    table.add_column("Measure", justify="right")
    table.add_column("Measure start (q)", justify="right")
    table.add_column("Signature")
    for quarter in args.quarter:
        blick = quarter_to_blick(quarter)
        measure = axis.get_measure_at(blick)
        mark = axis.get_measure_mark_at(measure)
        start = axis.get_measure_start_blick(measure)
        table.add_row(f"{quarter:g}", str(measure), f"{blick_to_quarter(start):g}", mark.signature)

    console.print(table)
    return 0


def run_simplify(args: argparse.Namespace, config: AppConfig) -> int:
    """Simplify a point file and print (and optionally save) the result."""
    points_path = Path(args.points).resolve()
    if not points_path.exists():
        console.print(f"[red]ERROR: Points file not found: {points_path}[/red]")
        return 1

    try:
        data = np.loadtxt(points_path, ndmin=2)
    except ValueError as e:
        console.print(f"[red]ERROR: Could not read {points_path.name}: {escape(str(e))}[/red]")
        return 1

    if data.size == 0:
        console.print("[yellow]Points file is empty[/yellow]")
        return 0
    if data.shape[1] != 2:
        console.print(
            f"[red]ERROR: Expected two columns (position value), got {data.shape[1]}[/red]"
        )
        return 1

    store = CurveStore(args.type, args.interpolation or config.curves.interpolation)
    for position, value in data:
        store.add(position, float(value))

    points = store.get_all_points()
    begin = args.begin if args.begin is not None else points[0][0]
    end = args.end if args.end is not None else points[-1][0]
    threshold = args.threshold if args.threshold is not None else config.curves.simplify_threshold

    before = len(store)
    changed = store.simplify(begin, end, threshold)
    logger.info(f"Simplified {points_path.name}: {before} -> {len(store)} points")

    table = Table(title=f"{store.get_definition().display_name} ({len(store)} of {before} points)")
    table.add_column("Position", justify="right")
    table.add_column("Value", justify="right")
    for position, value in store.get_all_points():
        table.add_row(str(position), f"{value:g}")
    console.print(table)

    if args.out:
        out_path = Path(args.out).resolve()
        np.savetxt(out_path, np.array(store.get_all_points(), dtype=np.float64), fmt=["%d", "%.9g"])
        console.print(f"[green]Saved:[/green] {out_path}")

    if not changed:
        console.print("[yellow]No points removed[/yellow]")
    return 0


# ============================================================================
# Entry point
# ============================================================================


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="blickline",
        description="blickline - tempo maps, measures and automation curves in blicks",
    )
    p.add_argument("--config", default=None, help="Path to app config (YAML or JSON)")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_axis_args(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument(
            "--tempo",
            type=parse_tempo,
            action="append",
            default=[],
            help="Tempo mark QUARTER:BPM (repeatable)",
        )
        cmd.add_argument(
            "--signature",
            type=parse_signature,
            action="append",
            default=[],
            help="Measure mark MEASURE:NUM/DEN (repeatable)",
        )

    convert = sub.add_parser("convert", help="Convert between blicks, quarters and seconds")
    add_axis_args(convert)
    convert.add_argument(
        "--blick", type=int, action="append", default=[], help="Position in blicks"
    )
    convert.add_argument(
        "--quarter", type=float, action="append", default=[], help="Position in quarters"
    )
    convert.add_argument(
        "--seconds", type=float, action="append", default=[], help="Position in seconds"
    )

    measures = sub.add_parser("measures", help="Show measure numbers and signatures")
    add_axis_args(measures)
    measures.add_argument(
        "--quarter", type=float, action="append", default=[], help="Position in quarters"
    )

    simplify = sub.add_parser("simplify", help="Simplify an automation point file")
    simplify.add_argument("points", help="Whitespace-separated 'position value' rows")
    simplify.add_argument("--type", required=True, help="Parameter type (e.g. pitchDelta)")
    simplify.add_argument("--threshold", type=float, default=None, help="Simplify threshold")
    simplify.add_argument(
        "--interpolation",
        default=None,
        help="Interpolation method (Linear, Cosine, Cubic); defaults to the configured method",
    )
    simplify.add_argument("--begin", type=int, default=None, help="Range start (blicks)")
    simplify.add_argument("--end", type=int, default=None, help="Range end (blicks)")
    simplify.add_argument("--out", default=None, help="Write retained points to this file")

    return p


COMMANDS = {
    "convert": run_convert,
    "measures": run_measures,
    "simplify": run_simplify,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, BlicklineError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    configure_logging(config)

    try:
        return COMMANDS[args.cmd](args, config)
    except (BlicklineError, ValidationError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
