#!/usr/bin/env python3
# cli.py — command-line entry point for threadsum

import argparse
import logging

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from threadsum.config import RunSettings
from threadsum.coordinator import SumCoordinator
from threadsum.errors import InvalidConfiguration
from threadsum.logging_config import setup_logging
from threadsum.metrics import compute_stats
from threadsum.rendering import render_report, render_timeline, render_totals_chart


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="threadsum",
        description="Sum random integers on parallel worker threads and report the winner",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Run parameters (defaults come from THREADSUM_* / .env, then built-ins)
    parser.add_argument(
        "-t",
        "--threads",
        type=int,
        default=None,
        help="Number of worker threads [env: THREADSUM_THREADS, default 10]",
    )
    parser.add_argument(
        "-n",
        "--samples",
        type=int,
        default=None,
        help="Random draws per worker [env: THREADSUM_SAMPLES, default 100]",
    )
    parser.add_argument(
        "--min",
        dest="min_value",
        type=int,
        default=None,
        help="Inclusive lower bound [env: THREADSUM_MIN_VALUE, default 1]",
    )
    parser.add_argument(
        "--max",
        dest="max_value",
        type=int,
        default=None,
        help="Inclusive upper bound [env: THREADSUM_MAX_VALUE, default 1000]",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Read THREADSUM_* settings from this .env file",
    )

    # Extra output
    parser.add_argument(
        "--timeline",
        action="store_true",
        help="Print the per-worker execution timeline",
    )
    parser.add_argument(
        "--chart",
        action="store_true",
        help="Print a bar chart of per-worker totals",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )

    # Logging & Debugging
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable info-level logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Optional file to write logs to (e.g., threadsum.log)",
    )

    return parser


def run(coord: SumCoordinator, use_progress_bar: bool = True) -> None:
    if not use_progress_bar:
        coord.run_all()
        return

    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=Console(stderr=True),
        transient=True,
    )
    with progress:
        task_id = progress.add_task("[cyan]Summing...", total=len(coord))
        coord.run_all(on_task_done=lambda _task: progress.advance(task_id))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        log_level = "DEBUG"
    elif args.verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"
    setup_logging(level=log_level, log_file=args.log_file)

    try:
        settings = RunSettings.from_env(
            args.env_file,
            threads=args.threads,
            samples=args.samples,
            min_value=args.min_value,
            max_value=args.max_value,
        )
    except InvalidConfiguration as e:
        logging.error(f"Invalid configuration: {e}")
        parser.error(str(e))

    logging.info(
        f"Starting threadsum | threads={settings.threads} | samples={settings.samples} | "
        f"range=[{settings.min_value}, {settings.max_value}]"
    )

    coord = SumCoordinator.from_settings(settings)
    run(coord, use_progress_bar=not args.no_progress)

    rows = coord.summaries()
    print(render_report(rows, coord.best(), settings.samples, settings.min_value, settings.max_value))

    if args.chart:
        print()
        print(render_totals_chart(rows))
    if args.timeline:
        print()
        print(render_timeline(coord.timeline()))

    stats = compute_stats(rows, settings.samples)
    logging.info(
        f"Run completed: {stats.workers} workers | grand total {stats.grand_total} | "
        f"mean {stats.mean:.1f} | spread {stats.spread}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
