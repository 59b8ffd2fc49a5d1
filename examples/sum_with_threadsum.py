"""
Quick sanity run: fan out a few workers and print their totals.
Run: uv run examples/sum_with_threadsum.py
"""
import os

from threadsum import SumCoordinator
from threadsum.metrics import compute_stats
from threadsum.rendering import render_report, render_timeline

THREADS = int(os.getenv("THREADSUM_THREADS", "6"))


def main():
    samples, lo, hi = 10_000, 1, 6
    coord = SumCoordinator(THREADS, samples, lo, hi)
    coord.run_all()

    rows = coord.summaries()
    print(render_report(rows, coord.best(), samples, lo, hi))
    print()
    print(render_timeline(coord.timeline(), width=60))
    print("\nStats:", compute_stats(rows, samples))


if __name__ == "__main__":
    main()
