import math
import logging
from collections.abc import Sequence

from .models import MetricsCallback, Stats, Summary

logger = logging.getLogger(__name__)


def compute_stats(
    summaries: Sequence[Summary],
    samples_per_worker: int,
    metrics_callback: MetricsCallback | None = None,
) -> Stats:
    totals = [s.result for s in summaries]
    n = len(totals)
    logger.debug(f"Computing stats: workers={n}, samples_per_worker={samples_per_worker}")

    if n == 0:
        stats_dict = {
            "workers": 0,
            "samples_per_worker": samples_per_worker,
            "grand_total": 0,
            "mean": None,
            "std": None,
            "min": None,
            "max": None,
            "spread": None,
        }
        if metrics_callback:
            metrics_callback(stats_dict)
        logger.info("No workers recorded. Returning empty stats.")
        return Stats(**stats_dict)

    grand_total = sum(totals)
    mean = grand_total / n
    sum_sq = sum(x * x for x in totals)
    std = math.sqrt(max(0.0, (sum_sq / n) - (mean * mean)))
    lo, hi = min(totals), max(totals)

    stats_dict = {
        "workers": n,
        "samples_per_worker": samples_per_worker,
        "grand_total": grand_total,
        "mean": mean,
        "std": std,
        "min": lo,
        "max": hi,
        "spread": hi - lo,
    }

    if metrics_callback:
        metrics_callback(stats_dict)

    logger.info(
        f"Stats computed: workers={n}, grand_total={grand_total}, "
        f"mean={mean:.1f}, std={std:.1f}, spread={hi - lo}"
    )

    return Stats(**stats_dict)
