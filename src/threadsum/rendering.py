from collections.abc import Sequence

from .models import Summary, TimelineType


def render_report(
    summaries: Sequence[Summary],
    best: Summary | None,
    samples: int,
    min_value: int,
    max_value: int,
) -> str:
    lines = [
        f"Resultados por hilo (suma de {samples} numeros entre {min_value} y {max_value}):"
    ]
    for worker_id, total in summaries:
        lines.append(f"  Hilo #{worker_id} -> total = {total}")
    if best is not None:
        lines.append("")
        lines.append(f"El hilo con mayor puntaje es el #{best.id} con {best.result} puntos.")
    return "\n".join(lines)


def render_totals_chart(summaries: Sequence[Summary], width: int = 40) -> str:
    if not summaries:
        return "No worker totals."

    # bars show magnitude, so negative totals from negative bounds stay within width
    peak = max(abs(s.result) for s in summaries)
    lines = ["Totals per worker"]
    for worker_id, total in summaries:
        bar = "#" * max(1, int((abs(total) / peak) * width)) if peak else ""
        lines.append(f"W{worker_id:02d} | {bar} ({total})")
    return "\n".join(lines)


def render_timeline(timeline: TimelineType, width: int = 80) -> str:
    if not timeline:
        return "No timeline data."

    max_t = max(end_rel for _, end_rel in timeline.values())
    if max_t <= 0:
        max_t = 1.0

    lines = ["Worker Timeline (relative seconds)"]
    for worker_id in sorted(timeline.keys()):
        buf = [" "] * width
        start_rel, end_rel = timeline[worker_id]
        a = int(start_rel / max_t * (width - 1))
        b = int(end_rel / max_t * (width - 1))
        a, b = max(0, a), max(a, b)
        for k in range(a, min(b, width - 1) + 1):
            buf[k] = "="
        lines.append(f"W{worker_id:02d} |{''.join(buf)}|")
    lines.append(f"0s{' ' * (width - 6)}~ {max_t:.4f}s")
    return "\n".join(lines)
