"""Output formatters for run summaries."""

import json

from surfcast.models.reporting import RunSummary


def format_summary_text(s: RunSummary) -> str:
    """Plain text summary for logging."""
    lines = [
        f"=== Fetch Complete | Run {s.run_id[:8]} ===",
        f"Spots: {len(s.spots_written)}/{s.spots_total} written, "
        f"{len(s.spots_failed)} failed",
        f"Records: {s.hourly_records} hourly, {s.tide_events} tide events",
        f"Index: {'written' if s.index_written else 'NOT written'}",
    ]
    for failure in s.spots_failed:
        lines.append(f"  ✗ {failure.slug}: {failure.error}")
    if s.errors:
        lines.append(f"Errors: {len(s.errors)}")
    lines.append(f"Duration: {s.duration_seconds:.1f}s")
    return "\n".join(lines)


def format_summary_json(s: RunSummary) -> str:
    """JSON summary for programmatic consumption."""
    data = {
        "run_id": s.run_id,
        "spots_total": s.spots_total,
        "spots_written": s.spots_written,
        "spots_failed": [{"slug": f.slug, "error": f.error} for f in s.spots_failed],
        "hourly_records": s.hourly_records,
        "tide_events": s.tide_events,
        "index_written": s.index_written,
        "duration_seconds": s.duration_seconds,
        "errors": s.errors,
    }
    return json.dumps(data, indent=2)
