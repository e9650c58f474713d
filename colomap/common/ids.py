"""Run identifier helpers."""

from __future__ import annotations

from datetime import datetime, timezone

RUN_ID_FORMAT = "run-%Y%m%dT%H%M%S%fZ"


def generate_run_id(now: datetime | None = None) -> str:
    """Return a sortable run id for log correlation, e.g. ``run-20261019T101500123456Z``."""
    stamp = (now or datetime.now(tz=timezone.utc)).astimezone(timezone.utc)
    return stamp.strftime(RUN_ID_FORMAT)
