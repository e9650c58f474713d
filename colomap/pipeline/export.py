"""Sorted JSON export of enriched sites."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from colomap.common.errors import OutputError
from colomap.common.fs import write_json
from colomap.common.models import SiteRecord


def sort_sites(sites: dict[str, SiteRecord]) -> list[SiteRecord]:
    return sorted(sites.values(), key=lambda site: (site.continent, site.name))


def write_sites_json(path: Path, sites: Iterable[SiteRecord]) -> Path:
    payload = [site.to_dict() for site in sites]
    try:
        write_json(path, payload, sort_keys=False)
    except OSError as exc:
        raise OutputError(f"Unable to write {path}: {exc}") from exc
    return path
