"""Attach geographic locations to status page sites."""

from __future__ import annotations

from typing import Iterable

from colomap.common.models import LocationRecord, SiteRecord


def enrich_sites(sites: dict[str, SiteRecord], locations: Iterable[LocationRecord]) -> dict[str, SiteRecord]:
    # Locations without a matching site are dropped; sites without a location stay bare.
    for location in locations:
        site = sites.get(location.code)
        if site is not None:
            site.apply_location(location)
    return sites
