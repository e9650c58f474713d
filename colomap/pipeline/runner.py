"""Run orchestration: fetch both sources, merge, sort and export."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from colomap.common.constants import STAGES
from colomap.common.errors import ParseWarningsError, PipelineError
from colomap.common.http import HttpClient, TimeoutConfig
from colomap.common.logging import log_event
from colomap.common.time_utils import elapsed_ms
from colomap.harvest.locations import fetch_locations
from colomap.harvest.status_page import fetch_site_map
from colomap.pipeline.enrich import enrich_sites
from colomap.pipeline.export import sort_sites, write_sites_json

STATUS_PAGE_STAGE, LOCATIONS_STAGE, ENRICH_STAGE, EXPORT_STAGE = STAGES


def _run_stage(logger: logging.Logger, run_id: str, stage: str, func, *args, **kwargs):
    log_event(logger, "stage start", run_id=run_id, stage=stage, event="STAGE_START", status="ok")
    started = time.monotonic()
    try:
        result = func(*args, **kwargs)
    except PipelineError as exc:
        log_event(
            logger,
            f"stage {stage} failed: {exc}",
            level=logging.ERROR,
            run_id=run_id,
            stage=stage,
            event="STAGE_FAIL",
            status="error",
            duration_ms=elapsed_ms(started),
            error_code=exc.error_code,
        )
        raise
    log_event(
        logger,
        "stage end",
        run_id=run_id,
        stage=stage,
        event="STAGE_END",
        status="ok",
        duration_ms=elapsed_ms(started),
    )
    return result


def run_pipeline(
    cfg: dict,
    output_path: Path,
    *,
    logger: logging.Logger,
    run_id: str,
    strict: bool = False,
    http_client: HttpClient | None = None,
) -> dict:
    sources = cfg["sources"]
    excluded_groups = cfg["status_page"]["excluded_groups"]

    owns_client = http_client is None
    client = http_client or HttpClient(timeout=TimeoutConfig.from_config(cfg))
    try:
        status = _run_stage(
            logger,
            run_id,
            STATUS_PAGE_STAGE,
            fetch_site_map,
            client,
            sources["status_page_url"],
            excluded_groups=excluded_groups,
        )
        for warning in status.warnings:
            log_event(
                logger,
                warning.message,
                level=logging.WARNING,
                run_id=run_id,
                stage=STATUS_PAGE_STAGE,
                source=sources["status_page_url"],
                event="PARSE_WARNING",
                status="warning",
                error_code=warning.code,
            )
        log_event(
            logger,
            f"parsed {len(status.sites)} sites from {status.groups_seen - status.groups_skipped} groups",
            run_id=run_id,
            stage=STATUS_PAGE_STAGE,
            source=sources["status_page_url"],
            event="SITES_PARSED",
            status="ok",
            rows_out=len(status.sites),
        )

        locations = _run_stage(logger, run_id, LOCATIONS_STAGE, fetch_locations, client, sources["locations_url"])
        log_event(
            logger,
            f"decoded {len(locations)} locations",
            run_id=run_id,
            stage=LOCATIONS_STAGE,
            source=sources["locations_url"],
            event="LOCATIONS_DECODED",
            status="ok",
            rows_out=len(locations),
        )
    finally:
        if owns_client:
            client.close()

    if strict and status.warnings:
        exc = ParseWarningsError(status.warnings)
        log_event(
            logger,
            str(exc),
            level=logging.ERROR,
            run_id=run_id,
            stage=STATUS_PAGE_STAGE,
            event="STAGE_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        raise exc

    sites = _run_stage(logger, run_id, ENRICH_STAGE, enrich_sites, status.sites, locations)
    enriched = sum(1 for site in sites.values() if site.has_location)
    ordered = sort_sites(sites)
    _run_stage(logger, run_id, EXPORT_STAGE, write_sites_json, output_path, ordered)
    log_event(
        logger,
        f"wrote {len(ordered)} sites to {output_path}",
        run_id=run_id,
        stage=EXPORT_STAGE,
        event="OUTPUT_WRITTEN",
        status="ok",
        rows_in=len(locations),
        rows_out=len(ordered),
    )

    return {
        "run_id": run_id,
        "output": str(output_path),
        "site_count": len(ordered),
        "enriched_count": enriched,
        "location_count": len(locations),
        "warnings": [warning.to_dict() for warning in status.warnings],
    }
