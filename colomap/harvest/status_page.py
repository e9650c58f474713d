"""Status page scraping: continent groups and the sites listed under them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from bs4 import BeautifulSoup

from colomap.common.constants import EXCLUDED_GROUPS
from colomap.common.http import HttpClient
from colomap.common.models import ParseWarning, SiteRecord
from colomap.common.site_string import split_site_string

GROUP_SELECTOR = "div.component-container"
CONTINENT_SELECTOR = 'div.component-inner-container > span.name > span:not([class~="font-small"])'
SITE_NAME_SELECTOR = "div.child-components-container > div.component-inner-container > span.name"


@dataclass
class StatusPageResult:
    sites: dict[str, SiteRecord] = field(default_factory=dict)
    warnings: list[ParseWarning] = field(default_factory=list)
    groups_seen: int = 0
    groups_skipped: int = 0


def parse_status_page(html: bytes | str, excluded_groups: Iterable[str] = ()) -> StatusPageResult:
    """Build a code -> SiteRecord mapping from the status page markup.

    The administrative sites-and-services group is always skipped, along
    with any ``excluded_groups``. Problems with individual groups or entries
    are collected as warnings and the rest of the page is still processed.
    A code seen twice keeps the later entry.
    """
    excluded = set(EXCLUDED_GROUPS) | set(excluded_groups)
    result = StatusPageResult()
    soup = BeautifulSoup(html, "html.parser")

    for group in soup.select(GROUP_SELECTOR):
        result.groups_seen += 1
        continent = "".join(node.get_text() for node in group.select(CONTINENT_SELECTOR)).strip()
        if continent in excluded:
            result.groups_skipped += 1
            continue
        if not continent:
            result.warnings.append(
                ParseWarning(
                    code="EMPTY_CONTINENT",
                    message=f"empty continent label in group #{result.groups_seen}",
                )
            )

        for name_node in group.select(SITE_NAME_SELECTOR):
            site_text = name_node.get_text().strip()
            name, code = split_site_string(site_text)
            if not name or not code:
                result.warnings.append(
                    ParseWarning(
                        code="SITE_SPLIT_FAILED",
                        message=f"error extracting site data from {site_text!r}",
                        raw=site_text,
                    )
                )
                continue
            result.sites[code] = SiteRecord(name=name, continent=continent, code=code)

    return result


def fetch_site_map(
    client: HttpClient,
    url: str,
    excluded_groups: Iterable[str] = (),
) -> StatusPageResult:
    body = client.get_bytes(url)
    return parse_status_page(body, excluded_groups=excluded_groups)
