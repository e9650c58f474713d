"""Splitting of status page site labels into place name and code."""

from __future__ import annotations

import re

# "Antananarivo, Madagascar - (TNR)"; the gap after the dash may hold stray
# encoding artefacts such as "Â" or a non-breaking space.
SITE_STRING_RE = re.compile(r"(.*?)\s+-[^(]*\(([^)]+)\)$")


def split_site_string(text: str) -> tuple[str, str]:
    match = SITE_STRING_RE.search(text.strip())
    if match is None:
        return "", ""

    name = match.group(1).strip()
    code = match.group(2).strip()
    if not name or not code:
        return "", ""
    return name, code
