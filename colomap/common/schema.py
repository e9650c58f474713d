"""Minimal strict schema for YAML config validation."""

from __future__ import annotations

from colomap.common.errors import ConfigError


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_positive_number(value: object, ctx: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{ctx} must be a positive number")


def validate_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    top = {"sources", "http", "status_page"}
    _assert_required_keys(cfg, top, "config")
    _assert_no_unknown_keys(cfg, top, "config", allow_unknown)

    sources = cfg["sources"]
    source_keys = {"status_page_url", "locations_url"}
    _assert_required_keys(sources, source_keys, "sources")
    _assert_no_unknown_keys(sources, source_keys, "sources", allow_unknown)
    for key in sorted(source_keys):
        if not isinstance(sources[key], str) or not sources[key].strip():
            raise ConfigError(f"sources.{key} must be a non-empty string")

    _assert_required_keys(cfg["http"], {"timeout"}, "http")
    _assert_no_unknown_keys(cfg["http"], {"timeout"}, "http", allow_unknown)
    timeout = cfg["http"]["timeout"]
    _assert_required_keys(timeout, {"connect", "read"}, "http.timeout")
    _assert_no_unknown_keys(timeout, {"connect", "read"}, "http.timeout", allow_unknown)
    _assert_positive_number(timeout["connect"], "http.timeout.connect")
    _assert_positive_number(timeout["read"], "http.timeout.read")

    status_page = cfg["status_page"]
    _assert_required_keys(status_page, {"excluded_groups"}, "status_page")
    _assert_no_unknown_keys(status_page, {"excluded_groups"}, "status_page", allow_unknown)
    groups = status_page["excluded_groups"]
    if not isinstance(groups, list) or not all(isinstance(group, str) for group in groups):
        raise ConfigError("status_page.excluded_groups must be a list of strings")

    return cfg
