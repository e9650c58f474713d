"""Application constants."""

USER_AGENT = "my little scraper"
STATUS_PAGE_URL = "https://www.cloudflarestatus.com/"
LOCATIONS_URL = "https://speed.cloudflare.com/locations"
DEFAULT_OUTPUT_FILENAME = "colos.json"
CONFIG_FILENAME = "colomap.yml"
EXCLUDED_GROUPS = ("Cloudflare Sites and Services",)
STAGES = (
    "status-page",
    "locations",
    "enrich",
    "export",
)
EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
DEFAULT_CONFIG = {
    "sources": {
        "status_page_url": STATUS_PAGE_URL,
        "locations_url": LOCATIONS_URL,
    },
    "http": {
        "timeout": {
            "connect": 20.0,
            "read": 60.0,
        },
    },
    "status_page": {
        "excluded_groups": list(EXCLUDED_GROUPS),
    },
}
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "event",
    "status",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
