"""CLI entrypoint for the point-of-presence map builder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from colomap.common.config_loader import load_config
from colomap.common.constants import DEFAULT_OUTPUT_FILENAME, EXIT_HARD_FAIL, EXIT_SUCCESS
from colomap.common.errors import PipelineError
from colomap.common.ids import generate_run_id
from colomap.common.logging import build_logger, log_event
from colomap.pipeline.runner import run_pipeline


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_FILENAME,
        help="Name of the file where to write the site map",
    )
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--strict", action="store_true")
    return parser.parse_args(argv)


def run_command(args: argparse.Namespace, http_client=None) -> int:
    run_id = args.run_id or generate_run_id()
    log_path = Path(args.log_file) if args.log_file else None
    logger = build_logger(run_id, level=args.log_level, log_path=log_path)

    try:
        cfg = load_config(
            Path(args.config_dir),
            overlay_config_dir=Path(args.overlay_config_dir) if args.overlay_config_dir else None,
        )
        run_pipeline(
            cfg,
            Path(args.output),
            logger=logger,
            run_id=run_id,
            strict=args.strict,
            http_client=http_client,
        )
    except PipelineError as exc:
        log_event(
            logger,
            f"run failed: {exc}",
            level=logging.ERROR,
            run_id=run_id,
            event="RUN_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL
    except Exception:
        logger.exception(
            "unexpected failure",
            extra={"run_id": run_id, "event": "RUN_FAIL", "status": "error", "error_code": "UNEXPECTED_ERROR"},
        )
        return EXIT_HARD_FAIL

    log_event(logger, "run complete", run_id=run_id, event="RUN_END", status="ok")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    return run_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
