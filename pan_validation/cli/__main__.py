from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, load_config, resolve_config_path
from ..logging.init import log_summary, set_debug, setup_logging
from ..services.aggregator import AggregationError
from ..services.pipeline import PipelineError, load_records, run_validation
from ..services.profile import profile_records, render_profile_lines
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (environment overrides) and the YAML config
- --profile: print the raw data-quality profile and exit
- Otherwise run the validation pipeline and print the SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_INVALID_FOUND = 2


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv; values override the process environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="pan-validate", description="PAN cleaning & validation")
    p.add_argument("--config", help="Path to YAML config (default: config/validate.yml)")
    p.add_argument("--input", help="Input file, overrides input_path from the config")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--profile", action="store_true", help="Print a data-quality profile of the raw records then exit")
    p.add_argument("--strict", action="store_true", help=f"Exit with {EXIT_INVALID_FOUND} if any invalid PAN was found")
    return p.parse_args(argv)


def _profile(cfg, input_path: Path | None, logger) -> int:
    try:
        _, records = load_records(cfg, input_path)
    except PipelineError as e:
        logger.error(f"profile: {e}")
        return EXIT_FATAL
    for line in render_profile_lines(profile_records(records)):
        logger.info(line)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read sys.argv when no list is given, so main([]) in tests stays clean
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    config_path = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    input_path = Path(args.input) if args.input else None
    logger.info(f"Validating PAN records from: {input_path or cfg.input_path}")

    if args.profile:
        return _profile(cfg, input_path, logger)

    try:
        result = run_validation(cfg, input_path)
    except (PipelineError, AggregationError) as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line.removeprefix("SUMMARY "))

    if args.strict and result.report.total_invalid > 0:
        return EXIT_INVALID_FOUND
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
