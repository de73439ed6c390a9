# pension_roster/cli.py
# Command-line interface entry point (argparse)
import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from logging_config import ERROR_LOGGER, setup_logging
from pension_roster.config.loaders import ConfigLoadError, load_report_config
from pension_roster.config.models import ReportConfig
from pension_roster.data.readers import DataReadError, read_roster
from pension_roster.data.sample import load_sample_roster
from pension_roster.data.writers import DataWriteError, write_report
from pension_roster.reporting.report import build_report, format_report

# Get logger for this module
logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments. Every flag is optional."""
    parser = argparse.ArgumentParser(
        description="Print the salary-ranked roster and next quarter's upcoming pension enrollees."
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML report configuration file."
    )
    parser.add_argument(
        "--census",
        type=str,
        default=None,
        help="Roster file (.json or .csv). Uses the built-in sample roster when omitted."
    )
    parser.add_argument(
        "--as-of",
        dest="as_of",
        type=date.fromisoformat,
        default=None,
        help="Reference date in YYYY-MM-DD form (default: today)."
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Also write each report section to a JSON file in this directory."
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory to store log files (default: from config, else no log files)"
    )
    return parser.parse_args(argv)


def apply_overrides(cfg: ReportConfig, args: argparse.Namespace) -> ReportConfig:
    """Command-line flags win over values from the config file."""
    updates = {}
    if args.census:
        updates["census_path"] = Path(args.census)
    if args.as_of:
        updates["reference_date"] = args.as_of
    if updates:
        cfg = cfg.model_copy(update=updates)
    if args.output_dir:
        cfg = cfg.model_copy(
            update={"output": cfg.output.model_copy(update={"output_dir": Path(args.output_dir)})}
        )
    if args.debug or args.log_dir:
        log_updates = {}
        if args.debug:
            log_updates["debug"] = True
        if args.log_dir:
            log_updates["log_dir"] = Path(args.log_dir)
        cfg = cfg.model_copy(update={"logging": cfg.logging.model_copy(update=log_updates)})
    return cfg


def run_report(cfg: ReportConfig) -> str:
    """
    Load the roster, build the report, optionally write it to disk, and
    return the rendered text.

    Raises:
        DataReadError: If the roster cannot be loaded.
        DataWriteError: If report files cannot be written.
    """
    if cfg.census_path is not None:
        employees = read_roster(cfg.census_path)
    else:
        logger.info("No census supplied; using the built-in sample roster")
        employees = load_sample_roster()

    reference = cfg.resolve_reference_date()
    report = build_report(employees, reference, cfg.enrollment)

    if cfg.output.output_dir is not None:
        write_report(report, cfg.output.output_dir, indent=cfg.output.indent)

    return format_report(report, indent=cfg.output.indent)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the roster report CLI."""
    err_logger = logging.getLogger(ERROR_LOGGER)
    args = parse_arguments(argv)

    try:
        cfg = apply_overrides(load_report_config(args.config), args)
    except ConfigLoadError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        return 1

    try:
        setup_logging(cfg.logging.log_dir, debug=cfg.logging.debug)
    except OSError as e:
        print(f"FATAL: could not set up logging in {cfg.logging.log_dir}: {e}", file=sys.stderr)
        return 1

    logger.info(f"Starting roster report with arguments: {vars(args)}")

    try:
        print(run_report(cfg))
    except DataReadError as e:
        err_logger.error(f"Could not load roster: {e}", exc_info=True)
        return 1
    except DataWriteError as e:
        err_logger.error(f"Could not write report: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
