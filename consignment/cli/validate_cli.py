"""
Command-line interface for validating consignment records.

Usage:
    consignment-validate check --input <file> [options]
    consignment-validate rules
"""

import argparse
import json
import sys
from typing import Any

from pydantic import ValidationError

from consignment.config import Settings
from consignment.core.exceptions import RecordLoadError
from consignment.core.models import ConsignmentRecord, dump_violations, load_records
from consignment.core.projections import project_to_messages, project_to_tree
from consignment.core.rules import ConsignmentRuleEngine
from consignment.observability.logger import LOG_FORMATS, LOG_LEVELS, get_logger, log_operation, setup_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2

OUTPUT_CHOICES = ["both", "tree", "messages", "violations"]


def build_report(index: int, record: ConsignmentRecord, engine: ConsignmentRuleEngine, output: str) -> dict[str, Any]:
    """
    Validate one record and build its report entry.

    Args:
        index: Position of the record in the input document
        record: Record to validate
        engine: Rule engine to validate with
        output: Which projection(s) to include (see OUTPUT_CHOICES)

    Returns:
        JSON-compatible report for the record
    """
    violations = engine.validate_record(record)
    report: dict[str, Any] = {"index": index, "valid": not violations}

    if output in ("both", "tree"):
        report["tree"] = project_to_tree(violations).to_dict()
    if output in ("both", "messages"):
        report["messages"] = project_to_messages(violations)
    if output == "violations":
        report["violations"] = dump_violations(violations)

    return report


def check_command(args, settings: Settings) -> int:
    """
    Execute the check command.

    Args:
        args: Command-line arguments
        settings: Effective settings

    Returns:
        Process exit code
    """
    try:
        records = load_records(args.input)
    except RecordLoadError as e:
        logger.error(f"Cannot load records: {e}")
        return EXIT_BAD_INPUT

    engine = ConsignmentRuleEngine(record_metrics=settings.metrics_enabled)

    with log_operation("Validating consignments", logger=logger, path=str(args.input), record_count=len(records)):
        reports = [build_report(idx, record, engine, args.output) for idx, record in enumerate(records)]

    invalid_count = sum(1 for report in reports if not report["valid"])
    logger.info(
        f"Validated {len(reports)} consignment(s), {invalid_count} with violations",
        extra={"record_count": len(reports), "invalid_count": invalid_count},
    )

    indent = args.indent if args.indent is not None else settings.output_indent
    print(json.dumps(reports, indent=indent or None, ensure_ascii=False))

    return EXIT_INVALID if invalid_count else EXIT_OK


def rules_command(args, settings: Settings) -> int:
    """Print the summary of the fixed rule set."""
    summary = ConsignmentRuleEngine(record_metrics=False).get_rule_summary()
    print(json.dumps(summary, indent=settings.output_indent or None))
    return EXIT_OK


def load_settings(args) -> Settings:
    """
    Resolve settings: YAML file (if given) or environment, then CLI overrides.

    Raises:
        FileNotFoundError, ValueError, pydantic.ValidationError: On bad settings
    """
    settings = Settings.from_yaml(args.config) if args.config else Settings.from_env()

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format

    if overrides:
        settings = Settings.model_validate({**settings.model_dump(), **overrides})
    return settings


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="consignment-validate",
        description="Validate consignment records and report field errors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate records, printing the error tree and message list
  consignment-validate check --input consignments.yaml

  # Only the deduplicated messages, compact output
  consignment-validate check --input consignments.json --output messages --indent 0

  # Show the rule set
  consignment-validate rules
        """
    )
    parser.add_argument(
        "--config",
        help="Path to settings YAML file (default: read settings from environment)"
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        help="Log level (overrides settings)"
    )
    parser.add_argument(
        "--log-format",
        choices=list(LOG_FORMATS),
        help="Log format (overrides settings)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Validate a file of consignment records")
    check_parser.add_argument(
        "--input",
        required=True,
        help="Path to YAML or JSON file with one record or a 'consignments' list"
    )
    check_parser.add_argument(
        "--output",
        default="both",
        choices=OUTPUT_CHOICES,
        help="Projection(s) to print (default: both)"
    )
    check_parser.add_argument(
        "--indent",
        type=int,
        help="JSON indent, 0 for compact (default: from settings)"
    )

    subparsers.add_parser("rules", help="Print the validation rule summary")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_BAD_INPUT

    try:
        settings = load_settings(args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    setup_logger("consignment", level=settings.log_level, format_type=settings.log_format)

    if args.command == "check":
        return check_command(args, settings)
    return rules_command(args, settings)


if __name__ == "__main__":
    sys.exit(main())
