"""
monit_status CLI entry point.

Renders a status snapshot file (YAML or JSON) to a status document.
"""

import os
import sys
import argparse
import logging
from pathlib import Path

from monit_status.config.settings import StatusConfig
from monit_status.encoding.document import render_status
from monit_status.exceptions import StatusDocumentError
from monit_status.logging_config import setup_logging as setup_full_logging
from monit_status.models.enums import FormatVersion
from monit_status.models.snapshot import StatusSnapshot


def setup_logging(config: StatusConfig, verbose: bool = False) -> None:
    """Setup logging, falling back to stderr only when the log dir is not writable."""
    console_level = "DEBUG" if verbose else config.logging.console_level

    log_dir = config.logging.log_dir
    if not os.access(Path(log_dir).parent, os.W_OK):
        log_dir = str(Path.home() / ".local" / "log" / "monit-status")

    try:
        setup_full_logging(
            log_dir=log_dir,
            console_level=console_level,
            file_level=config.logging.file_level,
            use_json=config.logging.use_json,
        )
    except PermissionError:
        logging.basicConfig(
            level=getattr(logging, console_level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(sys.stderr)],
        )


def main(argv=None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="monit_status - render a monitoring status snapshot as JSON"
    )

    parser.add_argument("--snapshot", "-s", type=str, help="Path to snapshot file (YAML or JSON)")

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default="/etc/monit-status/config.yml",
        help="Path to configuration file",
    )

    parser.add_argument(
        "--format-version",
        type=str,
        default=None,
        help="Document schema version (1 or 2, default from config)",
    )

    parser.add_argument("--output", "-o", type=str, help="Write document to file instead of stdout")

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    parser.add_argument(
        "--generate-config",
        action="store_true",
        help="Generate default configuration file and exit",
    )

    args = parser.parse_args(argv)

    if args.generate_config:
        config = StatusConfig()
        config.save(args.config)
        print(f"Generated default configuration at: {args.config}")
        return 0

    try:
        config = StatusConfig.from_file(args.config)
    except StatusDocumentError as e:
        print(f"Configuration invalid: {e}", file=sys.stderr)
        return 1

    setup_logging(config, args.verbose)
    logger = logging.getLogger(__name__)

    if not args.snapshot:
        parser.error("--snapshot is required")

    try:
        version = FormatVersion.negotiate(args.format_version, default=config.format_version)
        logger.info(f"Loading snapshot from {args.snapshot}")
        snapshot = StatusSnapshot.from_file(args.snapshot)
        snapshot = snapshot.model_copy(update={"runtime": config.apply_to(snapshot.runtime)})
        document = render_status(snapshot, version)
    except StatusDocumentError as e:
        logger.error(f"Cannot render status: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(document, encoding="utf-8")
        logger.info(f"Wrote status document to {args.output}")
    else:
        sys.stdout.write(document)
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
