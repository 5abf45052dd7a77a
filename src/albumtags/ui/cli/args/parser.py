"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from albumtags.application import FlowName
from albumtags.config import Config
from albumtags.platform.logging import logger, setup_logger
from albumtags.ui.cli.args.options import CLIArgs


def _flow_name(value: str) -> FlowName:
    try:
        return FlowName(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"no such command: {value}") from None


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="albumtags",
            description=(
                "Reconcile an album manifest with the tags of its audio files.\n\n"
                "Without COMMAND, the manifest is imported and files renamed when it\n"
                "exists; otherwise a manifest is exported from the files."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "commands",
            nargs="*",
            type=_flow_name,
            metavar="COMMAND",
            help="Commands to run in order: import, export, rename",
        )
        _ = parser.add_argument(
            "--dir",
            type=str,
            help="Folder holding the audio files and the manifest (default: config or .)",
            metavar="DIRECTORY",
        )
        _ = parser.add_argument(
            "--manifest",
            type=str,
            help="Manifest file name inside the folder (default: config or 'tags')",
            metavar="NAME",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="TOML configuration file to use",
            metavar="CONFIG_PATH",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            help="Also write detailed logs to this file",
            metavar="LOG_PATH",
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show planned renames without moving files",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the target folder does not exist or arguments are invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load(Path(parsed_args.config) if parsed_args.config else None)
        log_file = Path(parsed_args.log_file) if parsed_args.log_file else configuration.log_file
        _ = setup_logger(log_file=log_file, console_level=log_level)

        settings = configuration.to_settings(
            target_dir=Path(parsed_args.dir) if parsed_args.dir else None,
            manifest_name=parsed_args.manifest,
        )
        if not settings.target_dir.is_dir():
            logger.error("Folder does not exist: %s", settings.target_dir)
            sys.exit(1)

        return CLIArgs(
            commands=list(parsed_args.commands),
            settings=settings,
            dry_run=parsed_args.dry_run,
            quiet=parsed_args.quiet,
        )
