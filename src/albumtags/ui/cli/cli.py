"""Command line interface for albumtags."""

import sys
from typing import final

from albumtags.application import run_commands
from albumtags.platform.logging import logger
from albumtags.ui.cli.args import ArgumentParser, CLIArgs
from albumtags.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            results = run_commands(args.commands, args.settings, dry_run=args.dry_run)
            ResultDisplay().show_results(results, quiet=args.quiet)
            if any(not r.success for r in results):
                sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
