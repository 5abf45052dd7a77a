"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from albumtags.application import FlowName
from albumtags.config import FlowSettings


@final
@dataclass(slots=True)
class CLIArgs:
    """Processed command line arguments."""

    commands: list[FlowName]
    settings: FlowSettings
    dry_run: bool
    quiet: bool
