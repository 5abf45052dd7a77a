"""Application services orchestrating the import, export and rename flows."""

from .flows import (
    FlowName,
    FlowResult,
    default_flows,
    export_flow,
    import_flow,
    rename_flow,
    run_commands,
    run_flow,
)

__all__ = [
    "FlowName",
    "FlowResult",
    "default_flows",
    "export_flow",
    "import_flow",
    "rename_flow",
    "run_commands",
    "run_flow",
]
