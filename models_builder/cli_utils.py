"""
CLI utilities for command line reconstruction.
"""

from pathlib import Path

import click

PROGRAM_NAME = "models_builder"


def _display(value) -> str:
    """Show existing paths by file name only."""
    path = Path(str(value))
    return path.name if path.exists() else str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the invoking command line from the active Click context.

    Options left at their default are omitted, flags are shown bare.

    Args:
        click_command: The command whose parameters are read

    Returns:
        Command line string, just the program name outside a Click context
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return PROGRAM_NAME

    arguments = []
    options = []
    for param in click_command.params:
        value = ctx.params.get(param.name)
        if value is None or value == param.default or value is False:
            continue
        if isinstance(param, click.Argument):
            arguments.append(_display(value))
        elif param.is_flag:
            options.append(param.opts[0])
        else:
            options.extend([param.opts[0], _display(value)])

    return " ".join([PROGRAM_NAME, *arguments, *options])
