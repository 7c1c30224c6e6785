"""Typer CLI application, reformats an S-expression file."""

from __future__ import annotations

import sys
import warnings
from typing import Annotated, List, Optional

import typer

import sexpformat
from _sexpformat.config import (
    DEFAULT_COMPACT_COLUMN_LIMIT,
    DEFAULT_WRAP_THRESHOLD,
    PROFILES,
    Config,
    get_profile,
)
from _sexpformat.errors import InvalidConfig
from _sexpformat.formatting import prettify

_MAIN_HELP = f"""\
Reformat KiCad style S-expressions. Only whitespace is changed, the
input is neither validated nor interpreted.

**Example:** use KiCad's compact list and shortform settings, reading
standard input and writing standard output:

`sexpformat -l pts -s font -s stroke -s fill -s offset -s rotate -s scale - -`

**Profiles:** {", ".join(PROFILES)}
"""

app = typer.Typer(
    name="sexpformat",
    help=_MAIN_HELP,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="markdown",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(sexpformat.__version__)
        raise typer.Exit()


def build_config(
    wrap_threshold: int,
    compact_list: List[str],
    column_limit: int,
    shortform: List[str],
    profile: Optional[str],
) -> Config:
    """
    Translate command line options into a Config. A profile replaces any
    compact list and shortform prefixes given as options.

    :raises InvalidConfig: For invalid option values or an unknown profile.
    """
    config = Config(wrap_threshold=wrap_threshold, compact_column_limit=column_limit)
    if profile is not None:
        preset = get_profile(profile)
        if compact_list or shortform:
            warnings.warn(
                f"profile {profile!r} replaces the given compact list "
                "and shortform prefixes",
                stacklevel=2,
            )
        compact_list = sorted(preset.compact_prefixes)
        shortform = sorted(preset.shortform_prefixes)
    if compact_list:
        config = config.with_compact_list(compact_list, column_limit)
    if shortform:
        config = config.with_shortform(shortform)
    return config


@app.command(help=_MAIN_HELP)
def main(
    source: Annotated[
        str, typer.Argument(help="Source file path, '-' for standard input.")
    ],
    destination: Annotated[
        str,
        typer.Argument(help="Destination file path, '-' for standard output."),
    ] = "-",
    wrap_threshold: Annotated[
        int,
        typer.Option(
            "--wrap-threshold",
            "-w",
            help="Leaf tokens per line in normal lists. Must be positive.",
        ),
    ] = DEFAULT_WRAP_THRESHOLD,
    compact_list: Annotated[
        Optional[List[str]],
        typer.Option("--compact-list", "-l", help="Add a compact list head token."),
    ] = None,
    column_limit: Annotated[
        int,
        typer.Option(
            "--column-limit",
            "-k",
            help="Column limit of compact lists. Must be positive.",
        ),
    ] = DEFAULT_COMPACT_COLUMN_LIMIT,
    shortform: Annotated[
        Optional[List[str]],
        typer.Option("--shortform", "-s", help="Add a shortform list head token."),
    ] = None,
    profile: Annotated[
        Optional[str],
        typer.Option(
            "--profile",
            "-p",
            help=(
                "Predefined style (kicad, kicad-compact). Replaces all "
                "compact list and shortform head tokens given, before or "
                "after it."
            ),
        ),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Print version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    try:
        config = build_config(
            wrap_threshold, compact_list or [], column_limit, shortform or [], profile
        )
    except InvalidConfig as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    src = sys.stdin if source == "-" else source
    dst = sys.stdout if destination == "-" else destination
    try:
        prettify(src, dst, config)
    except OSError as err:
        typer.echo(f"Error: {err.strerror}: {err.filename}", err=True)
        raise typer.Exit(1) from err
