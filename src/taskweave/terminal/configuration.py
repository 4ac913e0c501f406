# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskweave import configuration
from taskweave.color import ERROR_COLOR
from taskweave.configuration import DeletionPolicy
from taskweave.model.filter import SortDirection, SortField
from taskweave.repository.configuration import CONFIGURATION_REPO
from taskweave.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@app.command("show, s")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("default_sort_field", config["default_sort_field"])
    table.add_row("default_sort_direction", config["default_sort_direction"])
    table.add_row("deletion_policy", config["deletion_policy"])
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "log_to_file",
        f"✓ {configuration.DATA_LOG_PATH}" if config["log_to_file"] else "✗ Disabled",
    )

    console.print(table)
    console.print(f"\nConfig file: {configuration.APP_CONFIG_PATH}")


@app.command("set", no_args_is_help=True)
def set_config(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the task files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the default data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
    default_sort_field: Annotated[
        Optional[SortField],
        typer.Option("--default-sort-field", case_sensitive=False),
    ] = None,
    default_sort_direction: Annotated[
        Optional[SortDirection],
        typer.Option("--default-sort-direction", case_sensitive=False),
    ] = None,
    deletion_policy: Annotated[
        Optional[DeletionPolicy],
        typer.Option(
            "--deletion-policy",
            case_sensitive=False,
            help="block refuses to delete a task others depend on, cascade unlinks them",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(LOG_LEVELS)),
    ] = None,
    log_to_file: Annotated[
        Optional[bool],
        typer.Option("--log-to-file/--no-log-to-file"),
    ] = None,
) -> None:
    """Change configuration settings. Takes effect on the next run."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        console = Console()
        console.print(f"[{ERROR_COLOR}]Unknown log level: {log_level}[/{ERROR_COLOR}]")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        default_sort_field=default_sort_field.value if default_sort_field else None,
        default_sort_direction=(
            default_sort_direction.value if default_sort_direction else None
        ),
        deletion_policy=deletion_policy.value if deletion_policy else None,
        log_level=log_level.upper() if log_level is not None else None,
        log_to_file=log_to_file,
    )
    show()
