# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from taskweave.repository.id_map import ID_MAP_REPO
from taskweave.terminal import configuration, recurrence, task
from taskweave.terminal.custom_typer import OrderedAliasedTyperGroup
from taskweave.terminal.search import search
from taskweave.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="taskweave - Tasks with dependencies in the CLI",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t")
app.add_typer(recurrence.app, name="recur, r")
app.add_typer(configuration.app, name="config, c")
app.command(name="search, s")(search)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    clear_ids: Annotated[
        bool,
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Clear ID map",
        ),
    ] = False,
) -> None:
    """
    taskweave - Tasks with dependencies in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if clear_ids:
        ID_MAP_REPO.clear_ids()


def run() -> None:
    app()
