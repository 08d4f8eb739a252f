"""Weeny CLI - personal task tracker."""

import json
import logging
import sys
from dataclasses import asdict

import click

from .config import load_config
from .core import responses
from .core.errors import StorageError
from .interpreter import Interpreter
from .session import open_session


@click.group(invoke_without_command=True)
@click.version_option(package_name="weeny")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Weeny - personal task tracker.

    Run without a subcommand to start an interactive session.
    """
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


def _open_or_exit() -> Interpreter:
    """Open the saved task list, exiting if the data file is unusable."""
    try:
        return open_session(load_config())
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
def chat():
    """Start an interactive session (type 'bye' to save and quit)."""
    interpreter = _open_or_exit()
    click.echo(responses.greeting())

    while interpreter.is_running:
        try:
            line = click.prompt(">", default="", show_default=False)
        except click.Abort:
            # End of input saves like 'bye'
            click.echo()
            click.echo(interpreter.process("bye"))
            break

        if not line.strip():
            continue
        click.echo(interpreter.process(line))


@main.command("do")
@click.argument("words", nargs=-1, required=True)
def do_command(words: tuple[str, ...]):
    """Run one command against the saved list, e.g. 'weeny do todo read book'."""
    interpreter = _open_or_exit()
    click.echo(interpreter.process(" ".join(words)))

    # Autosave has already saved (or warned about) any change
    if interpreter.is_running and not interpreter.autosave:
        try:
            interpreter.save()
        except StorageError as e:
            click.echo(responses.save_warning(str(e)), err=True)
            sys.exit(1)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(as_json: bool):
    """List saved tasks."""
    interpreter = _open_or_exit()
    saved = interpreter.task_list.tasks()

    if as_json:
        click.echo(
            json.dumps(
                [{"type": type(t).__name__.lower(), **asdict(t)} for t in saved],
                indent=2,
            )
        )
    else:
        click.echo(responses.task_list(saved))


if __name__ == "__main__":
    main()
