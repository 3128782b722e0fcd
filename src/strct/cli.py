"""CLI entry point for the strct command."""

from __future__ import annotations

import sys
from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from strct.config import ConfigError, StrctConfig, load_config
from strct.errors import StrctError
from strct.logging import get_logger, setup_logging
from strct.text import (
    distribute,
    first_char_to_upper,
    is_palindrome,
    longest_word,
    reverse_all,
    scramble,
    slice_after,
    slice_before,
    spoonerize,
    time_to_string,
    vowel_frequency,
    word_frequency,
)

_log = get_logger("cli")


def _read_text(text: str | None) -> str:
    """Return *text*, or stdin (minus one trailing newline) when omitted."""
    if text is not None:
        return text
    data = click.get_text_stream("stdin").read()
    return data[:-1] if data.endswith("\n") else data


def _reports_errors(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Turn library errors into a clean ``Error: ...`` exit instead of a traceback."""

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except StrctError as exc:
            _log.info("%s failed: %s", fn.__name__, exc)
            raise click.ClickException(str(exc)) from exc

    return wrapper


def _config(ctx: click.Context) -> StrctConfig:
    return ctx.obj["config"]


@click.group()
@click.option(
    "--log-level",
    default=None,
    envvar="STRCT_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (default: config or WARNING)",
)
@click.option(
    "--log-file", default=None, envvar="STRCT_LOG_FILE", type=click.Path(), help="Log to file"
)
@click.option(
    "-c", "--config", "config_path", default=None, type=click.Path(), help="Path to strct.yaml"
)
@click.version_option(package_name="strct")
@click.pass_context
def main(
    ctx: click.Context, log_level: str | None, log_file: str | None, config_path: str | None
) -> None:
    """strct -- common string manipulation tasks.

    \b
    Pass the text as an argument, or pipe it in:
        strct capitalize "hello world"
        echo "key=value" | strct after =
    """
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    errors = cfg.validate()
    if errors:
        raise click.ClickException("Invalid config:\n  " + "\n  ".join(errors))

    setup_logging(
        level=log_level or cfg.log_level,
        log_file=log_file or cfg.log_file,
        stderr=True,
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@main.command()
@click.argument("text", required=False)
def capitalize(text: str | None) -> None:
    """Uppercase the first letter of every space-separated word."""
    click.echo(first_char_to_upper(_read_text(text)))


@main.command()
@click.argument("text", required=False)
def words(text: str | None) -> None:
    """Count whitespace-separated words."""
    click.echo(word_frequency(_read_text(text)))


@main.command()
@click.argument("text", required=False)
def vowels(text: str | None) -> None:
    """Count vowels."""
    click.echo(vowel_frequency(_read_text(text)))


@main.command()
@click.argument("text", required=False)
def longest(text: str | None) -> None:
    """Print the longest run of letters."""
    click.echo(longest_word(_read_text(text)))


@main.command()
@click.argument("text", required=False)
@click.option("--exit-code", is_flag=True, help="Exit 1 when the text is not a palindrome")
def palindrome(text: str | None, exit_code: bool) -> None:
    """Check whether the text is a palindrome, ignoring whitespace."""
    result = is_palindrome(_read_text(text))
    click.echo("true" if result else "false")
    if exit_code and not result:
        sys.exit(1)


@main.command("time", context_settings={"ignore_unknown_options": True})
@click.argument("seconds", type=int)
@_reports_errors
def time_cmd(seconds: int) -> None:
    """Format SECONDS as minutes:seconds.

    Negative values work as-is: ``strct time -125`` prints ``-2:-5``.
    """
    click.echo(time_to_string(seconds))


@main.command()
@click.argument("text", required=False)
def reverse(text: str | None) -> None:
    """Reverse the text."""
    click.echo(reverse_all(_read_text(text)))


@main.command()
@click.argument("delimiter")
@click.argument("text", required=False)
@_reports_errors
def before(delimiter: str, text: str | None) -> None:
    """Print the text before the first DELIMITER."""
    click.echo(slice_before(_read_text(text), delimiter))


@main.command()
@click.argument("delimiter")
@click.argument("text", required=False)
@_reports_errors
def after(delimiter: str, text: str | None) -> None:
    """Print the text after the first DELIMITER."""
    click.echo(slice_after(_read_text(text), delimiter))


@main.command("split")
@click.argument("delimiter")
@click.argument("text", required=False)
@click.option(
    "--keep-trailing/--drop-trailing",
    default=None,
    help="Include the segment after the last delimiter (default: config)",
)
@click.pass_context
@_reports_errors
def split_cmd(
    ctx: click.Context, delimiter: str, text: str | None, keep_trailing: bool | None
) -> None:
    """Split the text at every DELIMITER, one segment per line."""
    if keep_trailing is None:
        keep_trailing = _config(ctx).distribute.keep_trailing
    for segment in distribute(_read_text(text), delimiter, keep_trailing=keep_trailing):
        click.echo(segment)


@main.command("scramble")
@click.argument("text", required=False)
def scramble_cmd(text: str | None) -> None:
    """Shuffle the characters, seeded by the text itself."""
    click.echo(scramble(_read_text(text)))


@main.command("spoonerize")
@click.argument("text", required=False)
@click.option("--first", "first_len", type=int, default=None, help="Letters from word one")
@click.option("--second", "second_len", type=int, default=None, help="Letters from word two")
@click.pass_context
@_reports_errors
def spoonerize_cmd(
    ctx: click.Context, text: str | None, first_len: int | None, second_len: int | None
) -> None:
    """Swap the leading letters of a two-word phrase."""
    defaults = _config(ctx).spoonerize
    click.echo(
        spoonerize(
            _read_text(text),
            defaults.first_len if first_len is None else first_len,
            defaults.second_len if second_len is None else second_len,
        )
    )
