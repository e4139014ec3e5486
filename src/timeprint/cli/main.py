"""timeprint CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .. import __version__
from ..core.engine import DEFAULT_FORMAT, CoreConfig, run_core
from ..core.errors import CoreError
from ..core.types import ExplicitTime, FileTime, FileTimeKind, Now, TimeSpec
from .help_text import TOPICS
from .settings import default_settings_path, load_settings, resolve_format

MAX_TIMES = 2

FILE_TIME_OPTIONS = {
    "access_time": FileTimeKind.ACCESS,
    "creation_time": FileTimeKind.CREATION,
    "mod_time": FileTimeKind.MODIFICATION,
}


def _collect_times(ctx: click.Context, param: click.Parameter, value) -> None:
    """Append time specs to ctx.obj["times"] in command-line order."""
    times: list[TimeSpec] = ctx.ensure_object(dict).setdefault("times", [])
    if param.name == "now":
        times.extend(Now() for _ in range(value))
    elif param.name == "time":
        times.extend(ExplicitTime(text) for text in value)
    else:
        kind = FILE_TIME_OPTIONS[param.name]
        times.extend(FileTime(kind, Path(path)) for path in value)


def _show_topic(ctx: click.Context, param: click.Parameter, value: str | None) -> None:
    if value is None or ctx.resilient_parsing:
        return
    click.echo(TOPICS[value], nl=False)
    ctx.exit()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="timeprint")
@click.option(
    "--help-topic",
    type=click.Choice(sorted(TOPICS)),
    callback=_show_topic,
    expose_value=False,
    is_eager=True,
    help="Show detailed help on a topic and exit.",
)
@click.option("--code-char", "-c", default=None, help="Character that starts format codes in FORMAT (default: %).")
@click.option("--now", "-n", count=True, callback=_collect_times, expose_value=False, help="Use the current time.")
@click.option(
    "--time", "-t", multiple=True, callback=_collect_times, expose_value=False,
    help="Use an explicit ISO-8601-style time.",
)
@click.option(
    "--access-time", "-a", multiple=True, callback=_collect_times, expose_value=False,
    help="Use a file's last access time.",
)
@click.option(
    "--creation-time", "-r", multiple=True, callback=_collect_times, expose_value=False,
    help="Use a file's creation time.",
)
@click.option(
    "--mod-time", "-m", multiple=True, callback=_collect_times, expose_value=False,
    help="Use a file's last modification time.",
)
@click.option("--time-zone", "-z", default=None, help="Timezone string such as UTC, PST8PDT or GST-1GDT.")
@click.option(
    "--config-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Override config directory (default: ~/.config/timeprint)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics to stderr.")
@click.argument("format_words", metavar="[FORMAT]...", nargs=-1)
@click.pass_context
def cli(
    ctx: click.Context,
    format_words: tuple[str, ...],
    code_char: str | None,
    time_zone: str | None,
    config_dir: Path | None,
    verbose: bool,
) -> None:
    """Print time and date information.

    FORMAT words are joined with spaces. Without them the format comes from
    the TIMEFORMAT environment variable, then timeprint.yaml, then "%#c".

    Give no time to print the current time, one time to print it, or two to
    print the elapsed time between them.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        )

    times: list[TimeSpec] = ctx.ensure_object(dict).get("times", [])
    if len(times) > MAX_TIMES:
        raise click.UsageError(f"At most {MAX_TIMES} times may be given, got {len(times)}.")

    settings_path = default_settings_path(config_dir)
    settings = load_settings(settings_path)

    if code_char is not None and len(code_char) != 1:
        raise click.BadParameter(
            f"must be a single character, got {code_char!r}", param_hint="'--code-char'"
        )
    # -c only applies to a format given on the command line
    if not format_words or code_char is None:
        code_char = settings.code_char or "%"
        if len(code_char) != 1:
            raise click.UsageError(
                f"code_char in {settings_path} must be a single character, "
                f"got {code_char!r}."
            )

    config = CoreConfig(
        format=resolve_format(format_words, settings) or DEFAULT_FORMAT,
        code_char=code_char,
        time1=times[0] if times else Now(),
        time2=times[1] if len(times) > 1 else None,
        time_zone=time_zone or settings.time_zone,
    )

    try:
        output = run_core(config)
    except CoreError as e:
        click.echo(f"timeprint: {e}", err=True)
        raise SystemExit(1)

    click.echo(output, nl=False)
