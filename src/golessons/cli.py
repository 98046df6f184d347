"""Click command group for the golessons CLI."""

import sys
from contextlib import contextmanager

import click

from golessons.config import GO_BINARY_ENVVAR, ROOT_ENVVAR, ScaffoldSettings
from golessons.errors import ScaffoldError
from golessons.numbering import PositiveInt
from golessons.scaffolder import Scaffolder

USAGE_EXIT_CODE = 1
CHAPTER_COUNT_MESSAGE = "Chapter count must be a positive integer."
LESSON_NUMBERS_MESSAGE = "Chapter and lesson numbers must be positive integers."

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Negative numbers reach PositiveInt as positional tokens instead of failing as options.
SUBCOMMAND_SETTINGS = {"ignore_unknown_options": True}


def _usage_forms(prog_name):
    return (
        "Usage:\n"
        f"  {prog_name} course <Name> <NumChapters>\n"
        f"  {prog_name} add    <Course> <ChapterNum> <LessonNum>"
    )


class ScaffoldUsageError(click.UsageError):
    """Usage error that also lists both command forms."""

    exit_code = USAGE_EXIT_CODE

    def show(self, file=None):
        super().show(file)
        prog_name = self.ctx.find_root().info_name if self.ctx else "golessons"
        click.echo(_usage_forms(prog_name), err=True)


@contextmanager
def _usage_errors_exit_one():
    """Re-code Click usage errors (exit 2 by default) to exit status 1."""
    try:
        yield
    except click.MissingParameter as exc:
        raise ScaffoldUsageError(exc.format_message(), exc.ctx) from exc
    except click.BadParameter as exc:
        exc.exit_code = USAGE_EXIT_CODE
        raise
    except click.UsageError as exc:
        raise ScaffoldUsageError(exc.message, exc.ctx) from exc


class ScaffoldCommand(click.Command):
    def parse_args(self, ctx, args):
        with _usage_errors_exit_one():
            return super().parse_args(ctx, args)


class ScaffoldGroup(click.Group):
    command_class = ScaffoldCommand

    def parse_args(self, ctx, args):
        with _usage_errors_exit_one():
            return super().parse_args(ctx, args)

    def resolve_command(self, ctx, args):
        with _usage_errors_exit_one():
            return super().resolve_command(ctx, args)


def _asks_for_help(args):
    return any(arg in CONTEXT_SETTINGS["help_option_names"] for arg in args)


def _require_non_empty(ctx, param, value):
    if not value:
        raise click.BadParameter("must not be empty.", ctx=ctx, param=param)
    return value


@contextmanager
def _exit_on_scaffold_error(console):
    try:
        yield
    except (ScaffoldError, OSError) as exc:
        console.error(str(exc))
        sys.exit(1)


@click.group(cls=ScaffoldGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option(
    "--root",
    envvar=ROOT_ENVVAR,
    type=click.Path(exists=True, file_okay=False),
    help="Project root to scaffold into (default: directory of the enclosing go.mod).",
)
@click.option(
    "--go-binary",
    envvar=GO_BINARY_ENVVAR,
    default="go",
    show_default=True,
    help="Go executable used to locate the enclosing module.",
)
@click.option("-q", "--quiet", is_flag=True, help="Only print warnings and errors.")
@click.pass_context
def main(ctx, root, go_binary, quiet):
    """golessons - scaffold courses, chapters and lessons in a Go learning repository.

    \b
      golessons course <Name> <NumChapters>
      golessons add    <Course> <ChapterNum> <LessonNum>
    """
    if ctx.invoked_subcommand is None:
        click.echo(_usage_forms(ctx.info_name), err=True)
        ctx.exit(USAGE_EXIT_CODE)
    settings = ScaffoldSettings(root=root, go_binary=go_binary, quiet=quiet)
    if not _asks_for_help(ctx.args):
        with _exit_on_scaffold_error(settings.console):
            settings.root = settings.resolve_root()
    ctx.obj = settings


@main.command("course", context_settings=SUBCOMMAND_SETTINGS)
@click.argument("name", callback=_require_non_empty)
@click.argument("num_chapters", type=PositiveInt(CHAPTER_COUNT_MESSAGE))
@click.pass_obj
def course_cmd(settings, name, num_chapters):
    """Create course NAME with chapter directories 01..NUM_CHAPTERS."""
    with _exit_on_scaffold_error(settings.console):
        scaffolder = Scaffolder(settings.resolve_root(), settings.console)
        scaffolder.create_course(name, num_chapters)


@main.command("add", context_settings=SUBCOMMAND_SETTINGS)
@click.argument("course", callback=_require_non_empty)
@click.argument("chapter_num", type=PositiveInt(LESSON_NUMBERS_MESSAGE, keep_token=True))
@click.argument("lesson_num", type=PositiveInt(LESSON_NUMBERS_MESSAGE))
@click.pass_obj
def add_cmd(settings, course, chapter_num, lesson_num):
    """Add lesson LESSON_NUM to chapter CHAPTER_NUM of COURSE."""
    with _exit_on_scaffold_error(settings.console):
        scaffolder = Scaffolder(settings.resolve_root(), settings.console)
        scaffolder.add_lesson(course, int(chapter_num), lesson_num, chapter_label=chapter_num)
