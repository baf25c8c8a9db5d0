"""CLI entry point for nativepath.

Exposes the lexical path operations, filter rendering and the temporary
resource helpers for scripting and inspection.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

from nativepath import __version__
from nativepath.config.models import Config
from nativepath.models.path_string import PathString
from nativepath.traits import FLAVOURS, PathTraits, traits_from_config


@dataclass
class _Context:
    config: Config
    traits: PathTraits[Any]

    def path(self, text: str) -> PathString:
        return PathString.from_unicode(text, self.traits)


pass_context = click.make_pass_decorator(_Context)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--flavour",
    type=click.Choice(FLAVOURS),
    default=None,
    help="Path convention (defaults to the configured one)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, config: Path | None, flavour: str | None, verbose: bool) -> None:
    """Platform-native path toolkit.

    Normalizes, splits and rewrites paths in either the Windows or the
    POSIX convention without touching the filesystem, and manages
    temporary files and directories.
    """
    from nativepath.config.loader import load_config
    from nativepath.errors import ConfigurationError
    from nativepath.utils.logging import configure_logging

    try:
        cfg = load_config(config)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(cfg.logging, level="DEBUG" if verbose else None)

    paths = cfg.paths
    if flavour is not None:
        paths = paths.model_copy(update={"flavour": flavour})
    ctx.obj = _Context(config=cfg, traits=traits_from_config(paths))


@cli.command()
@click.argument("path")
@pass_context
def simplify(ctx: _Context, path: str) -> None:
    """Remove '.' and '..' components and redundant separators."""
    click.echo(ctx.path(path).simplify().to_unicode())


@cli.command()
@click.argument("path")
@pass_context
def split(ctx: _Context, path: str) -> None:
    """Show prefix, drive, directory, base name and extension."""
    parts = ctx.path(path).split()
    for field in ("prefix", "drive", "directory", "base", "extension"):
        click.echo(f"{field}: {getattr(parts, field).to_unicode()}")


@cli.command()
@click.argument("name")
def sanitize(name: str) -> None:
    """Replace characters that are reserved in filenames with '_'."""
    from nativepath.services.sanitize import sanitize_path_component

    click.echo(sanitize_path_component(name))


@cli.command("to-relative")
@click.argument("path")
@click.argument("base")
@pass_context
def to_relative(ctx: _Context, path: str, base: str) -> None:
    """Rewrite PATH relative to BASE."""
    from nativepath.services.relative import absolute_path_to_relative

    click.echo(absolute_path_to_relative(ctx.path(path), ctx.path(base)).to_unicode())


@cli.command("to-absolute")
@click.argument("path")
@click.argument("base")
@pass_context
def to_absolute(ctx: _Context, path: str, base: str) -> None:
    """Expand a relative PATH against BASE."""
    from nativepath.services.relative import relative_path_to_absolute

    click.echo(relative_path_to_absolute(ctx.path(path), ctx.path(base)).to_unicode())


@cli.command("long-path")
@click.argument("path")
@pass_context
def long_path(ctx: _Context, path: str) -> None:
    """Escape PATH for OS calls beyond the path length limit."""
    from nativepath.services.relative import support_long_path

    result = support_long_path(ctx.path(path), max_path=ctx.config.paths.max_path)
    click.echo(result.to_unicode())


@cli.command("filter")
@click.option("--name", "short_name", required=True, help="Short name of the file type")
@click.option("--description", default="", help="Visible description")
@click.option("--ext", "extensions", multiple=True, help="Extension (repeatable)")
@click.option("--show-extensions", is_flag=True, help="List patterns in the label")
@click.option("--only", is_flag=True, help="Print only the pattern list")
@pass_context
def filter_(
    ctx: _Context,
    short_name: str,
    description: str,
    extensions: tuple[str, ...],
    show_extensions: bool,
    only: bool,
) -> None:
    """Render a file-picker filter string."""
    from nativepath.models.file_type import FileType, FileTypeFormat
    from nativepath.services.filters import to_filter_only_string, to_filter_string

    file_type = FileType(short_name=short_name, description=description, extensions=extensions)
    if only:
        result = to_filter_only_string(file_type, traits=ctx.traits)
    else:
        fmt = FileTypeFormat.SHOW_EXTENSIONS if show_extensions else FileTypeFormat.NONE
        result = to_filter_string(file_type, fmt, traits=ctx.traits)
    click.echo(result.to_unicode())


@cli.command("temp-name")
@click.option("--prefix", default=None, help="Name prefix (defaults to the configured one)")
@click.option("--extension", default="", help="Extension without the dot")
@pass_context
def temp_name(ctx: _Context, prefix: str | None, extension: str) -> None:
    """Print a fresh temporary pathname without creating anything."""
    from nativepath.services.temp import TemporaryPathname
    from nativepath.services.tokens import init_token_generator

    generator = init_token_generator(ctx.config.temp.seed)
    if prefix is None:
        prefix = ctx.config.temp.prefix
    name = TemporaryPathname(generator, prefix, extension, directory=ctx.config.temp.directory)
    click.echo(name.pathname.to_unicode())


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
def rmtree(path: Path) -> None:
    """Recursively delete the directory at absolute PATH."""
    from nativepath.services.fs import delete_directory_tree

    if not delete_directory_tree(PathString.from_fspath(path)):
        raise click.ClickException(f"Could not delete {path}")
    click.echo(f"Deleted {path}")


if __name__ == "__main__":
    cli()
