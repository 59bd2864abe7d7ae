# main.py
import logging
import click

from cabinet.base import FileCabinet
from cabinet.renderer import Renderer
from cabinet.seed import DEMO_CABINET_NAME, DEMO_CABINET_SIZE, demo_folders, nested_demo_folders
from cabinet.utils import InvalidSizeError

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Queries the demo runs when no option picks one
DEFAULT_NAME_QUERY = "Test2"
DEFAULT_SIZE_QUERY = "medium"


def _configure_logging(log_level: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


@click.command()
@click.option("--nested", is_flag=True,
              help="Use the nested demo cabinet instead of the flat one.")
@click.option("-n", "--name", "name_query", default=None,
              help="Find the first folder with this name (case and whitespace insensitive).")
@click.option("-s", "--size", "size_query", default=None,
              help="List every folder of this size: small, medium or large.")
@click.option("--count", "count_only", is_flag=True,
              help="Only print the number of folders.")
@click.option("--no-tree", is_flag=True,
              help="Do not render the folder tree.")
@click.option("--log-level", default="WARNING", envvar="CABINET_LOG_LEVEL", show_default=True,
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Logging level for messages written to stderr.")
@click.option("-v", "--verbose", is_flag=True,
              help="Shortcut for --log-level DEBUG.")
def cli(nested, name_query, size_query, count_only, no_tree, log_level, verbose):
    """
    Runs name, size and count queries against a demo file cabinet.

    Folders may be nested cabinets; every query searches the whole hierarchy
    depth-first, each cabinet before its contents.
    """
    _configure_logging(log_level, verbose)

    folders = nested_demo_folders() if nested else demo_folders()
    cabinet = FileCabinet(folders, DEMO_CABINET_NAME, DEMO_CABINET_SIZE)

    # With neither query given, run both defaults like the original demo
    if not count_only and name_query is None and size_query is None:
        name_query, size_query = DEFAULT_NAME_QUERY, DEFAULT_SIZE_QUERY

    # Size is checked before any output, --count included
    try:
        by_size = cabinet.find_folders_by_size(size_query) if size_query is not None else None
    except InvalidSizeError as e:
        raise click.BadParameter(str(e), param_hint="'--size'") from e

    if count_only:
        click.echo(cabinet.count())
        return

    out_parts = []
    if not no_tree:
        out_parts.append(f"### {cabinet} ###")
        out_parts.append(Renderer(cabinet.folders).render_tree())

    if name_query is not None:
        out_parts.append(f"\n### Find by name: {name_query!r} ###")
        out_parts.append(Renderer.render_folder(cabinet.find_folder_by_name(name_query)))

    if by_size is not None:
        out_parts.append(f"\n### Find by size: {size_query!r} ###")
        out_parts.append(Renderer.render_folders(by_size))

    out_parts.append(f"\n### Count ###\n{cabinet.count()}")
    click.echo("\n".join(out_parts))


if __name__ == "__main__":
    cli()
