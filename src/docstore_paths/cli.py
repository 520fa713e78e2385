"""CLI entry point for docstore-paths."""

import logging
from pathlib import Path

import click

from docstore_paths.builder import PathBuilder
from docstore_paths.config import load_settings
from docstore_paths.errors import InvalidArgument
from docstore_paths.params.models import Consistency, IndexParams, Replication, SearchType, UrlParams, VersionType
from docstore_paths.path.descriptor import SearchDescriptor


def _choices(enum_cls) -> click.Choice:
    return click.Choice([m.value for m in enum_cls])


def _entity_type(name: str | None) -> type | None:
    """A stand-in class whose name matches the mappings in the config file."""
    if name is None:
        return None
    return type(name, (), {})


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML connection settings.")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution steps.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool):
    """Build REST paths and query strings for a document store."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        settings = load_settings(config_path)
    except InvalidArgument as e:
        raise click.UsageError(str(e)) from e
    ctx.obj = PathBuilder(settings)


@main.command()
@click.argument("index")
@click.argument("type_name", required=False)
@click.argument("doc_id", required=False)
@click.option("--suffix", default=None, help="Path tail, e.g. _search.")
@click.pass_obj
def path(builder: PathBuilder, index: str, type_name: str | None, doc_id: str | None, suffix: str | None):
    """Build INDEX[/TYPE[/ID]] with an optional suffix."""
    indices = index.split(",")
    try:
        if doc_id is not None:
            result = builder.create_index_type_id_path(indices, type_name.split(","), doc_id, suffix)
        elif type_name is not None:
            result = builder.create_index_type_path(indices, type_name.split(","), suffix)
        else:
            result = builder.create_index_path(indices, suffix)
    except InvalidArgument as e:
        raise click.UsageError(str(e)) from e
    click.echo(result)


@main.command()
@click.option("--index", "indices", multiple=True, help="Index to search (repeatable).")
@click.option("--all-indices", is_flag=True, help="Search every index.")
@click.option("--type", "types", multiple=True, help="Type to search (repeatable).")
@click.option("--all-types", is_flag=True, help="Do not filter by type.")
@click.option("--routing", default="", help="Routing value.")
@click.option("--scroll", default="", help="Scroll keep-alive, e.g. 1m.")
@click.option("--search-type", default=None, type=_choices(SearchType), help="Search type.")
@click.option("--entity", default=None, help="Entity name whose mapped index/type is the fallback.")
@click.pass_obj
def search(
    builder: PathBuilder,
    indices: tuple[str, ...],
    all_indices: bool,
    types: tuple[str, ...],
    all_types: bool,
    routing: str,
    scroll: str,
    search_type: str | None,
    entity: str | None,
):
    """Build a _search path."""
    descriptor = SearchDescriptor(
        indices=list(indices) or None,
        all_indices=all_indices,
        types=list(types) or None,
        all_types=all_types,
        routing=routing,
        scroll=scroll,
        search_type=SearchType(search_type) if search_type else None,
    )
    try:
        result = builder.get_search_path(descriptor, _entity_type(entity))
    except InvalidArgument as e:
        raise click.UsageError(str(e)) from e
    click.echo(result)


@main.command()
@click.argument("base_path")
@click.option("--version", "version", default="", help="Document version.")
@click.option("--routing", default="", help="Routing value.")
@click.option("--parent", default="", help="Parent document id.")
@click.option("--replication", default=Replication.SYNC.value, type=_choices(Replication))
@click.option("--consistency", default=Consistency.QUORUM.value, type=_choices(Consistency))
@click.option("--refresh", is_flag=True, help="Refresh after the write.")
@click.option("--version-type", default=None, type=_choices(VersionType), help="Index writes only.")
@click.option("--timeout", default=None, help="Index writes only, e.g. 5m.")
@click.pass_obj
def params(
    builder: PathBuilder,
    base_path: str,
    version: str,
    routing: str,
    parent: str,
    replication: str,
    consistency: str,
    refresh: bool,
    version_type: str | None,
    timeout: str | None,
):
    """Append write parameters to BASE_PATH."""
    index_params = None
    if version_type is not None or timeout is not None:
        index_params = IndexParams(
            version_type=VersionType(version_type or VersionType.INTERNAL.value),
            timeout=timeout or "",
        )
    url_params = UrlParams(
        version=version,
        routing=routing,
        parent=parent,
        replication=Replication(replication),
        consistency=Consistency(consistency),
        refresh=refresh,
        index_params=index_params,
    )
    click.echo(builder.append_parameters_to_path(base_path, url_params))
