"""Serialize request parameters into a query string.

Field order is fixed per parameter family and is part of the wire format:
callers and stores compare the resulting strings literally. A field is
written only when it differs from its default.
"""

from collections.abc import Mapping

from docstore_paths.params.models import (
    Consistency,
    DeleteByQueryParams,
    IndexParams,
    Replication,
    SearchParams,
    SimpleParams,
    UrlParams,
    VersionType,
)
from docstore_paths.path.assembler import escape


def append_query_string(path: str, params: Mapping[str, str] | None) -> str:
    """Append "?k=v&k=v" to *path*, escaping each value. Empty mappings add nothing."""
    if not params:
        return path
    query = "&".join(f"{key}={escape(value)}" for key, value in params.items())
    return f"{path}?{query}"


def simple_parameters(params: SimpleParams) -> dict[str, str]:
    result = {}
    if params.replication != Replication.SYNC:
        result["replication"] = params.replication.value
    if params.refresh:
        result["refresh"] = "true"
    return result


def delete_by_query_parameters(params: DeleteByQueryParams) -> dict[str, str]:
    result = {}
    if params.replication != Replication.SYNC:
        result["replication"] = params.replication.value
    if params.consistency != Consistency.QUORUM:
        result["consistency"] = params.consistency.value
    if params.routing:
        result["routing"] = params.routing
    return result


def url_parameters(params: UrlParams) -> dict[str, str]:
    """Parameters for single-document writes, including index-only extras."""
    result = {}
    if params.version:
        result["version"] = params.version
    if params.routing:
        result["routing"] = params.routing
    if params.parent:
        result["parent"] = params.parent
    if params.replication != Replication.SYNC:
        result["replication"] = params.replication.value
    if params.consistency != Consistency.QUORUM:
        result["consistency"] = params.consistency.value
    if params.refresh:
        result["refresh"] = "true"
    if params.index_params is not None:
        result.update(_index_parameters(params.index_params))
    return result


def _index_parameters(params: IndexParams) -> dict[str, str]:
    result = {}
    if params.version_type != VersionType.INTERNAL:
        result["version_type"] = params.version_type.value
    if params.timeout:
        result["timeout"] = params.timeout
    return result


def search_parameters(params: SearchParams) -> dict[str, str]:
    result = {}
    if params.routing:
        result["routing"] = params.routing
    if params.scroll:
        result["scroll"] = params.scroll
    if params.search_type is not None:
        result["search_type"] = params.search_type.value
    return result


def append_simple_parameters(path: str, params: SimpleParams | None) -> str:
    if params is None:
        return path
    return append_query_string(path, simple_parameters(params))


def append_delete_by_query_parameters(path: str, params: DeleteByQueryParams | None) -> str:
    if params is None:
        return path
    return append_query_string(path, delete_by_query_parameters(params))


def append_parameters(path: str, params: UrlParams | None) -> str:
    if params is None:
        return path
    return append_query_string(path, url_parameters(params))
