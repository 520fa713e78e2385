"""Request parameter models for the store's REST API.

Every field has a default that the store already assumes; the serializer
only writes a field into the query string when it differs from that default.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Replication(str, Enum):
    SYNC = "sync"  # default
    ASYNC = "async"


class Consistency(str, Enum):
    ONE = "one"
    QUORUM = "quorum"  # default
    ALL = "all"


class VersionType(str, Enum):
    INTERNAL = "internal"  # default
    EXTERNAL = "external"


class SearchType(str, Enum):
    """How a search is distributed over shards. No default: only sent when set."""

    QUERY_THEN_FETCH = "query_then_fetch"
    QUERY_AND_FETCH = "query_and_fetch"
    DFS_QUERY_THEN_FETCH = "dfs_query_then_fetch"
    DFS_QUERY_AND_FETCH = "dfs_query_and_fetch"
    COUNT = "count"
    SCAN = "scan"


class _Params(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SimpleParams(_Params):
    """Parameters accepted by simple write operations (e.g. bulk, refresh-style calls)."""

    replication: Replication = Replication.SYNC
    refresh: bool = False


class DeleteByQueryParams(_Params):
    """Parameters accepted by delete-by-query."""

    replication: Replication = Replication.SYNC
    consistency: Consistency = Consistency.QUORUM
    routing: str = ""


class IndexParams(_Params):
    """Extra parameters only meaningful when indexing a document."""

    version_type: VersionType = VersionType.INTERNAL
    timeout: str = ""  # e.g. "5m"


class UrlParams(_Params):
    """Full parameter set for single-document writes (index, update, delete)."""

    version: str = ""
    routing: str = ""
    parent: str = ""
    replication: Replication = Replication.SYNC
    consistency: Consistency = Consistency.QUORUM
    refresh: bool = False
    index_params: IndexParams | None = None


class SearchParams(_Params):
    """Parameters carried by a search request."""

    routing: str = ""
    scroll: str = ""  # keep-alive, e.g. "1m"
    search_type: SearchType | None = None
