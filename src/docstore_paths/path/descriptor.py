"""Index and type selection for search-style requests.

A descriptor says which indices and types a request targets. Each selection
has three states:

- an explicit, non-empty list: used as given, comma-joined;
- an explicit empty list or the "all" flag: every index ("_all") or no
  type filter at all;
- unset (None): the caller-supplied fallback decides.
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, field_validator

from docstore_paths.params.models import SearchParams, SearchType
from docstore_paths.params.serializer import search_parameters
from docstore_paths.path.assembler import join_names

logger = logging.getLogger(__name__)

ALL_INDICES = "_all"

Fallback = Callable[[], str | None]


class QueryDescriptor(BaseModel):
    """Index/type selection plus the operation's own URL parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    indices: list[str] | None = None
    all_indices: bool = False
    types: list[str] | None = None
    all_types: bool = False
    params: dict[str, str] = {}

    def url_params(self) -> dict[str, str]:
        return dict(self.params)


class SearchDescriptor(QueryDescriptor):
    """Descriptor for a search request; its URL parameters come from the search fields."""

    routing: str = ""
    scroll: str = ""
    search_type: SearchType | None = None

    @field_validator("params")
    @classmethod
    def _no_generic_params(cls, value: dict[str, str]) -> dict[str, str]:
        if value:
            raise ValueError("search requests take routing, scroll and search_type, not params")
        return value

    def search_params(self) -> SearchParams:
        return SearchParams(routing=self.routing, scroll=self.scroll, search_type=self.search_type)

    def url_params(self) -> dict[str, str]:
        return search_parameters(self.search_params())


def select_indices(descriptor: QueryDescriptor, fallback: Fallback) -> str | None:
    """Return the comma-joined index selection for *descriptor*."""
    if descriptor.indices:
        return join_names(descriptor.indices, "index")
    # an explicitly empty list means every index
    if descriptor.indices is not None or descriptor.all_indices:
        return ALL_INDICES
    index = fallback()
    logger.debug("No index selected, falling back to %r", index)
    return index


def select_types(descriptor: QueryDescriptor, fallback: Fallback) -> str | None:
    """Return the comma-joined type selection, or None for no type filter."""
    if descriptor.types:
        return join_names(descriptor.types, "type")
    if descriptor.types is not None or descriptor.all_types:
        return None
    return fallback()
