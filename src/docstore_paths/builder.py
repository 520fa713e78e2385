"""PathBuilder: turns entities and request descriptors into REST paths.

The builder holds no state besides the connection settings and its three
resolvers, so one instance can serve any number of concurrent callers.
"""

import logging
from typing import Any

from docstore_paths.config import ConnectionSettings
from docstore_paths.errors import InvalidArgument
from docstore_paths.params import serializer
from docstore_paths.params.models import DeleteByQueryParams, SimpleParams, UrlParams
from docstore_paths.path import assembler
from docstore_paths.path.assembler import Names
from docstore_paths.path.descriptor import QueryDescriptor, SearchDescriptor, select_indices, select_types
from docstore_paths.resolvers import default
from docstore_paths.resolvers.base import IdResolver, IndexResolver, TypeResolver

logger = logging.getLogger(__name__)

SEARCH_SUFFIX = "_search"


class PathBuilder:
    """Builds paths and query strings for the store's REST API."""

    def __init__(
        self,
        settings: ConnectionSettings,
        index_resolver: IndexResolver | None = None,
        type_resolver: TypeResolver | None = None,
        id_resolver: IdResolver | None = None,
    ):
        if settings is None:
            raise InvalidArgument("settings must not be None", argument="settings")
        self.settings = settings
        self.index_resolver = index_resolver or default.IndexNameResolver(settings)
        self.type_resolver = type_resolver or default.TypeNameResolver(settings)
        self.id_resolver = id_resolver or default.IdResolver(settings)

    # -- entity paths --

    def create_path_for(
        self,
        entity: Any,
        index: str | None = None,
        type_name: str | None = None,
        doc_id: str | None = None,
    ) -> str:
        """Path to a single document; missing parts are resolved from the entity."""
        index, type_name, doc_id = self._resolve(entity, index, type_name, doc_id)
        return assembler.index_type_id_path(index, type_name, doc_id)

    def create_id_optional_path_for(
        self,
        entity: Any,
        index: str | None = None,
        type_name: str | None = None,
        doc_id: str | None = None,
    ) -> str:
        """Like create_path_for, but falls back to "<index>/<type>/" when no id is known."""
        index, type_name, doc_id = self._resolve(entity, index, type_name, doc_id)
        if not doc_id:
            return assembler.index_type_path(index, type_name)
        return assembler.index_type_id_path(index, type_name, doc_id)

    def _resolve(self, entity, index, type_name, doc_id):
        entity_type = type(entity)
        if index is None:
            index = self.index_resolver.resolve(entity_type)
        if type_name is None:
            type_name = self.type_resolver.resolve(entity_type)
        if doc_id is None:
            doc_id = self.id_resolver.resolve(entity_type, entity)
        logger.debug("Resolved %s to index=%r type=%r id=%r", entity_type.__name__, index, type_name, doc_id)
        return index, type_name, doc_id

    # -- plain paths --

    def create_index_path(self, index: Names, suffix: str | None = None) -> str:
        return assembler.index_path(index, suffix)

    def create_index_type_path(self, index: Names, type_name: Names, suffix: str | None = None) -> str:
        return assembler.index_type_path(index, type_name, suffix)

    def create_index_type_id_path(self, index: Names, type_name: Names, doc_id: str, suffix: str | None = None) -> str:
        return assembler.index_type_id_path(index, type_name, doc_id, suffix)

    # -- query strings --

    def append_simple_parameters_to_path(self, path: str, params: SimpleParams | None) -> str:
        return serializer.append_simple_parameters(path, params)

    def append_delete_by_query_parameters_to_path(self, path: str, params: DeleteByQueryParams | None) -> str:
        return serializer.append_delete_by_query_parameters(path, params)

    def append_parameters_to_path(self, path: str, params: UrlParams | None) -> str:
        return serializer.append_parameters(path, params)

    # -- descriptor paths --

    def get_search_path(self, descriptor: SearchDescriptor, entity_type: type | None = None) -> str:
        """Path for a search request, e.g. "my-index/user/_search?routing=r1"."""
        return self.get_path(descriptor, SEARCH_SUFFIX, entity_type)

    def get_path(self, descriptor: QueryDescriptor, suffix: str, entity_type: type | None = None) -> str:
        """Path for any index/type-scoped operation ending in *suffix*.

        Untyped requests (no *entity_type*) fall back to the connection's
        default index and no type filter.
        """
        if entity_type is None:
            indices = select_indices(descriptor, lambda: self.settings.default_index)
            types = select_types(descriptor, lambda: None)
        else:
            indices = select_indices(descriptor, lambda: self.index_resolver.resolve(entity_type))
            types = select_types(descriptor, lambda: self.type_resolver.resolve(entity_type))

        if types:
            path = assembler.index_type_path(indices, types, suffix)
        else:
            path = assembler.index_path(indices, suffix)
        path = serializer.append_query_string(path, descriptor.url_params())
        logger.debug("Built path %s", path)
        return path
