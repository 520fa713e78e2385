"""Resolvers backed by the mappings in ConnectionSettings.

Entities are looked up by class name, so the mappings can live in a YAML
config file.
"""

import logging
from collections.abc import Mapping
from typing import Any

from docstore_paths.config import ConnectionSettings

logger = logging.getLogger(__name__)

DEFAULT_ID_FIELD = "id"


class IndexNameResolver:
    """Maps an entity class to its index, or the connection's default index."""

    def __init__(self, settings: ConnectionSettings):
        self.settings = settings

    def resolve(self, entity_type: type) -> str | None:
        index = self.settings.type_indices.get(entity_type.__name__)
        if index:
            return index
        logger.debug("No index mapped for %s, using default index %r", entity_type.__name__, self.settings.default_index)
        return self.settings.default_index


class TypeNameResolver:
    """Maps an entity class to its type name; unmapped classes use their lower-cased name."""

    def __init__(self, settings: ConnectionSettings):
        self.settings = settings

    def resolve(self, entity_type: type) -> str | None:
        name = entity_type.__name__
        return self.settings.type_names.get(name) or name.lower()


class IdResolver:
    """Reads a document id from an entity's id field (attribute or mapping key)."""

    def __init__(self, settings: ConnectionSettings):
        self.settings = settings

    def resolve(self, entity_type: type, instance: Any) -> str | None:
        field = self.settings.id_fields.get(entity_type.__name__, DEFAULT_ID_FIELD)
        if isinstance(instance, Mapping):
            value = instance.get(field)
        else:
            value = getattr(instance, field, None)
        if value is None:
            return None
        return str(value)
