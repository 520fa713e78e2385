"""Interfaces for turning an entity class (and instance) into index, type and id.

The path builder only calls these when the caller did not pass the value
explicitly.
"""

from typing import Any, Protocol


class IndexResolver(Protocol):
    def resolve(self, entity_type: type) -> str | None: ...


class TypeResolver(Protocol):
    def resolve(self, entity_type: type) -> str | None: ...


class IdResolver(Protocol):
    def resolve(self, entity_type: type, instance: Any) -> str | None: ...
