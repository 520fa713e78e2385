"""Connection settings: default index and per-entity naming rules.

Settings can be built directly or loaded from a YAML file::

    default_index: my-index
    type_indices:
      Post: blog
    type_names:
      Post: blogpost
    id_fields:
      Post: slug

``DOCSTORE_DEFAULT_INDEX`` overrides ``default_index`` from the environment.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from docstore_paths.errors import InvalidArgument

DEFAULT_INDEX_ENV = "DOCSTORE_DEFAULT_INDEX"


class ConnectionSettings(BaseModel):
    """Static naming configuration shared (read-only) by every path builder call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_index: str | None = None
    type_indices: dict[str, str] = {}  # entity class name -> index
    type_names: dict[str, str] = {}  # entity class name -> type name
    id_fields: dict[str, str] = {}  # entity class name -> id attribute


def load_settings(file_path: Path | None = None) -> ConnectionSettings:
    """Load settings from a YAML file (optional) and the environment."""
    data = {}
    if file_path is not None:
        text = file_path.read_text(encoding="utf-8")
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise InvalidArgument(f"Cannot parse {file_path}: {e}", argument="config") from e
        if not isinstance(data, dict):
            raise InvalidArgument(f"{file_path} must contain a mapping", argument="config")

    env_index = os.getenv(DEFAULT_INDEX_ENV)
    if env_index:
        data["default_index"] = env_index

    try:
        return ConnectionSettings(**data)
    except ValidationError as e:
        raise InvalidArgument(f"Invalid settings in {file_path}: {e}", argument="config") from e
