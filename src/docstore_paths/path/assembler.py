"""Assemble REST paths from index, type and id segments.

Each segment is percent-encoded on its own and segments are joined with
"/". Multi-valued index or type selections are comma-joined *before*
escaping, so they travel as a single segment ("a,b" -> "a%2Cb"); a comma
inside one name is therefore indistinguishable from a separator.

Trailing slash rules: "idx/" and "idx/type/" when nothing follows, no
trailing slash after an id or a suffix.
"""

from collections.abc import Iterable
from urllib.parse import quote

from docstore_paths.errors import InvalidArgument, require_value

Names = str | Iterable[str]


def escape(segment: str) -> str:
    """Percent-encode a path segment or query value.

    Only the RFC 3986 unreserved characters (letters, digits, "-", ".",
    "_", "~") are left as they are.
    """
    return quote(segment, safe="")


def join_names(names: Names | None, argument: str) -> str:
    """Collapse a single name or a collection of names to one comma-joined string."""
    if names is None or isinstance(names, str):
        return require_value(names, argument)

    names = list(names)
    if not names:
        raise InvalidArgument(f"{argument} must contain at least one name", argument=argument)
    for name in names:
        require_value(name, argument)
    return ",".join(names)


def normalize_suffix(suffix: str | None) -> str:
    """Strip exactly one leading "/" from a path suffix."""
    if suffix is None:
        raise InvalidArgument("suffix must not be None", argument="suffix")
    if suffix.startswith("/"):
        return suffix[1:]
    return suffix


def index_path(index: Names | None, suffix: str | None = None) -> str:
    """Build "<index>/" or "<index>/<suffix>"."""
    index = escape(join_names(index, "index"))
    if suffix is not None:
        return f"{index}/{normalize_suffix(suffix)}"
    return f"{index}/"


def index_type_path(index: Names | None, type_name: Names | None, suffix: str | None = None) -> str:
    """Build "<index>/<type>/" or "<index>/<type>/<suffix>"."""
    index = escape(join_names(index, "index"))
    type_name = escape(join_names(type_name, "type"))
    if suffix is not None:
        return f"{index}/{type_name}/{normalize_suffix(suffix)}"
    return f"{index}/{type_name}/"


def index_type_id_path(
    index: Names | None,
    type_name: Names | None,
    doc_id: str | None,
    suffix: str | None = None,
) -> str:
    """Build "<index>/<type>/<id>" or "<index>/<type>/<id>/<suffix>"."""
    index = escape(join_names(index, "index"))
    type_name = escape(join_names(type_name, "type"))
    doc_id = escape(require_value(doc_id, "id"))
    if suffix is not None:
        return f"{index}/{type_name}/{doc_id}/{normalize_suffix(suffix)}"
    return f"{index}/{type_name}/{doc_id}"
