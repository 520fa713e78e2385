from unittest.mock import MagicMock

import pytest

from docstore_paths.builder import PathBuilder
from docstore_paths.config import ConnectionSettings
from docstore_paths.errors import InvalidArgument
from docstore_paths.params.models import SearchType, SimpleParams, UrlParams
from docstore_paths.path.descriptor import QueryDescriptor, SearchDescriptor


class User:
    def __init__(self, id=None):
        self.id = id


def _make_builder(**settings) -> PathBuilder:
    defaults = dict(default_index="my-index")
    defaults.update(settings)
    return PathBuilder(ConnectionSettings(**defaults))


class TestConstruction:
    def test_settings_required(self):
        with pytest.raises(InvalidArgument):
            PathBuilder(None)

    def test_custom_resolvers_used(self):
        index_resolver = MagicMock()
        index_resolver.resolve.return_value = "custom"
        builder = PathBuilder(ConnectionSettings(), index_resolver=index_resolver)
        assert builder.create_path_for(User(id=1)) == "custom/user/1"
        index_resolver.resolve.assert_called_once_with(User)


class TestCreatePathFor:
    def test_all_resolved(self):
        assert _make_builder().create_path_for(User(id=42)) == "my-index/user/42"

    def test_explicit_values_win(self):
        builder = _make_builder()
        assert builder.create_path_for(User(id=42), index="other", type_name="person", doc_id="7") == "other/person/7"

    def test_explicit_values_skip_resolvers(self):
        id_resolver = MagicMock()
        builder = PathBuilder(ConnectionSettings(default_index="i"), id_resolver=id_resolver)
        builder.create_path_for(User(), doc_id="7")
        id_resolver.resolve.assert_not_called()

    def test_missing_id_raises(self):
        with pytest.raises(InvalidArgument) as exc:
            _make_builder().create_path_for(User())
        assert exc.value.argument == "id"

    def test_missing_index_raises(self):
        with pytest.raises(InvalidArgument):
            PathBuilder(ConnectionSettings()).create_path_for(User(id=1))


class TestCreateIdOptionalPathFor:
    def test_without_id_returns_type_path(self):
        assert _make_builder().create_id_optional_path_for(User()) == "my-index/user/"

    def test_empty_resolved_id_returns_type_path(self):
        id_resolver = MagicMock()
        id_resolver.resolve.return_value = ""
        builder = PathBuilder(ConnectionSettings(default_index="my-index"), id_resolver=id_resolver)
        assert builder.create_id_optional_path_for(User()) == "my-index/user/"

    def test_with_id_returns_document_path(self):
        assert _make_builder().create_id_optional_path_for(User(id="a b")) == "my-index/user/a%20b"


class TestDelegation:
    def test_plain_paths(self):
        builder = _make_builder()
        assert builder.create_index_path(["a", "b"], "_refresh") == "a%2Cb/_refresh"
        assert builder.create_index_type_path("i", "t") == "i/t/"
        assert builder.create_index_type_id_path("i", "t", "1") == "i/t/1"

    def test_parameters(self):
        builder = _make_builder()
        assert builder.append_parameters_to_path("i/t/1", UrlParams(routing="r1")) == "i/t/1?routing=r1"
        assert builder.append_simple_parameters_to_path("i/_bulk", SimpleParams(refresh=True)) == "i/_bulk?refresh=true"
        assert builder.append_delete_by_query_parameters_to_path("i/_query", None) == "i/_query"


class TestGetSearchPath:
    def test_untyped_uses_default_index_and_no_type(self):
        assert _make_builder().get_search_path(SearchDescriptor()) == "my-index/_search"

    def test_typed_uses_resolvers(self):
        assert _make_builder().get_search_path(SearchDescriptor(), User) == "my-index/user/_search"

    def test_typed_with_mapped_index(self):
        builder = _make_builder(type_indices={"User": "people"})
        assert builder.get_search_path(SearchDescriptor(), User) == "people/user/_search"

    def test_explicit_indices_and_types(self):
        d = SearchDescriptor(indices=["a", "b"], types=["t1", "t2"])
        assert _make_builder().get_search_path(d, User) == "a%2Cb/t1%2Ct2/_search"

    def test_empty_index_list_means_all(self):
        d = SearchDescriptor(indices=[])
        assert _make_builder().get_search_path(d) == "_all/_search"

    def test_all_types_drops_type_segment(self):
        d = SearchDescriptor(all_types=True)
        assert _make_builder().get_search_path(d, User) == "my-index/_search"

    def test_search_params_appended(self):
        d = SearchDescriptor(routing="r1", scroll="1m", search_type=SearchType.SCAN)
        assert _make_builder().get_search_path(d) == "my-index/_search?routing=r1&scroll=1m&search_type=scan"

    def test_count_search_type(self):
        d = SearchDescriptor(search_type=SearchType.COUNT)
        assert _make_builder().get_search_path(d).endswith("?search_type=count")

    def test_no_default_index_raises(self):
        with pytest.raises(InvalidArgument):
            PathBuilder(ConnectionSettings()).get_search_path(SearchDescriptor())


class TestGetPath:
    def test_generic_params_escaped(self):
        d = QueryDescriptor(indices=["logs"], params={"q": "level:error"})
        assert _make_builder().get_path(d, "_count") == "logs/_count?q=level%3Aerror"

    def test_suffix_normalized(self):
        d = QueryDescriptor(all_indices=True)
        assert _make_builder().get_path(d, "/_query") == "_all/_query"


class TestEmptyNamesInDescriptor:
    def test_empty_type_name_does_not_widen_search(self):
        with pytest.raises(InvalidArgument):
            _make_builder().get_search_path(SearchDescriptor(types=[""]), User)

    def test_empty_index_name_in_list_raises(self):
        with pytest.raises(InvalidArgument):
            _make_builder().get_path(QueryDescriptor(indices=["a", ""]), "_count")
