"""
Tests for query string building.
"""
from api_runtime import with_query


class TestWithQuery:
    def test_no_query(self):
        assert with_query("/items") == "/items"
        assert with_query("/items", {}) == "/items"

    def test_simple(self):
        assert with_query("/items", {"q": "a b", "page": 2}) == "/items?q=a+b&page=2"

    def test_skips_none(self):
        assert with_query("/items", {"q": None, "page": 1}) == "/items?page=1"
        assert with_query("/items", {"q": None}) == "/items"

    def test_sequences_repeat(self):
        assert with_query("/items", {"tag": ["x", "y"]}) == "/items?tag=x&tag=y"

    def test_booleans_lowercase(self):
        assert with_query("/items", {"archived": False}) == "/items?archived=false"

    def test_path_not_escaped(self):
        assert with_query("/a b", {"q": "&"}) == "/a b?q=%26"
