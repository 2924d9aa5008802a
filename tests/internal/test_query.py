"""Tests for query-string encoding."""

from urllib.parse import urlsplit

import pytest

from httpreq._internal.query import apply_query, encode_query, unescape_query
from httpreq.exceptions import QueryUnescapeError


class TestEncodeQuery:
    """Tests for encode_query."""

    def test_sorted_by_key(self):
        """Should sort parameters by key."""
        assert encode_query("", {"type": "alpha", "name": "gamma"}) == "name=gamma&type=alpha"

    def test_merges_existing_query(self):
        """Should keep the URL's own parameters ahead of added ones."""
        assert encode_query("wrb=true&a=1", {"a": "2"}) == "a=1&a=2&wrb=true"

    def test_escapes_values(self):
        """Should percent-encode reserved characters."""
        assert encode_query("", {"q": "a b&c"}) == "q=a+b%26c"


class TestUnescapeQuery:
    """Tests for unescape_query."""

    def test_decodes(self):
        """Should percent-decode and turn plus into space."""
        assert unescape_query("q=a+b%26c&path=%2Froot") == "q=a b&c&path=/root"

    @pytest.mark.parametrize("query", ["q=100%", "q=%zz", "q=%4"])
    def test_malformed_escape(self, query):
        """Should reject malformed percent escapes."""
        with pytest.raises(QueryUnescapeError):
            unescape_query(query)


class TestApplyQuery:
    """Tests for apply_query."""

    def test_replaces_query(self):
        """Should write the encoded query back into the URL."""
        url = apply_query("http://test/users?wrb=true#top", {"name": "gamma"})
        assert url == "http://test/users?name=gamma&wrb=true#top"

    def test_unescape_after_encode(self):
        """Should decode the encoded query when unescape is set."""
        url = apply_query("http://test/search", {"filter": "a=b"}, unescape=True)
        assert url == "http://test/search?filter=a=b"

    def test_escaped_by_default(self):
        """Should keep the query encoded without unescape."""
        url = apply_query("http://test/search", {"filter": "a=b"})
        assert url == "http://test/search?filter=a%3Db"

    def test_unescaped_hash_becomes_fragment(self):
        """Should leave a decoded "#" to start the URL fragment."""
        url = apply_query("http://test/search", {"tag": "a#b"}, unescape=True)
        assert url == "http://test/search?tag=a#b"
        assert urlsplit(url).query == "tag=a"
        assert urlsplit(url).fragment == "b"
