# tests/test_utils.py
"""Tests for collection helpers."""

from querykit.query.utils import is_absent_or_empty, or_empty_if_absent


class TestOrEmptyIfAbsent:

    def test_none_becomes_empty(self):
        assert list(or_empty_if_absent(None)) == []

    def test_collection_is_returned_as_is(self):
        items = [1, 2, 3]
        assert or_empty_if_absent(items) is items

    def test_empty_collection_is_returned_as_is(self):
        items = set()
        assert or_empty_if_absent(items) is items


class TestIsAbsentOrEmpty:

    def test_none(self):
        assert is_absent_or_empty(None) is True

    def test_empty_sized_collections(self):
        assert is_absent_or_empty([]) is True
        assert is_absent_or_empty({}) is True
        assert is_absent_or_empty("") is True

    def test_non_empty_sized_collections(self):
        assert is_absent_or_empty([0]) is False
        assert is_absent_or_empty({"a": None}) is False

    def test_empty_iterator(self):
        assert is_absent_or_empty(iter([])) is True

    def test_non_empty_generator(self):
        """A generator is probed for its first element only."""
        assert is_absent_or_empty(x for x in [None]) is False
