"""Tests for the insertion-ordered Fields mapping."""

import pytest

from loggan import Fields


def test_ordered_keys_follow_insertion_order():
    fields = Fields()
    fields["a"] = 1
    fields["b"] = 2
    fields["c"] = 3
    assert fields.ordered_keys() == ["a", "b", "c"]


def test_ordered_keys_not_sorted():
    """Scenario: keys inserted out of alphabetical order keep that order"""
    fields = Fields(zeta=1, alpha=2, mid=3)
    assert fields.ordered_keys() == ["zeta", "alpha", "mid"]


def test_ordered_keys_restartable():
    fields = Fields([("x", 1), ("y", 2)])
    first = fields.ordered_keys()
    first.append("junk")
    assert fields.ordered_keys() == ["x", "y"]
    assert list(fields) == ["x", "y"]


def test_update_keeps_first_position():
    fields = Fields(a=1, b=2, c=3)
    fields["a"] = 10
    assert fields.ordered_keys() == ["a", "b", "c"]
    assert fields["a"] == 10


def test_delete_then_reinsert_moves_to_end():
    fields = Fields(a=1, b=2, c=3)
    del fields["a"]
    fields["a"] = 1
    assert fields.ordered_keys() == ["b", "c", "a"]


def test_lookup_found_and_missing():
    fields = Fields(first=1, empty=None)
    assert fields.lookup("first") == (1, True)
    assert fields.lookup("empty") == (None, True)
    assert fields.lookup("nope") == (None, False)
    assert "nope" not in fields
    assert fields.get("nope", "dflt") == "dflt"


def test_non_str_key_rejected():
    with pytest.raises(TypeError, match="must be str"):
        Fields({1: "one"})


def test_copy_is_independent():
    fields = Fields(a=1)
    clone = fields.copy()
    clone["b"] = 2
    assert fields.ordered_keys() == ["a"]
    assert clone.ordered_keys() == ["a", "b"]
    assert isinstance(clone, Fields)
