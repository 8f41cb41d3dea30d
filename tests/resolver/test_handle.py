"""Tests for ObjectHandle dict-style access."""

import pytest


@pytest.fixture
def square(resolver, shapes):
    return resolver.handle(shapes[2])


def test_getitem_resolves_through_chain(square):
    assert square["sides"] == 4


def test_getitem_miss_raises_key_error(square):
    with pytest.raises(KeyError):
        square["color"]


def test_setitem_sets_own_property(resolver, shapes, square):
    quad = shapes[0]

    square["sides"] = 5

    assert square.has_own("sides")
    assert resolver.get(quad, "sides") == 4


def test_delitem_removes_own_only(square):
    square["sides"] = 5
    del square["sides"]

    assert square["sides"] == 4
    with pytest.raises(KeyError):
        del square["sides"]


def test_contains_checks_own_and_inherited(square):
    assert "sides" in square
    assert "color" not in square
    assert not square.has_own("sides")


def test_get_with_default(square):
    assert square.get("sides") == 4
    assert square.get("color", "black") == "black"


def test_prototype_walks_up(resolver, shapes, square):
    quad, rect, _ = shapes

    assert square.prototype == resolver.handle(rect)
    assert square.prototype.prototype == resolver.handle(quad)
    assert square.prototype.prototype.prototype is None


def test_create_child(square):
    child = square.create_child(label="small")

    assert child.prototype == square
    assert child.own_keys() == ("label",)
    assert child.keys() == ["label", "sides"]
    assert child["sides"] == 4


@pytest.mark.parametrize("name", [3, None, ""])
def test_contains_is_false_for_invalid_names(square, name):
    assert name not in square
