"""Tests for the JSON helpers."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from objects_tasks.config import ObjectsTasksConfig
from objects_tasks.errors import SerializationError
from objects_tasks.serialization import from_json, get_json
from objects_tasks.shapes import Rectangle


class Circle:
    def __init__(self, radius: float) -> None:
        raise AssertionError("constructor must not run")

    def get_circumference(self) -> float:
        return 2 * 3.0 * self.radius


class Tag:
    def __init__(self, name: str, count: int) -> None:
        self.name = name
        self.count = count


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_scalars(self):
        assert get_json("a") == '"a"'
        assert get_json(None) == "null"
        assert get_json(True) == "true"

    def test_dataclass(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_nested_dataclass(self):
        assert get_json({"r": Rectangle(1, 2)}) == '{"r":{"width":1,"height":2}}'

    def test_sort_keys(self):
        cfg = ObjectsTasksConfig(json_sort_keys=True)
        assert get_json({"width": 10, "height": 20}, cfg) == '{"height":20,"width":10}'

    def test_indent(self):
        cfg = ObjectsTasksConfig(json_indent=2)
        assert get_json({"a": 1}, cfg) == '{\n  "a": 1\n}'

    def test_unserializable(self):
        with pytest.raises(SerializationError) as exc_info:
            get_json(object())
        assert isinstance(exc_info.value.cause, TypeError)

    def test_plain_object_uses_instance_attributes(self):
        assert get_json(Tag("a", 2)) == '{"name":"a","count":2}'

    def test_class_object_is_unserializable(self):
        with pytest.raises(SerializationError):
            get_json(Circle)

    def test_circular_reference(self):
        data: list = []
        data.append(data)
        with pytest.raises(SerializationError):
            get_json(data)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_binds_to_class_without_constructor(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == 60.0

    def test_frozen_dataclass(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.get_area() == 200
        assert r == Rectangle(10, 20)

    def test_slots_dataclass(self):
        p = from_json(Point, '{"x":1,"y":2}')
        assert (p.x, p.y) == (1, 2)

    def test_unknown_slot_attribute(self):
        with pytest.raises(SerializationError, match="Cannot set 'z'"):
            from_json(Point, '{"z":1}')

    def test_round_trip_plain_class(self):
        c = from_json(Circle, '{"radius":10}')
        assert get_json(c) == '{"radius":10}'

    def test_round_trip_rectangle(self):
        r = Rectangle(3, 4)
        assert from_json(Rectangle, get_json(r)) == r

    def test_invalid_json(self):
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json(Circle, "{radius: 10")

    def test_non_object_payload(self):
        with pytest.raises(SerializationError, match="Expected a JSON object, got list"):
            from_json(Circle, "[1, 2]")
