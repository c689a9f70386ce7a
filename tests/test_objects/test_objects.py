"""Tests for the Rectangle record and the JSON passthroughs."""

import json
from dataclasses import dataclass

import pytest
from click.testing import CliRunner

from cssbuild.cli.main import cli
from cssbuild.objects import Rectangle, from_json, to_json


@dataclass
class Circle:
    radius: float

    def get_area(self) -> float:
        return 3.14 * self.radius * self.radius


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        r = Rectangle(10, 20)
        assert r.area == 200
        assert r.get_area() == 200

    def test_is_frozen(self):
        r = Rectangle(1, 2)
        with pytest.raises(AttributeError):
            r.width = 5  # type: ignore[misc]


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert json.loads(to_json({"width": 10, "height": 20})) == {"width": 10, "height": 20}

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_sort_keys_and_indent(self):
        text = to_json({"b": 1, "a": 2}, indent=2, sort_keys=True)
        assert text == '{\n  "a": 2,\n  "b": 1\n}'

    def test_dataclass_type_is_not_converted(self):
        with pytest.raises(TypeError):
            to_json(Rectangle)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_attaches_type(self):
        c = from_json(Circle, '{"radius": 10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_area() == pytest.approx(314.0)

    def test_frozen_dataclass(self):
        r = from_json(Rectangle, '{"width": 10, "height": 20}')
        assert isinstance(r, Rectangle)
        assert r.area == 200

    def test_keys_not_in_fields_are_attached(self):
        c = from_json(Circle, '{"radius": 1, "color": "red"}')
        assert c.color == "red"

    def test_initializer_not_called(self):
        class Strict:
            def __init__(self) -> None:
                raise AssertionError("should not run")

        obj = from_json(Strict, '{"x": 1}')
        assert obj.x == 1

    def test_non_object_rejected(self):
        with pytest.raises(TypeError, match="Expected a JSON object"):
            from_json(Circle, "[1, 2]")

    def test_invalid_json(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Circle, "{not json")

    def test_read_only_property_key_is_skipped(self):
        r = from_json(Rectangle, '{"width": 2, "height": 3, "area": 99}')
        assert r.width == 2
        assert r.area == 6

    def test_round_trips_rectangle_command_output(self):
        result = CliRunner().invoke(cli, ["rectangle", "2", "3"])
        assert result.exit_code == 0
        r = from_json(Rectangle, result.output)
        assert (r.width, r.height) == (2.0, 3.0)
        assert r.get_area() == 6.0
