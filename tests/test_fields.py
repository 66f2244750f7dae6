from collections import OrderedDict, defaultdict, namedtuple
from dataclasses import dataclass
from types import MappingProxyType

import pytest

from lenses import attr, compose, index, key


@dataclass(frozen=True)
class Weather:
    c_temperature: int
    wind: int


Point = namedtuple("Point", ["x", "y"])


class Plain:
    def __init__(self, value):
        self.value = value


class TestKey:

    def test_get(self):
        assert key("wind").get({"cTemperature": 1, "wind": 4}) == 4

    def test_set_returns_new_dict(self):
        weather = {"cTemperature": 1, "wind": 4}
        updated = key("wind").set(5, weather)

        assert updated == {"cTemperature": 1, "wind": 5}
        assert updated is not weather
        assert weather["wind"] == 4

    def test_missing_key(self):
        with pytest.raises(KeyError):
            key("rain").get({"wind": 4})

    def test_dict_subclass_keeps_type(self):
        weather = OrderedDict([("cTemperature", 1), ("wind", 4)])
        updated = key("wind").set(5, weather)

        assert type(updated) is OrderedDict
        assert list(updated.items()) == [("cTemperature", 1), ("wind", 5)]
        assert weather["wind"] == 4

    def test_defaultdict_keeps_factory(self):
        counts = defaultdict(int, {"a": 1})
        updated = key("b").set(2, counts)

        assert type(updated) is defaultdict
        assert updated["missing"] == 0
        assert "b" not in counts

    def test_other_mapping_becomes_dict(self):
        frozen = MappingProxyType({"wind": 4})

        assert key("wind").set(5, frozen) == {"wind": 5}
        assert type(key("wind").set(5, frozen)) is dict

    def test_nested_keys(self):
        whole = {"name": {"firstName": "Francis", "lastName": "Underwood"}}
        first = compose(key("name"), key("firstName"))

        assert first.set("Frank", whole) == {"name": {"firstName": "Frank", "lastName": "Underwood"}}
        assert whole["name"]["firstName"] == "Francis"


class TestAttr:

    def test_dataclass(self):
        weather = Weather(17, 0)

        assert attr("c_temperature").get(weather) == 17
        assert attr("c_temperature").set(18, weather) == Weather(18, 0)
        assert weather.c_temperature == 17

    def test_namedtuple(self):
        p = Point(1, 2)

        assert attr("y").set(5, p) == Point(1, 5)
        assert p == Point(1, 2)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            attr("value").set(2, Plain(1))

    def test_get_on_plain_object(self):
        assert attr("value").get(Plain(3)) == 3


class TestIndex:

    def test_get_and_set(self):
        assert index(1).get(("a", "b", "c")) == "b"
        assert index(1).set("B", ("a", "b", "c")) == ("a", "B", "c")

    def test_negative_index(self):
        assert index(-1).set("C", ("a", "b", "c")) == ("a", "b", "C")

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            index(3).set("d", ("a", "b", "c"))
