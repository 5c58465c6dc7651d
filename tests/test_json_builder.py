import pytest

from transit_catalogue.json_builder import Builder
from transit_catalogue.jsondoc import Document, dumps, loads


def test_simple_dict():
    result = Builder().start_dict().key("a").value(1).key("b").value("x").end_dict().build()
    assert result == {"a": 1, "b": "x"}


def test_nested_structure():
    result = (
        Builder()
        .start_dict()
        .key("key1").value(123)
        .key("key2").value("value2")
        .key("key3").start_array()
        .value(456)
        .start_dict().end_dict()
        .start_dict().key("").value(None).end_dict()
        .value("")
        .end_array()
        .end_dict()
        .build()
    )
    assert result == {"key1": 123, "key2": "value2", "key3": [456, {}, {"": None}, ""]}


def test_scalar_root():
    assert Builder().value("text").build() == "text"


def test_array_root():
    assert Builder().start_array().value(1).value(2.5).value(True).end_array().build() == [1, 2.5, True]


def test_nested_arrays():
    result = Builder().start_array().start_array().value(1).end_array().end_array().build()
    assert result == [[1]]


def test_duplicate_key_keeps_first_value():
    result = Builder().start_dict().key("k").value(1).key("k").value(2).end_dict().build()
    assert result == {"k": 1}


def test_key_context_start_dict_inside_dict():
    result = Builder().start_dict().key("inner").start_dict().key("x").value(False).end_dict().end_dict().build()
    assert result == {"inner": {"x": False}}


def test_build_empty_raises():
    with pytest.raises(RuntimeError):
        Builder().build()


def test_build_null_root_counts_as_empty():
    with pytest.raises(RuntimeError):
        Builder().value(None).build()


def test_build_unfinished_raises():
    builder = Builder()
    builder.start_dict()
    with pytest.raises(RuntimeError):
        builder.build()


def test_second_root_raises():
    builder = Builder().value(1)
    with pytest.raises(RuntimeError):
        builder.value(2)


def test_key_without_container_raises():
    with pytest.raises(RuntimeError):
        Builder().key("a")


def test_key_inside_array_raises():
    builder = Builder()
    builder.start_array()
    with pytest.raises(RuntimeError):
        builder.key("a")


def test_value_directly_in_dict_raises():
    builder = Builder()
    builder.start_dict()
    with pytest.raises(RuntimeError):
        builder.value(1)


def test_end_dict_on_empty_raises():
    with pytest.raises(RuntimeError):
        Builder().end_dict()


def test_end_array_on_empty_raises():
    with pytest.raises(RuntimeError):
        Builder().end_array()


def test_end_array_when_dict_open_raises():
    builder = Builder()
    builder.start_dict()
    with pytest.raises(RuntimeError):
        builder.end_array()


def test_end_dict_when_array_open_raises():
    builder = Builder()
    builder.start_array()
    with pytest.raises(RuntimeError):
        builder.end_dict()


def test_dict_context_has_no_value():
    with pytest.raises(AttributeError):
        Builder().start_dict().value(1)


def test_key_context_has_no_end_dict():
    with pytest.raises(AttributeError):
        Builder().start_dict().key("a").end_dict()


def test_array_context_has_no_key():
    with pytest.raises(AttributeError):
        Builder().start_array().key("a")


def test_round_trip_through_json_text():
    built = (
        Builder()
        .start_dict()
        .key("request_id").value(7)
        .key("items").start_array().value("a").value(1.5).end_array()
        .end_dict()
        .build()
    )
    assert loads(dumps(Document(built))) == Document(built)