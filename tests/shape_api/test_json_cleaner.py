import pytest

from shape_api.services.json_cleaner import extract_json_object


def test_strip_fences():
    raw = '```json\n{"actionType": "text", "text": "Hello"}\n```'
    assert extract_json_object(raw) == {"actionType": "text", "text": "Hello"}


def test_leading_trailing_noise():
    raw = 'Here you go:\n{ "needsDimensions": true, "shapeType": "circle" }\nThanks!'
    assert extract_json_object(raw) == {"needsDimensions": True, "shapeType": "circle"}


def test_nested_object_kept_whole():
    raw = '{"shapeType": "square", "width": 80, "color": {"r": 0, "g": 0, "b": 255}}'
    assert extract_json_object(raw)["color"] == {"r": 0, "g": 0, "b": 255}


def test_no_object_raises():
    with pytest.raises(ValueError):
        extract_json_object("no braces here")


def test_empty_output_raises():
    with pytest.raises(ValueError):
        extract_json_object("")


def test_python_literal_is_not_accepted():
    with pytest.raises(ValueError):
        extract_json_object("{'shapeType': 'square'}")


def test_two_objects_span_is_rejected():
    # the first "{" to the last "}" is not one valid object
    with pytest.raises(ValueError):
        extract_json_object('{"a": 1} and then {"b": 2}')
