import pytest

import json_validator as jv


def test_empty_document_rejected_at_zero():
    out = jv.validate("")
    assert not out
    assert out.position == 0
    assert out.message == "document can not be empty"
    assert isinstance(out.error, jv.EmptyDocumentError)


def test_whitespace_only_rejected():
    out = jv.validate("   ")
    assert not out
    assert isinstance(out.error, jv.IncompleteValueError)
    assert out.position == 3


@pytest.mark.parametrize("text", ["{}", "[]", " { } ", "\t[\n]\r\n", '{"a":[1,{"b":{}}]}', "[[], [[]]]"])
def test_containers_accepted(text):
    assert jv.validate(text) == jv.ACCEPTED


def test_object_trailing_comma_rejected():
    out = jv.validate('{"a":1,}')
    assert isinstance(out.error, jv.StructuralError)
    assert out.position == 7


def test_array_trailing_comma_rejected():
    out = jv.validate("[1,]")
    assert isinstance(out.error, jv.StructuralError)
    assert out.position == 3


def test_missing_colon_reports_position():
    out = jv.validate('{"a" 1}')
    assert isinstance(out.error, jv.StructuralError)
    assert out.position == 5
    assert 'expected ":"' in out.message


def test_non_string_key_rejected():
    out = jv.validate("{a:1}")
    assert isinstance(out.error, jv.StructuralError)
    assert out.position == 1


def test_missing_comma_in_object():
    out = jv.validate('{"a":1 "b":2}')
    assert isinstance(out.error, jv.StructuralError)
    assert out.position == 7


def test_unclosed_object_positioned_at_end():
    out = jv.validate('{"a":1')
    assert isinstance(out.error, jv.IncompleteValueError)
    assert out.position == 6


def test_unclosed_array():
    out = jv.validate("[1,2")
    assert isinstance(out.error, jv.IncompleteValueError)
    assert "array is not closed" in out.message


def test_missing_value_in_array():
    out = jv.validate("[1,")
    assert isinstance(out.error, jv.IncompleteValueError)
    assert out.position == 3


def test_unknown_character():
    out = jv.validate("[1, @]")
    assert isinstance(out.error, jv.InvalidCharacterError)
    assert out.position == 4


def test_trailing_content_rejected():
    out = jv.validate("[1] 2")
    assert isinstance(out.error, jv.TrailingContentError)
    assert out.position == 4
    assert "expected end of input" in out.message


def test_any_value_allowed_at_root():
    for text in ['"s"', "0", "-1.5", "true", "false", "null"]:
        assert jv.validate(text), text


def test_duplicate_keys_accepted():
    assert jv.validate('{"a":1,"a":2}')


def test_depth_limit_101_open_arrays():
    out = jv.validate("[" * 101)
    assert isinstance(out.error, jv.DepthExceededError)
    assert out.position == 100


def test_depth_limit_allows_100_levels():
    assert jv.validate("[" * 100 + "]" * 100)
    out = jv.validate("[" * 100)
    assert isinstance(out.error, jv.IncompleteValueError)


def test_depth_limit_counts_objects_and_arrays():
    text = '{"a":' * 3 + "[1]" + "}" * 3
    assert jv.validate(text, max_depth=4)
    out = jv.validate(text, max_depth=3)
    assert isinstance(out.error, jv.DepthExceededError)


def test_adversarial_nesting_does_not_overflow_stack():
    out = jv.validate("[" * 100000)
    assert isinstance(out.error, jv.DepthExceededError)


def test_repeated_validation_is_identical():
    text = '{"a": [1, 2, tru]}'
    first = jv.validate(text)
    second = jv.validate(text)
    assert first == second
    assert str(first) == str(second)


def test_report_format():
    out = jv.validate("01")
    assert str(out) == "Validation Error @ 1:2\nReason: leading zeros are not allowed"


def test_check_raises_located_syntax_error():
    with pytest.raises(SyntaxError) as ei:
        jv.check('{"a": tru}')
    assert isinstance(ei.value, jv.InvalidCharacterError)
    assert ei.value.position == 6
    assert str(ei.value).startswith("Validation Error @ 1:7\n")


def test_check_returns_none_when_valid():
    assert jv.check("[1, 2]") is None


def test_classify_is_closed():
    assert jv.classify("{") is jv.Production.OBJECT
    assert jv.classify("7") is jv.Production.NUMBER
    assert jv.classify("x") is jv.Production.UNKNOWN


def test_depth_ceiling_still_ends_in_depth_error():
    out = jv.validate("[" * 2000, max_depth=jv.DEPTH_LIMIT_MAX)
    assert isinstance(out.error, jv.DepthExceededError)
    assert out.position == jv.DEPTH_LIMIT_MAX


@pytest.mark.parametrize("max_depth", [0, jv.DEPTH_LIMIT_MAX + 1, 5000])
def test_max_depth_outside_bounds_raises_value_error(max_depth):
    with pytest.raises(ValueError) as ei:
        jv.validate("[" * 2000, max_depth=max_depth)
    assert "max_depth must be between 1 and" in str(ei.value)
