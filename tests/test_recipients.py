import math

from nodes.messagebird import parse_recipients


def test_parse_recipients_splits_on_commas():
    assert parse_recipients("123,456,789") == [123, 456, 789]


def test_parse_recipients_skips_leading_whitespace():
    assert parse_recipients("123, 456") == [123, 456]
    assert parse_recipients(" 31612345678 ") == [31612345678]


def test_parse_recipients_ignores_trailing_noise():
    assert parse_recipients("12ab,34 5") == [12, 34]


def test_parse_recipients_keeps_sign():
    assert parse_recipients("-5,+7") == [-5, 7]


def test_parse_recipients_non_numeric_token_is_nan():
    out = parse_recipients("123,abc,")
    assert out[0] == 123
    assert math.isnan(out[1])
    assert math.isnan(out[2])


def test_parse_recipients_empty_string_is_single_nan():
    out = parse_recipients("")
    assert len(out) == 1 and math.isnan(out[0])


def test_parse_recipients_large_numbers_are_exact():
    assert parse_recipients("14155238886") == [14155238886]
