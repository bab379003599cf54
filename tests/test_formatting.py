from utils import format_help, format_result, format_stack


def test_format_result_is_plain_decimal():
    assert format_result(7.0) == "7"
    assert format_result(-2.5) == "-2.5"
    assert format_result(1e20) == "100000000000000000000"


def test_format_result_with_precision():
    assert format_result(92.70509831248424, 2) == "92.71"
    assert format_result(7.0, 3) == "7"


def test_format_stack():
    assert format_stack([1.0, 2.5]) == "[1.00, 2.50]"
    assert format_stack([]) == "[]"
    assert format_stack([3.0], 0) == "[3]"


def test_help_lists_constants_and_operators():
    text = format_help()

    assert "pi, π -- Pushes pi onto the stack" in text
    assert "+, add -- " in text
    assert "dup, copy, clone, duplicate -- Duplicates the topmost number" in text
