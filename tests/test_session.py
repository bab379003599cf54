import pytest

from core import DomainError, MalformedExpression, StackSession, UnknownToken


def test_stack_persists_between_lines():
    session = StackSession()
    session.feed("1 2")
    session.feed("+")

    assert session.stack == [3.0]
    assert session.top == 3.0
    assert session.result() == 3.0


def test_failing_line_leaves_stack_untouched():
    session = StackSession()
    session.feed("8 0")

    with pytest.raises(DomainError):
        session.feed("+ 0 /")

    assert session.stack == [8.0, 0.0]


def test_unknown_token_leaves_stack_untouched():
    session = StackSession()
    session.feed("1 2")

    with pytest.raises(UnknownToken):
        session.feed("+ foo")

    assert session.stack == [1.0, 2.0]


def test_stack_property_is_a_copy():
    session = StackSession()
    session.feed("1")
    session.stack.append(99.0)

    assert len(session) == 1


def test_result_requires_single_value():
    session = StackSession()
    session.feed("1 2")

    with pytest.raises(MalformedExpression):
        session.result()


def test_reset():
    session = StackSession()
    session.feed("1 2 3")
    session.reset()

    assert len(session) == 0
    assert session.top is None
