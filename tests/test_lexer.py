import pytest

from geolisp.functions import NOP, OPERATIONS
from geolisp.lexer import FunctionCall, LeftParen, Literal, RightParen, Variable, parse_literal, tokenize
from geolisp.values import INDETERMINATE


def test_tokenize_simple_call():
    tokens = tokenize("(+ 1 2)")

    assert tokens == [
        LeftParen(),
        FunctionCall('+', OPERATIONS['+']),
        Literal(1),
        Literal(2),
        RightParen(),
    ]
    assert tokens[1].operation is OPERATIONS['+']
    assert type(tokens[2].value) is int


def test_tokenize_without_spaces_around_parens():
    tokens = tokenize("(*(+ 1 2)3)")

    assert [type(tok) for tok in tokens] == [
        LeftParen, FunctionCall, LeftParen, FunctionCall, Literal, Literal, RightParen, Literal, RightParen,
    ]


def test_float_words_become_float_literals():
    tokens = tokenize("(+ 1.5 .5)")

    assert tokens[2] == Literal(1.5)
    assert type(tokens[2].value) is float
    assert tokens[3].value == 0.5


def test_unknown_function_resolves_to_nop():
    tokens = tokenize("(frobnicate 1)")

    assert tokens[1].name == 'frobnicate'
    assert tokens[1].operation is NOP


def test_other_words_become_unresolved_variables():
    tokens = tokenize("(setq p (point 0 0))")

    assert tokens[2] == Variable('p')
    assert tokens[2].value is INDETERMINATE
    assert tokens[4].name == 'point'


def test_word_after_paren_on_next_line_is_function():
    tokens = tokenize("(\npoint 1 2)")

    assert isinstance(tokens[1], FunctionCall)
    assert tokens[1].name == 'point'


def test_comment_runs_to_end_of_line():
    tokens = tokenize("; a heading comment\n(+ 1 2) ; trailing words\n3")

    assert tokens == [
        LeftParen(),
        FunctionCall('+', OPERATIONS['+']),
        Literal(1),
        Literal(2),
        RightParen(),
        Literal(3),
    ]


def test_comment_is_closed_by_a_parenthesis():
    tokens = tokenize("(+ 1 2) ; skipped words (point 0 0)")

    names = [tok.name for tok in tokens if isinstance(tok, FunctionCall)]
    assert names == ['+', 'point']
    assert Variable('skipped') not in tokens
    assert Variable('words') not in tokens


def test_comment_only_source_is_empty():
    assert tokenize("; nothing here\n;; or here") == []


@pytest.mark.parametrize(
    'word, expected',
    [
        ('42', 42),
        ('-7', -7),
        ('+3', 3),
        ('2.5', 2.5),
        ('-.5', -0.5),
        ('1e3', 1000.0),
        ('abc', None),
        ('-', None),
        ('1_000', None),
        ('99999999999999999999', None),
    ],
)
def test_parse_literal(word, expected):
    value = parse_literal(word)

    assert value == expected
    if expected is not None:
        assert type(value) is type(expected)


def test_function_call_fresh_copy_has_its_own_arguments():
    head = tokenize("(+ 1 2)")[1]
    first = head.fresh()
    second = head.fresh()
    first.args.append(Literal(1))

    assert second.args == []
    assert head.args == []
    assert first.operation is second.operation
