import logging
import re
from dataclasses import dataclass, field, replace
from typing import List, Union

from .functions import Operation, lookup_operation
from .values import INDETERMINATE, INT_MAX, INT_MIN, Value

logger = logging.getLogger(__name__)

COMMENT = ';'

_int_re = re.compile(r'[+-]?\d+')
_float_re = re.compile(r'[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?')


@dataclass(frozen=True)
class LeftParen:
    def __repr__(self) -> str:
        return 'LeftParen'


@dataclass(frozen=True)
class RightParen:
    def __repr__(self) -> str:
        return 'RightParen'


@dataclass(frozen=True)
class Literal:
    value: Value


@dataclass(frozen=True)
class Variable:
    name: str
    value: Value = INDETERMINATE


@dataclass
class FunctionCall:
    """Head of a call: the operation plus the arguments gathered so far."""

    name: str
    operation: Operation = field(compare=False, repr=False)
    args: List[Union[Literal, Variable]] = field(default_factory=list, compare=False)

    def fresh(self) -> 'FunctionCall':
        return replace(self, args=[])


Token = Union[LeftParen, RightParen, Literal, Variable, FunctionCall]


def _split_words(text: str) -> List[List[str]]:
    padded = text.replace('(', ' ( ').replace(')', ' ) ').replace(COMMENT, f' {COMMENT} ')
    return [line.split() for line in padded.splitlines()]


def parse_literal(word: str):
    """Return the numeric value of ``word`` or ``None`` if it is not a number."""

    if _int_re.fullmatch(word):
        value = int(word)
        if INT_MIN <= value <= INT_MAX:
            return value
        return None
    if _float_re.fullmatch(word):
        return float(word)
    return None


def match_token(word: str, prev_paren: bool) -> Token:
    if prev_paren:
        return FunctionCall(word, lookup_operation(word))
    if word == '(':
        return LeftParen()
    if word == ')':
        return RightParen()
    value = parse_literal(word)
    if value is not None:
        return Literal(value)
    return Variable(word)


def tokenize(text: str) -> List[Token]:
    """Convert script text into a flat list of tokens.

    A ``;`` starts a comment running to the end of the line or to the next
    parenthesis, whichever comes first. The word right after ``(`` is always
    a function name; unknown names resolve to the no-op operation.
    """

    lines = _split_words(text)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('Split words: %s', [w for line in lines for w in line])

    tokens: List[Token] = []
    prev_paren = False
    for words in lines:
        in_comment = False
        for word in words:
            if word == COMMENT:
                in_comment = True
                continue
            if in_comment:
                if word not in ('(', ')'):
                    continue
                in_comment = False
            token = match_token(word, prev_paren)
            prev_paren = isinstance(token, LeftParen)
            tokens.append(token)
    return tokens
