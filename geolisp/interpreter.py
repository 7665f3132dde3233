"""Evaluator: balanced-section extraction, recursive reduction and the top-level walk."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .config import EvaluateOptions, get_default_options
from .errors import StructureError, UnboundVariableError
from .functions import ASSIGNMENT
from .geometry import RandomSource
from .lexer import FunctionCall, LeftParen, Literal, RightParen, Token, Variable, tokenize
from .logging_utils import apply_debug_logging
from .values import UNDEFINED, Label, Point, Value

logger = logging.getLogger(__name__)


class Environment:
    """Variable bindings of one evaluation run, in first-assignment order."""

    def __init__(self, bindings: Optional[Dict[str, Value]] = None):
        self._bindings: Dict[str, Value] = dict(bindings or {})

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __getitem__(self, name: str) -> Value:
        return self._bindings[name]

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def bind(self, name: str, value: Value) -> None:
        logger.debug('Binding %s', name)
        self._bindings[name] = value

    def items(self) -> List[Tuple[str, Value]]:
        return list(self._bindings.items())

    def __repr__(self) -> str:
        return f'Environment({sorted(self._bindings)})'


def get_section(tokens: Sequence[Token], start: int = 0) -> List[Token]:
    """Return the balanced section that opens at ``tokens[start]``."""

    if start >= len(tokens):
        raise StructureError('Empty tokens')
    if not isinstance(tokens[start], LeftParen):
        raise StructureError('Expected left parenthesis')

    depth = 0
    for i in range(start, len(tokens)):
        tok = tokens[i]
        if isinstance(tok, LeftParen):
            depth += 1
        elif isinstance(tok, RightParen):
            depth -= 1
        if depth == 0:
            return list(tokens[start:i + 1])
    raise StructureError('Mismatched parentheses')


def _resolve_argument(
    tok: Variable, env: Environment, keep_name: bool
) -> Union[Literal, Variable]:
    if not keep_name and tok.name in env:
        return Literal(env[tok.name])
    # unbound (or an assignment target): the name travels as a string
    return tok


def reduce_section(section: Sequence[Token], env: Environment, source: RandomSource) -> Value:
    """Reduce one balanced section to a single value."""

    if not section:
        raise StructureError('Empty tokens')
    if len(section) == 1:
        tok = section[0]
        if isinstance(tok, Literal):
            return tok.value
        raise StructureError('Single token must be a literal')
    if not isinstance(section[0], LeftParen):
        raise StructureError('Expected left parenthesis')
    if not isinstance(section[-1], RightParen):
        raise StructureError('Mismatched parentheses')

    head = section[1]
    if not isinstance(head, FunctionCall):
        raise StructureError('Expected function')
    call = head.fresh()
    is_assignment = call.name == ASSIGNMENT

    i = 2
    end = len(section) - 1
    while i < end:
        tok = section[i]
        if isinstance(tok, LeftParen):
            inner = get_section(section, i)
            call.args.append(Literal(reduce_section(inner, env, source)))
            i += len(inner)
            continue
        if isinstance(tok, Literal):
            call.args.append(tok)
        elif isinstance(tok, Variable):
            call.args.append(_resolve_argument(tok, env, is_assignment and not call.args))
        else:
            raise StructureError(f'Unexpected token: {tok!r}')
        i += 1

    args: List[Value] = [
        arg.value if isinstance(arg, Literal) else arg.name for arg in call.args
    ]
    result = call.operation.call(args, source)

    if is_assignment:
        # the target name was validated by the assignment operation
        env.bind(args[0], result)
        return UNDEFINED
    return result


def collect_point_labels(env: Environment) -> List[Label]:
    """Labels for every point-valued binding, in environment order."""

    return [Label(name, value) for name, value in env.items() if isinstance(value, Point)]


def evaluate(
    tokens: Sequence[Token],
    *,
    env: Optional[Environment] = None,
    options: Optional[EvaluateOptions] = None,
    source: Optional[RandomSource] = None,
) -> List[Value]:
    """Evaluate a token list to the ordered output list.

    Top-level expressions and literals come first, in source order, followed
    by one :class:`Label` per point-valued variable. The first error aborts
    the whole run.
    """

    if options is None:
        options = get_default_options()
    if source is None:
        source = RandomSource.from_seed(options.random_seed, max_attempts=options.max_attempts)
    if env is None:
        env = Environment()

    values: List[Value] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if isinstance(tok, LeftParen):
            section = get_section(tokens, i)
            values.append(reduce_section(section, env, source))
            i += len(section)
            continue
        if isinstance(tok, Literal):
            values.append(tok.value)
        elif isinstance(tok, Variable):
            if tok.name not in env:
                raise UnboundVariableError(tok.name)
            values.append(env[tok.name])
        else:
            raise StructureError(f'Unexpected token when evaluating: {tok!r}')
        i += 1

    labels = collect_point_labels(env)
    logger.debug('Evaluated %d value(s) and %d label(s)', len(values), len(labels))
    values.extend(labels)
    return values


def run_script(text: str, options: Optional[EvaluateOptions] = None) -> List[Value]:
    """Tokenize and evaluate ``text``."""

    return evaluate(tokenize(text), options=options)


apply_debug_logging(globals(), logger=logger)
