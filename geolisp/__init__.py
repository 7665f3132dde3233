from .errors import (
    GeoLispError,
    StructureError,
    SignatureError,
    ArityError,
    ArgumentTypeError,
    GeometryError,
    ConstraintError,
    UnboundVariableError,
    InvalidVariableNameError,
    ArithmeticDomainError,
)
from .config import EvaluateOptions, get_default_options, set_default_options
from .geometry import RandomSource, distance
from .values import (
    INDETERMINATE,
    UNDEFINED,
    Point,
    Lineseg,
    Circle,
    Triangle,
    Angle,
    Label,
    kind_name,
)
from .lexer import tokenize, LeftParen, RightParen, Literal, Variable, FunctionCall
from .functions import OPERATIONS, Operation, lookup_operation, describe_operations, is_valid_variable
from .interpreter import Environment, get_section, reduce_section, evaluate, collect_point_labels, run_script
from .printer import format_value, print_values
from .reference import BNF, get_reference
from .svg_codegen import generate_svg_code, generate_svg_document

__all__ = [
    'GeoLispError',
    'StructureError',
    'SignatureError',
    'ArityError',
    'ArgumentTypeError',
    'GeometryError',
    'ConstraintError',
    'UnboundVariableError',
    'InvalidVariableNameError',
    'ArithmeticDomainError',
    'EvaluateOptions',
    'get_default_options',
    'set_default_options',
    'RandomSource',
    'distance',
    'INDETERMINATE',
    'UNDEFINED',
    'Point',
    'Lineseg',
    'Circle',
    'Triangle',
    'Angle',
    'Label',
    'kind_name',
    'tokenize',
    'LeftParen',
    'RightParen',
    'Literal',
    'Variable',
    'FunctionCall',
    'OPERATIONS',
    'Operation',
    'lookup_operation',
    'describe_operations',
    'is_valid_variable',
    'Environment',
    'get_section',
    'reduce_section',
    'evaluate',
    'collect_point_labels',
    'run_script',
    'format_value',
    'print_values',
    'BNF',
    'get_reference',
    'generate_svg_code',
    'generate_svg_document',
]
