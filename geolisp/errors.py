"""Exception hierarchy raised while tokenizing and evaluating scripts."""


class GeoLispError(Exception):
    pass


class StructureError(GeoLispError):
    """Unbalanced or malformed token sections."""


class SignatureError(GeoLispError):
    """Arguments do not fit the shape an overload case expects."""


class ArityError(SignatureError):
    pass


class ArgumentTypeError(SignatureError):
    pass


class GeometryError(GeoLispError):
    """Arguments fit the case but describe an impossible construction."""


class ConstraintError(GeometryError):
    """Rejection sampling ran out of attempts."""

    def __init__(self, what: str, attempts: int):
        super().__init__(f'Could not satisfy {what} after {attempts} attempts')
        self.what = what
        self.attempts = attempts


class UnboundVariableError(GeoLispError):
    def __init__(self, name: str):
        super().__init__(f'Unbound variable: {name}')
        self.name = name


class InvalidVariableNameError(GeoLispError):
    def __init__(self, name: object):
        super().__init__(f'Invalid variable name: {name}')
        self.name = name


class ArithmeticDomainError(GeoLispError):
    pass
