from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

from .printer import format_value, is_printable_value

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8
_repr.maxstring = 80


def summarize(value: Any, *, max_items: int = 6) -> str:
    """Short, log-friendly rendering of arguments and results."""

    if is_printable_value(value):
        return format_value(value)
    if isinstance(value, (list, tuple)):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = [summarize(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... +{len(value) - max_items}")
        return open_br + ", ".join(items) + close_br
    if isinstance(value, dict):
        items = [f"{key}={summarize(val)}" for key, val in list(value.items())[:max_items]]
        if len(value) > max_items:
            items.append("...")
        return "{" + ", ".join(items) + "}"
    return _repr.repr(value)


def _format_call(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [summarize(arg) for arg in args]
    parts.extend(f"{key}={summarize(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Decorator emitting DEBUG records on entry, exit and failure."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            enabled = logger.isEnabledFor(logging.DEBUG)
            if enabled:
                logger.debug("-> %s(%s)", qualname, _format_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                if enabled:
                    logger.debug("!! %s raised %s: %s", qualname, type(exc).__name__, exc)
                raise
            if enabled:
                if log_result:
                    logger.debug("<- %s = %s", qualname, summarize(result))
                else:
                    logger.debug("<- %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _wrap_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        if attr_name.startswith("__") and attr_name.endswith("__"):
            continue
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name in skip or qualified in skip:
            continue
        if inspect.isfunction(attr_value) and attr_value.__module__ == cls.__module__:
            setattr(cls, attr_name, debug_log_call(logger, name=qualified)(attr_value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
    wrap_methods: bool = True,
) -> None:
    """Wrap the functions (and methods) defined in a module with DEBUG logging.

    Call at the bottom of a module as ``apply_debug_logging(globals())``.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or ())

    for name, value in list(namespace.items()):
        if name in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif wrap_methods and inspect.isclass(value) and value.__module__ == module_name:
            _wrap_class(value, logger, skip_set)
