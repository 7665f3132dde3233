"""Evaluation options and the process-wide default."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional

DEFAULT_MAX_ATTEMPTS = 10000


@dataclass
class EvaluateOptions:
    """Options for a single script evaluation."""

    random_seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f'max_attempts must be positive, got {self.max_attempts}')


_DEFAULT_OPTIONS = EvaluateOptions()


def get_default_options() -> EvaluateOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: EvaluateOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)
