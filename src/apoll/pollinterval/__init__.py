r"""Poll interval strategies for repeated condition evaluation.

This package provides the strategies that compute the delay before each
poll, including iterative, fixed, and Fibonacci poll intervals.
"""

from __future__ import annotations

__all__ = [
    "BasePollInterval",
    "FibonacciPollInterval",
    "FixedPollInterval",
    "IterativeFunction",
    "IterativePollInterval",
    "fibonacci",
    "fixed",
    "iterative",
]

from apoll.pollinterval.base import BasePollInterval
from apoll.pollinterval.fibonacci import FibonacciPollInterval, fibonacci
from apoll.pollinterval.fixed import FixedPollInterval, fixed
from apoll.pollinterval.iterative import IterativeFunction, IterativePollInterval, iterative
