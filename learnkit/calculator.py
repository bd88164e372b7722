"""A stateful calculator with memory, angle mode and a bounded history."""

from __future__ import annotations

import math
from collections import deque

HISTORY_LIMIT = 100


class Calculator:
    """Calculator that records every result in a bounded history."""

    def __init__(self) -> None:
        self.memory: float = 0.0
        self.degrees_mode: bool = True
        self._history: deque[float] = deque(maxlen=HISTORY_LIMIT)

    def _record(self, value: float) -> float:
        self.add_to_history(value)
        return value

    def add(self, a: float, b: float) -> float:
        return self._record(a + b)

    def subtract(self, a: float, b: float) -> float:
        return self._record(a - b)

    def multiply(self, a: float, b: float) -> float:
        return self._record(a * b)

    def divide(self, a: float, b: float) -> float:
        if b == 0.0:
            raise ValueError("Division by zero")
        return self._record(a / b)

    def power(self, base: float, exponent: float) -> float:
        if base == 0.0 and exponent < 0.0:
            raise ValueError("Cannot raise zero to negative power")
        try:
            result = math.pow(base, exponent)
        except ValueError:
            result = math.nan
        except OverflowError:
            odd = exponent.is_integer() and int(exponent) % 2 == 1 if isinstance(
                exponent, float
            ) else int(exponent) % 2 == 1
            result = math.copysign(math.inf, base) if odd else math.inf
        return self._record(result)

    def sqrt(self, value: float) -> float:
        if value < 0.0:
            raise ValueError("Cannot take square root of negative number")
        return self._record(math.sqrt(value))

    def _to_radians(self, angle: float) -> float:
        return angle * math.pi / 180.0 if self.degrees_mode else angle

    def sin(self, angle: float) -> float:
        return self._record(math.sin(self._to_radians(angle)))

    def cos(self, angle: float) -> float:
        return self._record(math.cos(self._to_radians(angle)))

    def clear_memory(self) -> None:
        self.memory = 0.0

    def add_to_history(self, value: float) -> None:
        """Append a value, dropping the oldest once the limit is exceeded."""
        self._history.append(value)

    @property
    def history(self) -> list[float]:
        """A copy of the recorded results, oldest first."""
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()

    @property
    def last_result(self) -> float:
        """The most recent result; raises RuntimeError if there is none."""
        if not self._history:
            raise RuntimeError("No calculations performed yet")
        return self._history[-1]

    def evaluate_expression(self, expression: str) -> float:
        """Evaluate one of the few supported fixed expressions."""
        if not expression:
            raise ValueError("Empty expression")
        operations = {
            "2+3": lambda: self.add(2, 3),
            "10-4": lambda: self.subtract(10, 4),
            "6*7": lambda: self.multiply(6, 7),
            "15/3": lambda: self.divide(15, 3),
        }
        try:
            operation = operations[expression]
        except KeyError:
            raise ValueError("Unsupported expression format") from None
        return operation()

    def reset(self) -> None:
        self.memory = 0.0
        self.degrees_mode = True
        self._history.clear()