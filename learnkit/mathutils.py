"""Small integer and floating-point helpers."""

from __future__ import annotations

from collections.abc import Sequence

_ONES = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)
_TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "", "twenty", "thirty", "forty",
    "fifty", "sixty", "seventy", "eighty", "ninety",
)


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def multiply(a: int, b: int) -> int:
    """Return the product of two integers."""
    return a * b


def divide(a: float, b: float) -> float:
    """Divide ``a`` by ``b``; a zero divisor raises ValueError."""
    if b == 0.0:
        raise ValueError("Division by zero")
    return a / b


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("Factorial of negative number")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def find_max(numbers: Sequence[int]) -> int:
    """Return the largest value of a non-empty sequence."""
    if not numbers:
        raise ValueError("Cannot find max of empty vector")
    return max(numbers)


def average(numbers: Sequence[int]) -> float:
    """Return the arithmetic mean of a non-empty sequence."""
    if not numbers:
        raise ValueError("Cannot calculate average of empty vector")
    return sum(numbers) / len(numbers)


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError("Negative exponent not supported")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def number_to_words(n: int) -> str:
    """Spell out an integer between 0 and 99 in English words."""
    if n < 0 or n > 99:
        raise ValueError("Only numbers 0-99 supported")
    if n < 10:
        return _ONES[n]
    if n < 20:
        return _TEENS[n - 10]
    tens, ones = divmod(n, 10)
    words = _TENS[tens]
    if ones:
        words += " " + _ONES[ones]
    return words