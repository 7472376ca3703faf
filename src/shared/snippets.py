"""Runnable versions of the small functions used as examples in the articles.

The type hints and docstrings tutorials both use these, so keep the
signatures and docstrings in sync with ``docs/01-type-hints.md`` and
``docs/02-docstrings.md``.
"""
from typing import Any, Dict, Optional, Sequence


def add(a: int, b: int) -> int:
    """Add two integers.

    Args:
        a: First integer
        b: Second integer

    Returns:
        The sum of ``a`` and ``b``
    """
    return a + b


def add_numbers(a: float, b: float) -> float:
    """Add two numbers and return the result."""
    return a + b


def divide(a: float, b: float) -> float:
    """Divide one number by another.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        The quotient ``a / b``

    Raises:
        ValueError: If ``b`` is zero
    """
    if b == 0:
        raise ValueError("Cannot divide by zero")
    return a / b


def greet(name: str, greeting: str = "Hello") -> str:
    """Return a greeting such as ``"Hello, Ada!"``."""
    return f"{greeting}, {name}!"


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence.

    Raises:
        ValueError: If ``values`` is empty
    """
    if len(values) == 0:
        raise ValueError("mean() requires at least one value")
    return sum(values) / len(values)


def describe_user(name: str, age: Optional[int] = None) -> Dict[str, Any]:
    """Build a small user record; ``age`` is left out when unknown."""
    user: Dict[str, Any] = {"name": name}
    if age is not None:
        user["age"] = age
    return user
