"""
Input validation utilities.

This module provides validation functions for the arguments of the trading
wrappers. Validation is kept light: the exchange remains the authority on
limits, these checks only reject values that cannot form a valid request.
"""


def validate_positive_number(value: int | float, name: str) -> None:
    """Validate that a number is positive."""
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_empty_string(value: str, name: str) -> None:
    """Validate that a string is not empty."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} cannot be empty")


def validate_flag(value: int | bool, name: str) -> int:
    """Validate a 0/1 flag and return it as int."""
    flag = int(value)
    if flag not in (0, 1):
        raise ValueError(f"{name} must be 0 or 1, got {value}")
    return flag
