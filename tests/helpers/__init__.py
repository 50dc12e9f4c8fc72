"""Test helpers module for shared test utilities.

- constants: Fixed-point amounts at 6 and 18 decimals
"""

from tests.helpers.constants import (
    ONE_6,
    ONE_18,
    ONE_SIXTH_6,
    ONE_SIXTH_18,
    ONE_THIRD_6,
    ONE_THIRD_18,
    THREE_6,
    THREE_18,
)

__all__ = [
    "ONE_6",
    "ONE_18",
    "ONE_SIXTH_6",
    "ONE_SIXTH_18",
    "ONE_THIRD_6",
    "ONE_THIRD_18",
    "THREE_6",
    "THREE_18",
]
