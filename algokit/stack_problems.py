"""Problems solved with a stack: bracket matching and next greater element."""

from __future__ import annotations

from collections.abc import Sequence

_OPENERS = "({["
_PAIRS = {")": "(", "}": "{", "]": "["}


def is_valid_brackets(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket closes the most recent one.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        top = stack.pop()
        if char in _PAIRS and _PAIRS[char] != top:
            return False
    return not stack


def next_greater(nums: Sequence[int]) -> list[int]:
    """For each element, return the next larger element to its right, or -1."""
    result = [-1] * len(nums)
    pending: list[int] = []
    for i, value in enumerate(nums):
        while pending and nums[pending[-1]] < value:
            result[pending.pop()] = value
        pending.append(i)
    return result