import pytest

from algokit.stack_problems import is_valid_brackets, next_greater


@pytest.mark.parametrize("s", ["", "()", "[]{}()", "({[]})", "(([]){})"])
def test_valid_strings(s):
    assert is_valid_brackets(s) is True


@pytest.mark.parametrize("s", ["(", ")", "(]", "([)]", "{{}", "}{"])
def test_invalid_strings(s):
    assert is_valid_brackets(s) is False


def test_nesting_builds_valid_strings():
    s = ""
    for opener, closer in [("(", ")"), ("[", "]"), ("{", "}")] * 5:
        s = opener + s + closer
        assert is_valid_brackets(s)
        assert not is_valid_brackets(s[:-1])
        assert not is_valid_brackets(s + closer)


def test_next_greater_example():
    assert next_greater([2, 1, 3]) == [3, 3, -1]


def test_next_greater_decreasing_has_none():
    nums = [9, 7, 5, 3, 1]
    assert next_greater(nums) == [-1] * len(nums)


def test_next_greater_increasing_shifts():
    nums = [1, 2, 3, 4, 5]
    assert next_greater(nums) == nums[1:] + [-1]


def test_next_greater_empty():
    assert next_greater([]) == []


def test_next_greater_properties():
    nums = [4, 8, 1, 1, 6, 2, 9, 3, 3, 7]
    result = next_greater(nums)
    assert len(result) == len(nums)
    for i, found in enumerate(result):
        if found == -1:
            assert all(x <= nums[i] for x in nums[i + 1:])
        else:
            assert found > nums[i]
            assert found in nums[i + 1:]