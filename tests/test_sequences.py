import pytest

from dsakit.sequences import (
    assign_tasks,
    is_valid_parentheses,
    longest_common_prefix,
    max_area,
    max_profit,
    max_sliding_window,
    max_sub_array,
)

SAMPLE = [1, 3, -1, -3, 5, 3, 6, 7]


def test_sliding_window_of_one_is_identity():
    assert max_sliding_window(SAMPLE, 1) == SAMPLE


def test_sliding_window_whole_sequence():
    assert max_sliding_window(SAMPLE, len(SAMPLE)) == [max(SAMPLE)]


def test_sliding_window_larger_than_input():
    assert max_sliding_window(SAMPLE, len(SAMPLE) + 1) == []


@pytest.mark.parametrize("k", [2, 3, 4])
def test_sliding_window_invariants(k):
    result = max_sliding_window(SAMPLE, k)
    assert len(result) == len(SAMPLE) - k + 1
    for start, value in enumerate(result):
        assert value in SAMPLE
        assert value >= SAMPLE[start]
        assert value >= SAMPLE[start + k - 1]


def test_sliding_window_rejects_zero():
    with pytest.raises(ValueError):
        max_sliding_window(SAMPLE, 0)


def test_assign_tasks_worked_example():
    assert assign_tasks([3, 3, 2], [1, 2, 3, 2, 1, 2]) == [2, 2, 0, 2, 1, 2]


def test_assign_tasks_single_server_takes_everything():
    tasks = [4, 1, 2, 7]
    assert assign_tasks([9], tasks) == [0] * len(tasks)


def test_assign_tasks_zero_durations_go_to_lightest():
    servers = [5, 2, 8, 2]
    tasks = [0, 0, 0]
    assert assign_tasks(servers, tasks) == [servers.index(min(servers))] * len(tasks)


def test_assign_tasks_indices_in_range():
    servers = [1, 4, 2]
    result = assign_tasks(servers, [3, 3, 3, 3, 3, 3, 3])
    assert all(0 <= index < len(servers) for index in result)
    assert set(result) == set(range(len(servers)))


def test_assign_tasks_without_servers():
    with pytest.raises(ValueError):
        assign_tasks([], [1])


def test_max_profit_worked_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0


def test_max_profit_rising_prices():
    prices = [2, 3, 8, 11]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_empty():
    assert max_profit([]) == 0


def test_max_area_worked_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


def test_max_area_symmetric_under_reversal():
    heights = [3, 9, 1, 4, 7, 2]
    assert max_area(heights) == max_area(heights[::-1])


def test_max_area_too_few_lines():
    assert max_area([]) == 0
    assert max_area([5]) == 0


def test_max_area_two_equal_lines():
    assert max_area([6, 6]) == 6


def test_common_prefix_shared_stem():
    stem = "inter"
    assert longest_common_prefix([stem + "view", stem + "act", stem + "sect"]) == stem


def test_common_prefix_single_string():
    assert longest_common_prefix(["alone"]) == "alone"


def test_common_prefix_none_shared():
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


def test_common_prefix_one_is_prefix_of_another():
    assert longest_common_prefix(["flow", "flowers"]) == "flow"


def test_common_prefix_empty_input():
    with pytest.raises(ValueError):
        longest_common_prefix([])


def test_max_sub_array_all_positive():
    nums = [2, 5, 1, 3]
    assert max_sub_array(nums) == sum(nums)


def test_max_sub_array_all_negative():
    nums = [-4, -2, -7]
    assert max_sub_array(nums) == max(nums)


def test_max_sub_array_at_least_any_element():
    nums = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
    assert max_sub_array(nums) >= max(nums)


def test_max_sub_array_empty():
    with pytest.raises(ValueError):
        max_sub_array([])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("{[()]}", True),
        ("", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("(a)", False),
    ],
)
def test_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected