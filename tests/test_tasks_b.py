import random

import pytest

from problemset.tasks_b import (
    alice_wins,
    best_x,
    can_fill_grid,
    can_make_majority,
    cube_removed,
    decode_symmetric,
    is_progressive_square,
    is_sum_of_large,
    kill_order,
    min_copy_operations,
    min_coins_nondecreasing,
    min_deletion_cost,
    min_hours,
    min_merge_operations,
    order_coins,
    process_queries,
    queue_after,
    rearrange,
    run,
    type_text,
)


def test_min_hours_worked_example():
    assert min_hours(8, 3) == 4


def test_min_hours_non_decreasing_in_computers():
    hours = [min_hours(computers, 3) for computers in range(1, 40)]
    assert hours == sorted(hours)


def test_process_queries_replace_all_then_point_update():
    result = process_queries([1, 2, 3, 4, 5], [(2, 10), (1, 1, 3), (2, 0)])
    assert result[0] == 10 * 5
    assert result[1] == result[0] - 10 + 3
    assert result[2] == 0


def test_process_queries_point_update_only():
    assert process_queries([1, 2, 3], [(1, 2, 7)]) == [sum([1, 7, 3])]


def test_process_queries_errors():
    with pytest.raises(ValueError):
        process_queries([1, 2], [(3, 1)])
    with pytest.raises(IndexError):
        process_queries([1, 2], [(1, 5, 1)])


def test_kill_order_is_permutation():
    health = [7, 3, 12, 5, 9, 1]
    assert sorted(kill_order(health, 4)) == list(range(1, len(health) + 1))


def test_kill_order_ties_keep_index_order():
    assert kill_order([2, 4, 6], 2) == [1, 2, 3]


def test_kill_order_rejects_zero_damage():
    with pytest.raises(ValueError):
        kill_order([1, 2], 0)


def test_type_text_example_and_plain_text():
    assert type_text("ARaBbbitBaby") == "ity"
    assert type_text("Hello") == "Hello"


def test_min_deletion_cost_bounds_and_errors():
    for s in ["0", "01", "011", "0011010", "111"]:
        assert 0 <= min_deletion_cost(s) <= len(s)
    assert min_deletion_cost("01") == 0
    with pytest.raises(ValueError):
        min_deletion_cost("012")


def test_is_progressive_square_detects_changes():
    values = [1, 4, 7, 3, 6, 9, 5, 8, 11]
    shuffled = values[:]
    random.Random(3).shuffle(shuffled)
    assert is_progressive_square(3, 2, 3, shuffled) is True
    assert is_progressive_square(3, 2, 3, values[:-1] + [10]) is False
    with pytest.raises(ValueError):
        is_progressive_square(3, 2, 3, values[:-1])


def test_can_fill_grid_cases():
    assert can_fill_grid(["WW", "WW"]) is True
    assert can_fill_grid(["WB", "WB"]) is False
    assert can_fill_grid(["WB", "BW"]) is True


def test_rearrange_produces_different_permutation():
    for s in ["codeforces", "ab", "aab", "xxxxy"]:
        result = rearrange(s)
        assert sorted(result) == sorted(s)
        assert result != s
    assert rearrange("aaa") is None


def test_alice_wins_parity_invariant():
    for coins in ["U", "UUD", "DDD", "UDUDU"]:
        assert alice_wins(coins) == alice_wins(coins + "UU")
    assert alice_wins("U") is not alice_wins("UU")


def test_decode_symmetric_is_involution_and_example():
    assert decode_symmetric("serofedsoc") == "codeforces"
    for text in ["abc", "zzz", "hello", "algorithm"]:
        assert decode_symmetric(decode_symmetric(text)) == text


def test_min_copy_operations_example_and_errors():
    assert min_copy_operations([2], [1, 3]) == 3
    assert min_copy_operations([5, 5], [5, 5, 5]) >= 1
    with pytest.raises(ValueError):
        min_copy_operations([1, 2], [1, 2])
    with pytest.raises(ValueError):
        min_copy_operations([], [1])


def test_cube_removed_all_removed():
    assert cube_removed(3, 2, 3, [4, 2, 3]) == "YES"
    assert cube_removed(3, 1, 1, [2, 2, 2]) == "MAYBE"


def test_is_sum_of_large_accepts_int_and_str():
    assert is_sum_of_large(1337) is True
    assert is_sum_of_large("1337") == is_sum_of_large(1337)
    assert is_sum_of_large(200) is False


def test_best_x_values():
    assert best_x(3) == 3
    assert best_x(15) == 2


def test_min_coins_nondecreasing():
    assert min_coins_nondecreasing([1, 2, 3, 4]) == 0
    assert min_coins_nondecreasing([2, 1, 4, 7, 6]) == 3


def test_can_make_majority_zero_runs_collapse():
    assert can_make_majority("1000001") == can_make_majority("101")
    assert can_make_majority("1") is True
    assert can_make_majority("0") is False
    with pytest.raises(ValueError):
        can_make_majority("2")


def test_min_merge_operations_invariants():
    assert min_merge_operations(5, [3, 1, 1]) == min_merge_operations(5, [1, 3, 1])
    assert min_merge_operations(7, [7]) == 0


def test_queue_after_example_and_invariants():
    assert queue_after("BGGBG", 1) == "GBGGB"
    assert queue_after("BGGBG", 0) == "BGGBG"
    result = queue_after("BBGGBGBG", 3)
    assert result.count("B") == 4


def test_order_coins():
    assert order_coins(["A>B", "C<B", "A>C"]) == "CBA"
    assert order_coins(["A>B", "B>C", "C>A"]) is None
    with pytest.raises(ValueError):
        order_coins(["A>D", "B>C", "A>C"])


def test_run_outputs():
    assert run("1972B", "3\n5\nUUDUD\n5\nUDDUD\n2\nUU\n") == "YES\nNO\nNO\n"
    assert run("1985B", "2\n3\n15\n") == "3\n2\n"
    assert run("47B", "A>B\nB>C\nC>A\n") == "Impossible\n"
    assert run("266B", "5 1\nBGGBG\n") == "GBGGB\n"


def test_run_errors():
    with pytest.raises(ValueError):
        run("9999Z", "1\n")
    with pytest.raises(ValueError):
        run("1985B", "2\n3\n")