"""Solutions to the division B problems, with a text-in/text-out runner."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import groupby

from problemset.tasks_a import _ints, _per_case, _single, _yes_no

Query = tuple[int, ...]

_COINS = "ABC"


def min_hours(computers: int, cables: int) -> int:
    """Hours needed to copy an update onto every computer with a limited number of cables."""
    copies, hours = 1, 0
    while copies < cables:
        copies *= 2
        hours += 1
    if copies < computers:
        hours += (computers - copies + cables - 1) // cables
    return hours


def process_queries(values: Sequence[int], queries: Iterable[Query]) -> list[int]:
    """Apply point and replace-all updates, returning the array sum after each one.

    A query is ``(1, index, x)`` with a 1-based index, or ``(2, x)``.
    """
    original = list(values)
    size = len(original)
    total = sum(original)
    fill: int | None = None
    overrides: dict[int, int] = {}
    sums = []
    for kind, *args in queries:
        if kind == 1:
            index, value = args
            if not 1 <= index <= size:
                raise IndexError(f"index {index} out of range 1..{size}")
            position = index - 1
            default = original[position] if fill is None else fill
            total += value - overrides.get(position, default)
            overrides[position] = value
        elif kind == 2:
            (value,) = args
            fill = value
            overrides.clear()
            total = value * size
        else:
            raise ValueError(f"unknown query type: {kind}")
        sums.append(total)
    return sums


def kill_order(health: Sequence[int], k: int) -> list[int]:
    """1-based order in which monsters die when the strongest is always hit for k."""
    if k <= 0:
        raise ValueError("damage must be positive")
    remainders = [hp % k or k for hp in health]
    return [i + 1 for i in sorted(range(len(remainders)), key=lambda i: (-remainders[i], i))]


def type_text(keys: str) -> str:
    """Text typed when 'b' erases the last lowercase and 'B' the last uppercase letter."""
    typed: list[str] = []
    lower: list[int] = []
    upper: list[int] = []
    for key in keys:
        if key == "b":
            if lower:
                typed[lower.pop()] = ""
        elif key == "B":
            if upper:
                typed[upper.pop()] = ""
        else:
            typed.append(key)
            (upper if "A" <= key <= "Z" else lower).append(len(typed) - 1)
    return "".join(typed)


def _check_binary(s: str) -> None:
    if set(s) - {"0", "1"}:
        raise ValueError("string must hold only '0' and '1'")


def min_deletion_cost(s: str) -> int:
    """Fewest deletions so the remaining characters can be swapped into a string unlike its prefix."""
    _check_binary(s)
    remaining = Counter(s)
    for position, char in enumerate(s):
        other = "1" if char == "0" else "0"
        if remaining[other] == 0:
            return len(s) - position
        remaining[other] -= 1
    return 0


def is_progressive_square(n: int, c: int, d: int, values: Iterable[int]) -> bool:
    """Whether the values form an n x n progressive square with steps c and d."""
    found = sorted(values)
    if n < 1 or len(found) != n * n:
        raise ValueError("exactly n * n values are required, with n at least 1")
    start = found[0]
    expected = sorted(start + i * c + j * d for i in range(n) for j in range(n))
    return expected == found


def can_fill_grid(grid: Sequence[str]) -> bool:
    """Whether the whole grid can be made a single colour by rectangle operations."""
    first, last = grid[0], grid[-1]
    corners_differ = first[0] != last[-1]
    if len(set(first)) == 1 and len(set(last)) == 1 and corners_differ:
        return False
    left = {row[0] for row in grid}
    right = {row[-1] for row in grid}
    if len(left) == 1 and len(right) == 1 and corners_differ:
        return False
    return True


def rearrange(s: str) -> str | None:
    """A rearrangement of s that differs from it, or None if there is none."""
    index = next((i for i, char in enumerate(s) if char != s[0]), None)
    if index is None:
        return None
    return s[index] + s[1:index] + s[0] + s[index + 1 :]


def alice_wins(coins: str) -> bool:
    """Whether the first player wins the coin game."""
    return coins.count("U") % 2 == 1


def decode_symmetric(encoded: str) -> str:
    """Undo the symmetric encoding over the distinct letters of the text."""
    letters = "".join(sorted(set(encoded)))
    return encoded.translate(str.maketrans(letters, letters[::-1]))


def min_copy_operations(a: Sequence[int], b: Sequence[int]) -> int:
    """Fewest increment, decrement and copy operations turning a into b."""
    if not a or len(b) != len(a) + 1:
        raise ValueError("b must be exactly one element longer than a non-empty a")
    target = b[-1]
    steps = sum(abs(y - x) for x, y in zip(a, b))
    extra = min(
        0 if min(x, y) <= target <= max(x, y) else min(abs(target - x), abs(target - y))
        for x, y in zip(a, b)
    )
    return steps + extra + 1


def cube_removed(n: int, favorite: int, k: int, values: Sequence[int]) -> str:
    """'YES', 'NO' or 'MAYBE': whether the favourite cube is among the k removed."""
    favourite_value = values[favorite - 1]
    ordered = sorted(values, reverse=True)
    if k == n:
        return "YES"
    if ordered[k] > favourite_value:
        return "NO"
    if ordered[k] < favourite_value:
        return "YES"
    return "MAYBE" if ordered[k - 1] == ordered[k] else "NO"


def is_sum_of_large(x: int | str) -> bool:
    """Whether x is the sum of two large positive numbers of equal length."""
    digits = str(x)
    if not digits:
        return False
    return digits[0] == "1" and "0" not in digits[1:-1] and digits[-1] != "9"


def _multiples_sum(x: int, n: int) -> int:
    count = n // x
    return x * count * (count + 1) // 2


def best_x(n: int) -> int:
    """The x in [2, n] that maximises the sum of its multiples up to n."""
    return max(range(2, max(n, 2) + 1), key=lambda x: _multiples_sum(x, n))


def min_coins_nondecreasing(values: Iterable[int]) -> int:
    """Fewest coins spent to make the array non-decreasing."""
    peak = -1
    gaps = []
    for value in values:
        if value > peak:
            peak = value
        else:
            gaps.append(peak - value)
    gaps.sort()
    total = raised = 0
    for position, gap in enumerate(gaps):
        step = gap - raised
        raised += step
        total += step * (len(gaps) - position + 1)
    return total


def can_make_majority(digits: str) -> bool:
    """Whether the binary sequence can be collapsed down to a single 1."""
    _check_binary(digits)
    groups = [key for key, _ in groupby(digits)]
    return groups.count("1") > groups.count("0")


def min_merge_operations(n: int, pieces: Iterable[int]) -> int:
    """Fewest split and merge operations to join the pieces into one casserole of length n."""
    return sum(2 * piece - 1 for piece in sorted(pieces)[:-1])


def queue_after(queue: str, seconds: int) -> str:
    """The queue after each boy lets the girl behind him go ahead, once per second."""
    line = "".join("B" if person == "B" else "G" for person in queue)
    for _ in range(seconds):
        line = line.replace("BG", "GB")
    return line


def order_coins(comparisons: Iterable[str]) -> str | None:
    """Coins from lightest to heaviest, or None if the comparisons contradict."""
    wins = dict.fromkeys(_COINS, 0)
    for comparison in comparisons:
        left, sign, right = comparison
        winner = left if sign == ">" else right
        if winner not in wins or {left, right} - set(_COINS):
            raise ValueError(f"bad comparison: {comparison}")
        wins[winner] += 1
    if len(set(wins.values())) == 1:
        return None
    return "".join(
        next((coin for coin in _COINS if wins[coin] == rank), "") for rank in range(3)
    )


def _chars(tokens: Iterator[str], count: int) -> str:
    collected = ""
    while len(collected) < count:
        collected += next(tokens)
    if len(collected) != count:
        raise ValueError("character data does not match the declared size")
    return collected


def _solve_1606(tokens: Iterator[str]) -> str:
    return str(min_hours(*_ints(tokens, 2)))


def _read_1679(tokens: Iterator[str]) -> list[str]:
    n, q = _ints(tokens, 2)
    values = _ints(tokens, n)
    queries: list[Query] = []
    for _ in range(q):
        if int(next(tokens)) == 1:
            queries.append((1, *_ints(tokens, 2)))
        else:
            queries.append((2, int(next(tokens))))
    return [str(total) for total in process_queries(values, queries)]


def _solve_1849(tokens: Iterator[str]) -> str:
    n, k = _ints(tokens, 2)
    return "".join(f"{index} " for index in kill_order(_ints(tokens, n), k))


def _solve_1907(tokens: Iterator[str]) -> str:
    return type_text(next(tokens))


def _solve_1913(tokens: Iterator[str]) -> str:
    return str(min_deletion_cost(next(tokens)))


def _solve_1955(tokens: Iterator[str]) -> str:
    n, c, d = _ints(tokens, 3)
    return _yes_no(is_progressive_square(n, c, d, _ints(tokens, n * n)))


def _solve_1966(tokens: Iterator[str]) -> str:
    n, m = _ints(tokens, 2)
    cells = _chars(tokens, n * m)
    return _yes_no(can_fill_grid([cells[row * m : (row + 1) * m] for row in range(n)]))


def _solve_1971(tokens: Iterator[str]) -> str:
    result = rearrange(next(tokens))
    return "NO" if result is None else f"YES\n{result}"


def _solve_1972(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return _yes_no(alice_wins(_chars(tokens, n)))


def _solve_1974(tokens: Iterator[str]) -> str:
    next(tokens)
    return decode_symmetric(next(tokens))


def _solve_1976(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    a = _ints(tokens, n)
    b = _ints(tokens, n + 1)
    return str(min_copy_operations(a, b))


def _solve_1980(tokens: Iterator[str]) -> str:
    n, favorite, k = _ints(tokens, 3)
    return cube_removed(n, favorite, k, _ints(tokens, n))


def _solve_1984(tokens: Iterator[str]) -> str:
    return _yes_no(is_sum_of_large(next(tokens)))


def _solve_1985(tokens: Iterator[str]) -> str:
    return str(best_x(int(next(tokens))))


def _solve_1987(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return str(min_coins_nondecreasing(_ints(tokens, n)))


def _solve_1988(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return _yes_no(can_make_majority(_chars(tokens, n)))


def _solve_1992(tokens: Iterator[str]) -> str:
    n, k = _ints(tokens, 2)
    return str(min_merge_operations(n, _ints(tokens, k)))


def _solve_266(tokens: Iterator[str]) -> str:
    n, seconds = _ints(tokens, 2)
    return queue_after(_chars(tokens, n), seconds)


def _solve_47(tokens: Iterator[str]) -> str:
    order = order_coins([next(tokens) for _ in range(3)])
    return "Impossible" if order is None else order


_PROBLEMS: dict[str, Callable[[Iterator[str]], list[str]]] = {
    "1606B": _per_case(_solve_1606),
    "1679B": _read_1679,
    "1849B": _per_case(_solve_1849),
    "1907B": _per_case(_solve_1907),
    "1913B": _per_case(_solve_1913),
    "1955B": _per_case(_solve_1955),
    "1966B": _per_case(_solve_1966),
    "1971B": _per_case(_solve_1971),
    "1972B": _per_case(_solve_1972),
    "1974B": _per_case(_solve_1974),
    "1976B": _per_case(_solve_1976),
    "1980B": _per_case(_solve_1980),
    "1984B": _per_case(_solve_1984),
    "1985B": _per_case(_solve_1985),
    "1987B": _per_case(_solve_1987),
    "1988B": _per_case(_solve_1988),
    "1992B": _per_case(_solve_1992),
    "266B": _single(_solve_266),
    "47B": _single(_solve_47),
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the output text."""
    try:
        reader = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    try:
        lines = reader(iter(text.split()))
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    return "".join(f"{line}\n" for line in lines)