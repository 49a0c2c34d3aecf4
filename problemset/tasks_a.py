"""Solutions to the division A problems, with a text-in/text-out runner."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import product

Point = tuple[int, int]

_GRID_DIM = 3
_DRAW_LIMIT = 30
_SCREEN_CELLS = 15
_LEVELS = "ABCDEFG"
_VERDICTS = {True: "YES", False: "NO"}


def king_escape(queen: Point, king: Point, target: Point) -> bool:
    """Tell whether the king can reach the target without crossing the queen's lines."""
    ax, ay = queen
    bx, by = king
    cx, cy = target
    same_rows = (by > ay and cy > ay) or (by < ay and cy < ay)
    same_cols = (bx > ax and cx > ax) or (bx < ax and cx < ax)
    return same_rows and same_cols


def _neighbours(cell: int) -> list[int]:
    row, col = divmod(cell, _GRID_DIM)
    return sorted(
        r * _GRID_DIM + c
        for r in range(row - 1, row + 2)
        for c in range(col - 1, col + 2)
        if (r, c) != (row, col) and 0 <= r < _GRID_DIM and 0 <= c < _GRID_DIM
    )


def smallest_word(grid: Iterable[str]) -> str:
    """Return the smallest three-letter word walking through adjacent, distinct cells."""
    letters = "".join("".join(grid).split())
    if len(letters) != _GRID_DIM * _GRID_DIM:
        raise ValueError("grid must hold exactly 9 letters")
    words = (
        letters[first] + letters[second] + letters[third]
        for first in range(len(letters))
        for second in _neighbours(first)
        for third in _neighbours(second)
        if third != first
    )
    return min(words, default="ZZZ") if letters else "ZZZ"


def max_pair_score(values: Iterable[int]) -> int:
    """Best total of pair minimums when the values are split into pairs."""
    return sum(sorted(values)[::2])


def count_coin_pairs(left: Iterable[int], right: Iterable[int], limit: int) -> int:
    """Count pairs, one from each pocket, whose sum fits within the limit."""
    right = list(right)
    return sum(1 for b in left for c in right if b + c <= limit)


def yogurt_cost(count: int, single: int, pair: int) -> int:
    """Cheapest price for buying the given number of yogurts."""
    if 2 * single > pair:
        return pair * (count // 2) + (single if count % 2 else 0)
    return single * count


def polygon_count(sticks: Iterable[int]) -> int:
    """Number of equilateral triangles that can be made from the sticks."""
    return sum(amount // 3 for amount in Counter(sticks).values())


def _most_common_first(cards: Sequence[int]) -> tuple[int, int]:
    counts: Counter[int] = Counter()
    best_value, best_count = -1, -1
    for card in cards:
        counts[card] += 1
        if counts[card] > best_count:
            best_value, best_count = card, counts[card]
    return best_value, best_count


def min_cards_left(cards: Iterable[int], k: int) -> int:
    """Fewest cards left after repeatedly exchanging k equal cards for k - 1 cards."""
    hand = list(cards)
    while True:
        value, count = _most_common_first(hand)
        if count < k:
            return len(hand)
        hand = [card for card in hand if card != value]
        if not hand:
            return k - 1
        hand.extend([hand[-1]] * (k - 1))


def min_invitations(friends: Sequence[int]) -> int:
    """Invitations needed so that at least two friends come (1-based best friends)."""
    best = [friend - 1 for friend in friends]
    mutual = any(best[best[i]] == i for i in range(len(best)))
    return 2 if mutual else 3


def min_max(x: int, y: int) -> tuple[int, int]:
    """Return the two numbers as (smaller, larger)."""
    return (x, y) if x < y else (y, x)


def max_draws(p1: int, p2: int, p3: int) -> int:
    """Largest possible number of draws for the chess scores, or -1 if impossible."""
    if (p1 + p2 + p3) % 2 == 1:
        return -1
    best = 0
    for d01, d02, d12 in product(range(_DRAW_LIMIT), repeat=3):
        rests = (p1 - d01 - d02, p2 - d01 - d12, p3 - d02 - d12)
        if all(rest >= 0 and rest % 2 == 0 for rest in rests):
            best = max(best, d01 + d02 + d12)
    return best


def min_screens(small: int, large: int) -> int:
    """Screens needed to place 1x1 and 2x2 icons on 5x3 screens."""
    screens = 0
    while small > 0 or large > 0:
        screens += 1
        placed = min(large, 2)
        large -= placed
        space = _SCREEN_CELLS - 4 * placed
        small -= min(small, space)
    return screens


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_strong_password(password: str) -> bool:
    """Check the digit/letter ordering rules for a password."""
    for previous, current in zip(password, password[1:]):
        if _is_digit(current) and "a" <= previous <= "z":
            return False
    digits = [char for char in password if _is_digit(char)]
    letters = [char for char in password if not _is_digit(char)]
    return digits == sorted(digits) and letters == sorted(letters)


def can_build_tower(n: int, m: int) -> bool:
    """Whether n single-cube moves can leave a tower of exactly m cubes."""
    if m > n:
        return False
    return (m - n) % 2 == 0


def max_guaranteed_k(values: Sequence[int]) -> int:
    """Largest k below the maximum of every subarray of length at least two."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    return min(max(a, b) for a, b in zip(values, values[1:])) - 1


def problems_needed(levels: str, rounds: int) -> int:
    """Problems to create so that each of rounds has one problem of every level."""
    counts = Counter(levels)
    unknown = set(counts) - set(_LEVELS)
    if unknown:
        raise ValueError(f"unknown difficulty levels: {''.join(sorted(unknown))}")
    return sum(max(0, rounds - counts[level]) for level in _LEVELS)


def color_split(values: Sequence[int]) -> str | None:
    """Colour a sorted array so both colours have different ranges, or None."""
    if all(value == values[0] for value in values[1:]):
        return None
    return "".join("R" if index == 1 else "B" for index in range(len(values)))


def swap_first_letters(first: str, second: str) -> tuple[str, str]:
    """Swap the first letters of two words."""
    return second[0] + first[1:], first[0] + second[1:]


def min_total_distance(points: Iterable[int]) -> int:
    """Smallest total distance from an integer point to three given points."""
    xs = sorted(points)
    if len(xs) != 3:
        raise ValueError("exactly three points are required")
    distances = (sum(abs(a - x) for x in xs) for a in range(xs[0], xs[2] + 1))
    return min(99, *distances)


def can_catch_coin(x: int, y: int) -> bool:
    """Whether a coin starting at (x, y) can be caught."""
    return y >= -1


def max_product(a: int, b: int, c: int) -> int:
    """Largest product after five single increments among the three numbers."""
    nums = [a, b, c]
    for _ in range(5):
        nums.sort()
        nums[0] += 1
    return nums[0] * nums[1] * nums[2]


def is_reversed(word: str, translation: str) -> bool:
    """Whether the translation is the word written backwards."""
    return translation == word[::-1]


def max_dominoes(rows: int, cols: int) -> int:
    """Most 2x1 dominoes that fit on a rows x cols board."""
    return rows * cols // 2


def balanced_shuffle(sequence: str) -> str:
    """Order characters by prefix balance, ties broken by later position first."""
    keyed = []
    balance = 0
    for position, char in enumerate(sequence):
        keyed.append((balance, -position, char))
        balance += 1 if char == "(" else -1
    return "".join(char for _, _, char in sorted(keyed))


def _yes_no(flag: bool) -> str:
    """Render a verdict as the judge's YES/NO answer."""
    return _VERDICTS[bool(flag)]


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


Solver = Callable[[Iterator[str]], str]


def _per_case(solve: Solver) -> Callable[[Iterator[str]], list[str]]:
    def reader(tokens: Iterator[str]) -> list[str]:
        return [solve(tokens) for _ in range(int(next(tokens)))]

    return reader


def _single(solve: Solver) -> Callable[[Iterator[str]], list[str]]:
    return lambda tokens: [solve(tokens)]


def _solve_1033(tokens: Iterator[str]) -> str:
    _, ax, ay, bx, by, cx, cy = _ints(tokens, 7)
    return _yes_no(king_escape((ax, ay), (bx, by), (cx, cy)))


def _solve_1906(tokens: Iterator[str]) -> str:
    letters = "".join(tokens)
    return smallest_word([letters[: _GRID_DIM * _GRID_DIM]])


def _solve_1930(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return str(max_pair_score(_ints(tokens, 2 * n)))


def _solve_1941(tokens: Iterator[str]) -> str:
    n, m, k = _ints(tokens, 3)
    left = _ints(tokens, n)
    right = _ints(tokens, m)
    return str(count_coin_pairs(left, right, k))


def _solve_1955(tokens: Iterator[str]) -> str:
    return str(yogurt_cost(*_ints(tokens, 3)))


def _solve_1957(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return str(polygon_count(_ints(tokens, n)))


def _solve_1966(tokens: Iterator[str]) -> str:
    n, k = _ints(tokens, 2)
    return str(min_cards_left(_ints(tokens, n), k))


def _solve_1969(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return str(min_invitations(_ints(tokens, n)))


def _solve_1971(tokens: Iterator[str]) -> str:
    low, high = min_max(*_ints(tokens, 2))
    return f"{low} {high}"


def _solve_1973(tokens: Iterator[str]) -> str:
    return str(max_draws(*_ints(tokens, 3)))


def _solve_1974(tokens: Iterator[str]) -> str:
    return str(min_screens(*_ints(tokens, 2)))


def _solve_1976(tokens: Iterator[str]) -> str:
    next(tokens)
    return _yes_no(is_strong_password(next(tokens)))


def _solve_1977(tokens: Iterator[str]) -> str:
    return _yes_no(can_build_tower(*_ints(tokens, 2)))


def _solve_1979(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return str(max_guaranteed_k(_ints(tokens, n)))


def _solve_1980(tokens: Iterator[str]) -> str:
    _, m = _ints(tokens, 2)
    return str(problems_needed(next(tokens), m))


def _solve_1984(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    colouring = color_split(_ints(tokens, n))
    return "NO" if colouring is None else f"YES\n{colouring}"


def _solve_1985(tokens: Iterator[str]) -> str:
    return " ".join(swap_first_letters(next(tokens), next(tokens)))


def _solve_1986(tokens: Iterator[str]) -> str:
    return str(min_total_distance(_ints(tokens, 3)))


def _solve_1989(tokens: Iterator[str]) -> str:
    return _yes_no(can_catch_coin(*_ints(tokens, 2)))


def _solve_1992(tokens: Iterator[str]) -> str:
    return str(max_product(*_ints(tokens, 3)))


def _solve_41(tokens: Iterator[str]) -> str:
    return _yes_no(is_reversed(next(tokens), next(tokens)))


def _solve_50(tokens: Iterator[str]) -> str:
    return str(max_dominoes(*_ints(tokens, 2)))


def _solve_1970(tokens: Iterator[str]) -> str:
    return balanced_shuffle(next(tokens))


_PROBLEMS: dict[str, Callable[[Iterator[str]], list[str]]] = {
    "1033A": _single(_solve_1033),
    "1906A": _single(_solve_1906),
    "1930A": _per_case(_solve_1930),
    "1941A": _per_case(_solve_1941),
    "1955A": _per_case(_solve_1955),
    "1957A": _per_case(_solve_1957),
    "1966A": _per_case(_solve_1966),
    "1969A": _per_case(_solve_1969),
    "1971A": _per_case(_solve_1971),
    "1973A": _per_case(_solve_1973),
    "1974A": _per_case(_solve_1974),
    "1976A": _per_case(_solve_1976),
    "1977A": _per_case(_solve_1977),
    "1979A": _per_case(_solve_1979),
    "1980A": _per_case(_solve_1980),
    "1984A": _per_case(_solve_1984),
    "1985A": _per_case(_solve_1985),
    "1986A": _per_case(_solve_1986),
    "1989A": _per_case(_solve_1989),
    "1992A": _per_case(_solve_1992),
    "41A": _single(_solve_41),
    "50A": _single(_solve_50),
    "1970A1": _single(_solve_1970),
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