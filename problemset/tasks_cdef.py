"""Solutions to the division C to F problems, with a text-in/text-out runner."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence

from problemset.tasks_a import _ints, _per_case, _yes_no
from problemset.tasks_b import _chars

Edge = tuple[int, int]

_INITIAL_BEST = 9


def min_operations_divisible(values: Iterable[int], k: int) -> int:
    """Fewest single increments that make the product of the values divisible by k."""
    if k < 1:
        raise ValueError("k must be positive")
    numbers = list(values)
    best = min([_INITIAL_BEST, *[-value % k for value in numbers]])
    if k == 4 and len(numbers) >= 2:
        evens = sum(1 for value in numbers if value % 2 == 0)
        best = min(best, max(0, 2 - evens))
    return best


def chords_intersect(a: int, b: int, c: int, d: int) -> bool:
    """Whether the chord a-b crosses the chord c-d on a clock face."""
    ends = sorted([(a, "red"), (b, "red"), (c, "blue"), (d, "blue")], key=lambda end: end[0])
    owners = [owner for _, owner in ends]
    return all(first != second for first, second in zip(owners, owners[1:]))


def good_prefix_count(values: Iterable[int]) -> int:
    """Count prefixes in which one element equals the sum of all the others."""
    count = total = peak = 0
    for value in values:
        peak = max(peak, value)
        total += value
        if total - peak == peak:
            count += 1
    return count


def min_update_string(s: str, indices: Sequence[int], letters: Iterable[str]) -> str:
    """Smallest string after applying the updates in the best order (1-based indices)."""
    letters = sorted(letters)
    if len(indices) != len(letters):
        raise ValueError("there must be one letter for each index")
    for index in indices:
        if not 1 <= index <= len(s):
            raise ValueError(f"index {index} out of range 1..{len(s)}")
    chars = list(s)
    for position, letter in zip(sorted(set(indices)), letters):
        chars[position - 1] = letter
    return "".join(chars)


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    if n < 1:
        raise ValueError("at least one vertex is required")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge {u}-{v} has a vertex out of range 1..{n}")
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    return adjacency


def apple_tree_counts(n: int, edges: Iterable[Edge], queries: Iterable[Edge]) -> list[int]:
    """For each pair of start vertices, the number of pairs of leaves the apples can reach.

    The tree is rooted at vertex 1; vertices are 1-based.
    """
    adjacency = _adjacency(n, edges)
    parent = [-1] * n
    seen = {0}
    order = []
    pending = deque([0])
    while pending:
        node = pending.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                parent[neighbour] = node
                pending.append(neighbour)
    if len(order) != n:
        raise ValueError("the edges do not connect every vertex")

    leaves = [0] * n
    for node in reversed(order):
        if leaves[node] == 0:
            leaves[node] = 1
        if parent[node] >= 0:
            leaves[parent[node]] += leaves[node]

    results = []
    for x, y in queries:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"query {x} {y} has a vertex out of range 1..{n}")
        results.append(leaves[x - 1] * leaves[y - 1])
    return results


def circle_center(grid: Sequence[str]) -> tuple[int, int]:
    """1-based (row, column) of the centre of the Manhattan circle drawn with '#'."""
    counts = [row.count("#") for row in grid]
    if not any(counts):
        raise ValueError("the grid holds no '#' cells")
    widest = next(
        (index for index, (previous, current) in enumerate(zip(counts, counts[1:])) if current < previous),
        len(counts) - 1,
    )
    row = grid[widest]
    first = row.index("#")
    last = row.rindex("#")
    column = last - (last - first) // 2
    return widest + 1, column + 1


def largest_lake(grid: Sequence[Sequence[int]]) -> int:
    """Largest total depth of a group of side-connected cells with positive depth."""
    rows = [list(row) for row in grid]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    water = {
        (r, c): depth
        for r, row in enumerate(rows)
        for c, depth in enumerate(row)
        if depth != 0
    }
    best = 0
    visited: set[tuple[int, int]] = set()
    for start in water:
        if start in visited or water[start] <= 0:
            continue
        visited.add(start)
        pending = [start]
        volume = 0
        while pending:
            r, c = pending.pop()
            volume += water[(r, c)]
            for cell in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if cell in water and cell not in visited:
                    visited.add(cell)
                    pending.append(cell)
        best = max(best, volume)
    return best


def snowflake_params(n: int, edges: Iterable[Edge]) -> tuple[int, int]:
    """(x, y) of a snowflake graph: the centre's degree and the leaves on each middle vertex."""
    adjacency = _adjacency(n, edges)
    leaf = next((node for node, links in enumerate(adjacency) if len(links) == 1), None)
    if leaf is None:
        raise ValueError("the graph has no leaf")
    middle = adjacency[leaf][0]
    centre = next((node for node in adjacency[middle] if len(adjacency[node]) > 1), None)
    if centre is None:
        raise ValueError("the graph has no centre")
    return len(adjacency[centre]), len(adjacency[middle]) - 1


def _pairs(tokens: Iterator[str], count: int) -> list[Edge]:
    return [(int(next(tokens)), int(next(tokens))) for _ in range(count)]


def _solve_1883(tokens: Iterator[str]) -> str:
    n, k = _ints(tokens, 2)
    return str(min_operations_divisible(_ints(tokens, n), k))


def _solve_1971(tokens: Iterator[str]) -> str:
    return _yes_no(chords_intersect(*_ints(tokens, 4)))


def _solve_1985c(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return str(good_prefix_count(_ints(tokens, n)))


def _solve_1986(tokens: Iterator[str]) -> str:
    _, m = _ints(tokens, 2)
    s = next(tokens)
    indices = _ints(tokens, m)
    return min_update_string(s, indices, _chars(tokens, m))


def _read_1843(tokens: Iterator[str]) -> list[str]:
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        edges = _pairs(tokens, n - 1)
        queries = _pairs(tokens, int(next(tokens)))
        lines.extend(str(count) for count in apple_tree_counts(n, edges, queries))
    return lines


def _solve_1985d(tokens: Iterator[str]) -> str:
    n, m = _ints(tokens, 2)
    cells = _chars(tokens, n * m)
    row, column = circle_center([cells[r * m : (r + 1) * m] for r in range(n)])
    return f"{row} {column}"


def _solve_1829e(tokens: Iterator[str]) -> str:
    n, m = _ints(tokens, 2)
    depths = _ints(tokens, n * m)
    return str(largest_lake([depths[r * m : (r + 1) * m] for r in range(n)]))


def _solve_1829f(tokens: Iterator[str]) -> str:
    n, m = _ints(tokens, 2)
    x, y = snowflake_params(n, _pairs(tokens, m))
    return f"{x} {y}"


_PROBLEMS: dict[str, Callable[[Iterator[str]], list[str]]] = {
    "1883C": _per_case(_solve_1883),
    "1971C": _per_case(_solve_1971),
    "1985C": _per_case(_solve_1985c),
    "1986C": _per_case(_solve_1986),
    "1843D": _read_1843,
    "1985D": _per_case(_solve_1985d),
    "1829E": _per_case(_solve_1829e),
    "1829F": _per_case(_solve_1829f),
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