"""Problems over strings: character sets, parsing, bracket depth and scoring."""

from __future__ import annotations

from collections.abc import Iterable


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Count the words made only of characters found in ``allowed``."""
    permitted = set(allowed)
    return sum(1 for word in words if set(word) <= permitted)


def convert_date_to_binary(date: str) -> str:
    """Write each dash-separated number of a date in binary, keeping the dashes."""
    return "-".join(format(int(part), "b") for part in date.split("-"))


def interpret(command: str) -> str:
    """Interpret a goal-parser command: ``G`` -> G, ``()`` -> o, ``(al)`` -> al."""
    pieces = []
    in_al = False
    for char in command:
        if char == "G":
            pieces.append("G")
        elif char == "a":
            in_al = True
        elif char == ")":
            pieces.append("al" if in_al else "o")
            in_al = False
    return "".join(pieces)


def find_permutation_difference(s: str, t: str) -> int:
    """Sum of index distances of each character of ``t`` from its place in ``s``."""
    positions = {char: index for index, char in enumerate(s)}
    return sum(abs(positions.get(char, 0) - index) for index, char in enumerate(t))


def remove_outer_parentheses(s: str) -> str:
    """Drop the outermost pair of every primitive group of parentheses."""
    pieces = []
    depth = 0
    for char in s:
        if char == "(":
            if depth > 0:
                pieces.append("(")
            depth += 1
        elif char == ")":
            depth -= 1
            if depth > 0:
                pieces.append(")")
    return "".join(pieces)


def reverse_degree(s: str) -> int:
    """Sum of each letter's reversed alphabet position times its 1-based index."""
    return sum(
        position * (26 - (ord(char) - ord("a")))
        for position, char in enumerate(s, start=1)
    )


def reverse_prefix(s: str, k: int) -> str:
    """Reverse the first ``k`` characters of ``s``."""
    if not 0 <= k <= len(s):
        raise ValueError(f"prefix length {k} is out of range for a string of length {len(s)}")
    return s[:k][::-1] + s[k:]


def balanced_string_split(s: str) -> int:
    """Count the points at which the numbers of ``L`` and ``R`` seen so far are equal."""
    balance = 0
    splits = 0
    for char in s:
        if char == "L":
            balance += 1
        elif char == "R":
            balance -= 1
        if balance == 0:
            splits += 1
    return splits