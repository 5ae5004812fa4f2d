"""Dictionary exercises: ransom notes, shared letters, triplets, frequencies, anagrams."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_INSERT = 1
_DELETE = 2
_CHECK = 3


def check_magazine(magazine: Iterable[str], note: Iterable[str]) -> bool:
    """Return whether ``note`` can be cut from the words of ``magazine``.

    Each magazine word may be used once; words are case sensitive.
    """
    available = Counter(magazine)
    for word in note:
        if available[word] <= 0:
            return False
        available[word] -= 1
    return True


def two_strings(first: str, second: str) -> bool:
    """Return whether the two strings share at least one character."""
    seen = set(first)
    return any(char in seen for char in second)


def count_triplets(values: Iterable[int], ratio: int) -> int:
    """Return how many index triplets ``i < j < k`` form a geometric progression.

    The progression is ``(a, a * ratio, a * ratio * ratio)``.
    """
    second_needed: Counter[int] = Counter()
    third_needed: Counter[int] = Counter()
    triplets = 0
    for value in values:
        triplets += third_needed[value]
        third_needed[value * ratio] += second_needed[value]
        second_needed[value * ratio] += 1
    return triplets


def frequency_queries(queries: Iterable[Sequence[int]]) -> list[int]:
    """Run ``(action, value)`` queries and return the answers to the checks.

    Action 1 inserts ``value``, action 2 deletes one occurrence of it, and
    action 3 answers 1 if some value occurs exactly ``value`` times, else 0.
    Other actions are ignored.
    """
    occurrences: Counter[int] = Counter()
    frequencies: Counter[int] = Counter()
    answers: list[int] = []
    for action, value in queries:
        if action == _INSERT:
            previous = occurrences[value]
            occurrences[value] += 1
            frequencies[previous + 1] += 1
            if previous > 0:
                frequencies[previous] -= 1
        elif action == _DELETE:
            if value not in occurrences:
                continue
            previous = occurrences[value]
            occurrences[value] -= 1
            if occurrences[value] == 0:
                del occurrences[value]
            else:
                frequencies[occurrences[value]] += 1
            frequencies[previous] -= 1
            if frequencies[previous] == 0:
                del frequencies[previous]
        elif action == _CHECK:
            answers.append(1 if frequencies.get(value, 0) > 0 else 0)
    return answers


def sherlock_and_anagrams(text: str) -> int:
    """Return how many pairs of substrings of ``text`` are anagrams of each other."""
    pairs = 0
    for length in range(1, len(text)):
        signatures = Counter(
            tuple(sorted(text[begin : begin + length]))
            for begin in range(len(text) - length + 1)
        )
        pairs += sum(count * (count - 1) // 2 for count in signatures.values())
    return pairs