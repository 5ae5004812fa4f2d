"""String exercises: deletions, anagrams, frequencies, special substrings, LCS."""

from __future__ import annotations

from collections import Counter


def alternating_characters(text: str) -> int:
    """Return how many deletions leave no two equal neighbouring characters."""
    return sum(1 for first, second in zip(text, text[1:]) if first == second)


def make_anagram(first: str, second: str) -> int:
    """Return how many characters must be deleted to make two strings anagrams."""
    first_counts = Counter(first)
    second_counts = Counter(second)
    return sum(((first_counts - second_counts) + (second_counts - first_counts)).values())


def is_valid(text: str) -> bool:
    """Return whether every character occurs equally often after at most one deletion.

    Counts are examined in character order, as the original check does.
    """
    counts = Counter(text)
    reference = 0
    removed = False
    for char in sorted(counts):
        occurrence = counts[char]
        if occurrence == reference:
            continue
        if reference == 0:
            reference = occurrence
            continue
        if not removed and (occurrence == reference + 1 or occurrence == 1):
            removed = True
            continue
        return False
    return True


def special_substring_count(text: str) -> int:
    """Return how many substrings are special.

    A special substring is made of one repeated character, or of one
    repeated character on both sides of a single different middle character.
    """
    n = len(text)
    result = 0
    position = 0
    while position < n:
        repeat = 1
        while position < n - 1 and text[position] == text[position + 1]:
            position += 1
            repeat += 1
        result += repeat * (repeat + 1) // 2

        offset = 1
        while (
            position - offset >= 0
            and position + offset < n
            and text[position + offset] == text[position - 1]
            and text[position - offset] == text[position - 1]
        ):
            result += 1
            offset += 1
        position += 1
    return result


def common_child(first: str, second: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for first_char in first:
        current = [0]
        for j, second_char in enumerate(second, start=1):
            if first_char == second_char:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]