"""String exercises: subsequences, anagrams and letter manipulation."""

from __future__ import annotations

from collections import Counter, defaultdict


def subsequences(text: str) -> list[str]:
    """Return every subsequence of ``text``, taking each character before skipping it."""
    if not text:
        return [""]
    rest = subsequences(text[1:])
    return [text[0] + tail for tail in rest] + rest


def group_anagrams(words: list[str]) -> list[list[str]]:
    """Group words that are anagrams, ordered by their sorted letters."""
    groups: dict[str, list[str]] = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return [groups[key] for key in sorted(groups)]


def is_letter(char: str) -> bool:
    """Return True for an ASCII letter."""
    return "A" <= char <= "Z" or "a" <= char <= "z"


def reverse_only_letters(text: str) -> str:
    """Reverse the letters of ``text`` while every other character stays in place."""
    letters = [char for char in reversed(text) if is_letter(char)]
    feed = iter(letters)
    return "".join(next(feed) if is_letter(char) else char for char in text)


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for char in text:
        if stack and stack[-1] == char:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def is_anagram(first: str, second: str) -> bool:
    """Return True when both strings hold the same characters the same number of times."""
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)