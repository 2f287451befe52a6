"""Naming and collection helpers shared by the routes generator.

  - uniq            -> order-preserving de-duplication
  - get_duplicates  -> values that appear more than once
  - pascal_case     -> 'user_account' -> 'UserAccount'
  - tidy_object     -> drop empty entries from a mapping

Examples:
  pascal_case("pullrequest_comment") -> "PullrequestComment"
  pascal_case("userAccount")         -> "UserAccount"
  pascal_case("HTTPError")           -> "HttpError"
"""

from __future__ import annotations

import re
from typing import Any, Iterable

# Word boundaries: acronym runs, capitalized/lowercase words, digit runs
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")

_EMPTY_CONTAINERS = (dict, list, tuple, set, frozenset)


def _contains(values: list[Any], value: Any) -> bool:
    """Check membership by type and value, so True and 1 stay distinct."""
    return any(type(v) is type(value) and v == value for v in values)


def uniq(values: Iterable[Any]) -> list[Any]:
    """Return values without repeats, keeping first occurrences in order."""
    result: list[Any] = []
    for value in values:
        if not _contains(result, value):
            result.append(value)
    return result


def get_duplicates(values: Iterable[Any]) -> list[Any]:
    """Return each value that occurs more than once, reported once."""
    seen: list[Any] = []
    duplicates: list[Any] = []
    for value in values:
        if _contains(seen, value):
            if not _contains(duplicates, value):
                duplicates.append(value)
        else:
            seen.append(value)
    return duplicates


def _split_words(text: str) -> list[str]:
    """Split an identifier into words on separators and case changes."""
    return _WORD_RE.findall(text)


def pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case or camelCase text to PascalCase."""
    return "".join(word[0].upper() + word[1:].lower() for word in _split_words(text))


def is_empty(value: Any) -> bool:
    """Check if a value counts as empty: None, '' or an empty container.

    False and 0 are real values and never empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, _EMPTY_CONTAINERS):
        return len(value) == 0
    return False


def tidy_object(mapping: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of mapping without its empty entries (one level only)."""
    return {key: value for key, value in mapping.items() if not is_empty(value)}
