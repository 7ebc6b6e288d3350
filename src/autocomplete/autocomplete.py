"""
Weighted prefix autocomplete.

The vocabulary is kept in lexicographic order, so all terms starting with a given prefix form one contiguous slice.
That slice is found with two binary searches, comparing every candidate only up to the length of the prefix.
Within the slice, the `limit` heaviest terms are returned.
"""

import heapq
from bisect import bisect_left, bisect_right
from dataclasses import dataclass

from loguru import logger

from src.core.exceptions import InvalidSuggestionLimitError, InvalidTermError

DEFAULT_SUGGESTION_LIMIT = 5


@dataclass(frozen=True)
class Term:
    term: str
    weight: int = 0

    def __post_init__(self) -> None:
        if not self.term:
            raise InvalidTermError("Term cannot be empty.")
        if self.weight < 0:
            raise InvalidTermError(
                f"Weight must be non-negative, got {self.weight} for {self.term!r}."
            )

    def __str__(self) -> str:
        return f"{self.weight}\t{self.term}"


def _ranking_key(term: Term) -> tuple[int, str]:
    """Heaviest first. Equal weights? Then alphabetical, so the output is deterministic."""
    return (-term.weight, term.term)


class Autocomplete:
    def __init__(self, limit: int = DEFAULT_SUGGESTION_LIMIT) -> None:
        self._terms: list[Term] = []
        self._is_sorted = True
        self._limit = DEFAULT_SUGGESTION_LIMIT
        self.configure(limit)

    def __len__(self) -> int:
        return len(self._terms)

    @property
    def limit(self) -> int:
        return self._limit

    def configure(self, limit: int) -> None:
        """Maximum number of suggestions returned by any following query."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidSuggestionLimitError(
                f"Suggestion limit must be a positive integer, got {limit!r}."
            )
        self._limit = limit

    def insert(self, term: str, weight: int = 0) -> None:
        """
        Add a term to the vocabulary.
        ---

        Duplicates are kept: the index reflects everything that was loaded.
        The weight is fixed once inserted.
        """
        self._terms.append(Term(term, weight))
        self._is_sorted = False

    def suggest_terms(self, prefix: str) -> list[Term]:
        """The (at most `limit`) heaviest terms starting with the prefix. Matching is case-sensitive."""
        if not prefix:
            return []

        start, end = self._prefix_range(prefix)
        matches = self._terms[start:end]
        suggestions = heapq.nsmallest(self._limit, matches, key=_ranking_key)
        logger.debug(
            f"[Autocomplete] {prefix!r}: {len(matches)} matches, returning {len(suggestions)}"
        )
        return suggestions

    def suggest(self, prefix: str) -> list[str]:
        return [term.term for term in self.suggest_terms(prefix)]

    def _prefix_range(self, prefix: str) -> tuple[int, int]:
        """
        First index and one-past-last index of the terms starting with the prefix.

        NOTE truncating to the prefix length keeps the order intact: if a <= b, then a[:n] <= b[:n].
        """
        self._ensure_sorted()
        length = len(prefix)

        def truncated(term: Term) -> str:
            return term.term[:length]

        start = bisect_left(self._terms, prefix, key=truncated)
        end = bisect_right(self._terms, prefix, lo=start, key=truncated)
        return start, end

    def _ensure_sorted(self) -> None:
        """Inserts only append. Sort once, right before the next lookup."""
        if not self._is_sorted:
            self._terms.sort(key=lambda term: term.term)
            self._is_sorted = True
