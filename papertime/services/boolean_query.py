"""
Boolean query language for free-text paper search.

Grammar (case-insensitive keywords, lowest precedence first):

    query   := clause ( OR clause )*
    clause  := term ( AND term | NOT term )*
    term    := [NOT] words

``a NOT b`` reads as ``a AND NOT b``. Terms are matched as substrings of the
searchable text. A query without any keyword matches when any of its words
is a substring.
"""

from dataclasses import dataclass
from typing import List, Tuple

AND = "and"
OR = "or"
NOT = "not"
KEYWORDS = frozenset({AND, OR, NOT})


@dataclass(frozen=True)
class QueryClause:
    """Conjunction of required and excluded terms"""

    required: Tuple[str, ...] = ()
    excluded: Tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        return all(term in text for term in self.required) and not any(
            term in text for term in self.excluded
        )


@dataclass(frozen=True)
class BooleanQuery:
    """Parsed query: either keyword-free words or OR-ed clauses"""

    clauses: Tuple[QueryClause, ...] = ()
    any_words: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.clauses and not self.any_words

    def matches(self, text: str) -> bool:
        """Evaluate against already-lowercased searchable text."""
        if self.is_empty:
            return True
        if self.any_words:
            return any(word in text for word in self.any_words)
        return any(clause.matches(text) for clause in self.clauses)


def parse_query(query: str) -> BooleanQuery:
    """Parse a user query string.

    Args:
        query: Raw query, e.g. ``"transformer AND attention OR bert"``

    Returns:
        BooleanQuery (empty for blank input)
    """
    words = query.lower().split()
    if not words:
        return BooleanQuery()

    if not KEYWORDS.intersection(words):
        return BooleanQuery(any_words=tuple(words))

    clauses: List[QueryClause] = []
    required: List[str] = []
    excluded: List[str] = []
    phrase: List[str] = []
    negated = False

    def flush_term() -> None:
        nonlocal negated
        if phrase:
            (excluded if negated else required).append(" ".join(phrase))
            phrase.clear()
        negated = False

    def close_clause() -> None:
        flush_term()
        if required or excluded:
            clauses.append(QueryClause(tuple(required), tuple(excluded)))
        required.clear()
        excluded.clear()

    for word in words:
        if word == OR:
            close_clause()
        elif word == AND:
            flush_term()
        elif word == NOT:
            flush_term()
            negated = True
        else:
            phrase.append(word)
    close_clause()

    return BooleanQuery(clauses=tuple(clauses))
