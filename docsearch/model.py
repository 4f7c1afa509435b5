"""
docsearch/model.py

In-memory data model of the engine.

    TermFreqTable : Term -> occurrence count, for exactly one document
    Index         : document id -> TermFreqTable, for the whole corpus

Both are read-only mappings once constructed. Counts are always >= 1;
a term that does not occur is simply absent (count() reports 0).
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Dict, Iterator

from docsearch.lexer import Term


class TermFreqTable(Mapping):
    """
    Immutable term -> count mapping for a single document.

    The total number of tokens is computed once at construction, since
    TF divides by it for every scored term.
    """

    __slots__ = ("_counts", "_total")

    def __init__(self, counts: Mapping[str, int] | None = None):
        data: Dict[Term, int] = {}
        for term, freq in (counts or {}).items():
            if freq < 1:
                raise ValueError(f"count for term {term!r} must be >= 1, got {freq}")
            data[Term(term)] = int(freq)
        self._counts = data
        self._total = sum(data.values())

    def __getitem__(self, term: str) -> int:
        return self._counts[term]

    def __iter__(self) -> Iterator[Term]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"TermFreqTable({self._counts!r})"

    def count(self, term: str) -> int:
        return self._counts.get(term, 0)

    def total(self) -> int:
        """Sum of all counts, i.e. the number of tokens in the document."""
        return self._total

    def to_dict(self) -> Dict[str, int]:
        return dict(self._counts)


class Index(Mapping):
    """
    Immutable document id -> TermFreqTable mapping covering one corpus snapshot.

    There is no ordering guarantee; anything that needs a stable order
    (ranking ties, serialization) sorts by document id itself.
    """

    __slots__ = ("_tables",)

    def __init__(self, tables: Mapping[str, TermFreqTable] | None = None):
        data: Dict[str, TermFreqTable] = {}
        for doc_id, table in (tables or {}).items():
            if not isinstance(table, TermFreqTable):
                table = TermFreqTable(table)
            data[str(doc_id)] = table
        self._tables = data

    def __getitem__(self, doc_id: str) -> TermFreqTable:
        return self._tables[doc_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"Index({len(self._tables)} documents)"

    def document_frequency(self, term: str) -> int:
        """Number of documents whose table contains `term`."""
        return sum(1 for table in self._tables.values() if term in table)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {doc_id: table.to_dict() for doc_id, table in self._tables.items()}
