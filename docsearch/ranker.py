# docsearch/ranker.py
import math
from typing import Dict, Iterable

from docsearch.model import Index, TermFreqTable


def tf(term, table: TermFreqTable) -> float:
    """
    Term frequency: share of the document's tokens that are `term`.

    An empty document has no tokens to divide by; its TF is 0.0 for every term.
    """
    total = table.total()
    if total == 0:
        return 0.0
    return table.count(term) / total


def idf(term, index: Index, df: int | None = None) -> float:
    """
    Inverse document frequency: log10(N / (m + 1)).

    m is the number of documents containing `term` (pass `df` to skip the
    corpus scan). The +1 keeps the denominator positive for unseen terms;
    an empty corpus (N == 0) gives 0.0.
    """
    n = len(index)
    if n == 0:
        return 0.0
    m = index.document_frequency(term) if df is None else df
    return math.log10(n / (m + 1))


def score(term, doc_id: str, index: Index) -> float:
    return tf(term, index[doc_id]) * idf(term, index)


def rank_document(query_terms: Iterable, doc_id: str, index: Index) -> float:
    """Sum of TF*IDF over the query terms; repeated terms count every time."""
    return sum(score(term, doc_id, index) for term in query_terms)


class Ranker:
    """
    TF-IDF ranker bound to one Index.

    Same formulas as the module functions, but the document frequency of
    each term is computed once per Ranker instead of once per document.
    The Index never changes after construction, so the memo cannot go stale.
    Only terms that occur in the Index are memoized; the memo is therefore
    bounded by the index vocabulary however many unseen terms queries bring.
    """

    def __init__(self, index: Index):
        self.index = index
        self.df: Dict[str, int] = {}

    def document_frequency(self, term) -> int:
        m = self.df.get(term)
        if m is None:
            m = self.index.document_frequency(term)
            if m:
                self.df[term] = m
        return m

    def idf(self, term) -> float:
        return idf(term, self.index, df=self.document_frequency(term))

    def score(self, term, doc_id: str) -> float:
        return tf(term, self.index[doc_id]) * self.idf(term)

    def rank_document(self, query_terms: Iterable, doc_id: str) -> float:
        return sum(self.score(term, doc_id) for term in query_terms)
