# docsearch/searcher.py
from typing import List, Optional, Tuple

from docsearch.lexer import tokenize
from docsearch.model import Index
from docsearch.ranker import Ranker, tf


class Searcher:
    """
    TF-IDF query engine over a loaded Index.

    - The Index is handed in by whoever loaded or built it; the Searcher only reads it.
    - Every document is scored, including those sharing no term with the query (score 0.0).
    - Ties on score are broken by document id ascending, so results are reproducible.
    """

    def __init__(self, index: Index):
        self.index = index
        self.ranker = Ranker(index)

    def search(self, query: str, topk: Optional[int] = None) -> List[Tuple[str, float]]:
        """
        Execute a ranked query.

        Returns:
            list[(doc_id, score)] sorted by score desc, then doc_id asc.
            The full corpus unless `topk` is given.

        Raises:
            ValueError if `topk` is given and is not a positive integer.
        """
        if topk is not None and topk < 1:
            raise ValueError(f"topk must be a positive integer, got {topk}")

        q_terms = tokenize(query)

        # one IDF per distinct query term
        idfs = {term: self.ranker.idf(term) for term in set(q_terms)}
        scores = [
            (doc_id, sum((tf(term, table) * idfs[term] for term in q_terms), 0.0))
            for doc_id, table in self.index.items()
        ]
        scores.sort(key=lambda x: (-x[1], x[0]))
        return scores if topk is None else scores[:topk]


def search(index: Index, query: str, topk: Optional[int] = None) -> List[Tuple[str, float]]:
    """One-shot query without keeping a Searcher around."""
    return Searcher(index).search(query, topk=topk)
