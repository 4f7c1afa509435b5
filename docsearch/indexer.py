"""
docsearch/indexer.py

Builds the forward index: document id -> {term: count}.

Each document is tokenized exactly once into its own TermFreqTable. The
tables are independent, so with workers > 1 the tokenization is farmed out
to a process pool and the parent only does the final merge into the Index.
"""

from __future__ import annotations
from collections import defaultdict
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, List, Tuple

from docsearch.lexer import Lexer
from docsearch.model import Index, TermFreqTable

# documents per task handed to a worker process
CHUNK_SIZE = 64


def build_tf(text: str) -> TermFreqTable:
    """Tokenize `text` and count every Term."""
    counts = defaultdict(int)
    for term in Lexer(text):
        counts[term] += 1
    return TermFreqTable(counts)


def _worker_build_tf(text: str) -> Dict[str, int]:
    # plain dict crosses the process boundary; the parent wraps it again
    return build_tf(text).to_dict()


class Indexer:
    """
    Batch index builder.

    Feed it (doc_id, text) pairs from a text source; documents that could
    not be read must simply not appear in the stream. Every build_index()
    call starts from an empty table set, so an Indexer can be reused and a
    failed batch leaves nothing behind.

        indexer = Indexer()
        index = indexer.build_index(iter_documents("docs/"))
    """

    def __init__(self, workers: int = 1):
        self.workers = max(1, int(workers))

    @staticmethod
    def add(tables: Dict[str, TermFreqTable], doc_id, table: TermFreqTable):
        doc_id = str(doc_id)
        if doc_id in tables:
            raise ValueError(f"duplicate document id: {doc_id}")
        tables[doc_id] = table

    def build_index(self, documents: Iterable[Tuple[str, str]]) -> Index:
        """
        Construct the Index from (doc_id, text) pairs.

        Returns:
            Index covering exactly the supplied documents
        """
        tables: Dict[str, TermFreqTable] = {}
        if self.workers == 1:
            for doc_id, text in documents:
                self.add(tables, doc_id, build_tf(text))
        else:
            self._build_parallel(documents, tables)

        index = Index(tables)
        print(f"[Indexer] Indexed {len(index)} documents")
        return index

    def _build_parallel(self, documents: Iterable[Tuple[str, str]], tables: Dict[str, TermFreqTable]):
        pairs: List[Tuple[str, str]] = list(documents)
        doc_ids = [doc_id for doc_id, _ in pairs]
        texts = [text for _, text in pairs]

        with ProcessPoolExecutor(max_workers=self.workers) as ex:
            # map() keeps input order, so results line up with doc_ids
            results = ex.map(_worker_build_tf, texts, chunksize=CHUNK_SIZE)
            for doc_id, counts in zip(doc_ids, results):
                self.add(tables, doc_id, TermFreqTable(counts))


def build_index(documents: Iterable[Tuple[str, str]], workers: int = 1) -> Index:
    """Convenience wrapper: a fresh Indexer per batch build."""
    return Indexer(workers=workers).build_index(documents)
