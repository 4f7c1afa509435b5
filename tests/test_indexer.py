# tests/test_indexer.py
import pytest
from docsearch.indexer import Indexer, build_index, build_tf
from docsearch.model import Index, TermFreqTable

DOCS = [
    ("doc1", "the cat sat on the mat"),
    ("doc2", "the dog ran"),
    ("doc3", "Cat, CAT and cat!"),
    ("empty", "   "),
]


def test_build_tf_counts_terms():
    table = build_tf("the cat sat on the mat")
    assert table == {"THE": 2, "CAT": 1, "SAT": 1, "ON": 1, "MAT": 1}
    assert table.total() == 6


def test_build_tf_case_folds_and_keeps_punctuation():
    table = build_tf("Cat, CAT and cat!")
    assert table.count("CAT") == 3
    assert table.count(",") == 1
    assert table.count("!") == 1


def test_build_index_covers_every_document():
    index = build_index(DOCS)
    assert isinstance(index, Index)
    assert set(index) == {"doc1", "doc2", "doc3", "empty"}
    assert index["doc2"] == {"THE": 1, "DOG": 1, "RAN": 1}


def test_zero_token_document_gets_empty_table():
    index = build_index(DOCS)
    assert isinstance(index["empty"], TermFreqTable)
    assert len(index["empty"]) == 0


def test_insertion_order_does_not_matter():
    assert build_index(DOCS) == build_index(list(reversed(DOCS)))


def test_duplicate_doc_id_rejected():
    with pytest.raises(ValueError):
        build_index([("a", "x"), ("a", "y")])


def test_empty_corpus():
    assert len(build_index([])) == 0


def test_parallel_build_matches_serial():
    docs = [(f"doc{i}", f"term{i % 3} shared {i}") for i in range(20)]
    serial = Indexer().build_index(docs)
    parallel = Indexer(workers=2).build_index(docs)
    assert parallel == serial


def test_reused_indexer_builds_only_the_new_batch():
    indexer = Indexer()
    indexer.build_index([("a", "cat")])
    index = indexer.build_index([("b", "dog")])
    assert list(index) == ["b"]


def test_failed_batch_leaves_nothing_behind():
    indexer = Indexer()
    with pytest.raises(ValueError):
        indexer.build_index([("a", "x"), ("a", "y")])
    index = indexer.build_index([("c", "z")])
    assert list(index) == ["c"]


def test_reused_parallel_indexer_builds_only_the_new_batch():
    indexer = Indexer(workers=2)
    indexer.build_index([("a", "cat"), ("b", "dog")])
    index = indexer.build_index([("c", "bird")])
    assert list(index) == ["c"]
