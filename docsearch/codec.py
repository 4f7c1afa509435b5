"""
docsearch/codec.py

Persists the Index as a JSON document:

    {
        "docs/a.xml": {"THE": 2, "CAT": 1},
        "docs/b.xml": {"DOG": 1}
    }

encode()/decode() work on bytes and own the logical schema.
save_index()/load_index() add the file handling: the encoded bytes go to a
temporary file next to the destination and are renamed over it only once
they are fully on disk, so a half-written index never replaces a good one.
"""

import json
import os
import tempfile

from docsearch.errors import DecodeFailure, EncodeFailure
from docsearch.lexer import normalize
from docsearch.model import Index, TermFreqTable


def encode(index: Index) -> bytes:
    """Serialize `index` to UTF-8 JSON bytes (keys sorted for stable diffs)."""
    return json.dumps(index.to_dict(), ensure_ascii=False, indent=2, sort_keys=True).encode("utf-8")


def decode(data: bytes, source=None) -> Index:
    """
    Parse bytes produced by encode() back into an Index.

    Raises DecodeFailure (tagged with `source`) on anything that does not
    match the schema. A count of 0 is equivalent to an absent term and is
    dropped; negative, fractional, or boolean counts are rejected, and so
    are terms that are not in canonical (uppercased) form, since no query
    could ever match them.
    """
    try:
        raw = json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DecodeFailure(source, f"index is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise DecodeFailure(source, f"could not parse index: {e}") from e

    if not isinstance(raw, dict):
        raise DecodeFailure(source, f"expected an object at top level, got {type(raw).__name__}")

    tables = {}
    for doc_id, counts in raw.items():
        if not isinstance(counts, dict):
            raise DecodeFailure(source, f"document {doc_id!r}: expected an object of term counts, "
                                        f"got {type(counts).__name__}")
        clean = {}
        for term, freq in counts.items():
            if normalize(term) != term:
                raise DecodeFailure(source, f"document {doc_id!r}: term {term!r} is not normalized "
                                            f"(expected {normalize(term)!r})")
            # bool is an int subclass; true/false is never a valid count
            if isinstance(freq, bool) or not isinstance(freq, int):
                raise DecodeFailure(source, f"document {doc_id!r}, term {term!r}: "
                                            f"count must be an integer, got {freq!r}")
            if freq < 0:
                raise DecodeFailure(source, f"document {doc_id!r}, term {term!r}: "
                                            f"count must be non-negative, got {freq}")
            if freq:
                clean[term] = freq
        tables[doc_id] = TermFreqTable(clean)
    return Index(tables)


def save_index(index: Index, path: str):
    """
    Write `index` to `path`, replacing any previous file atomically.

    Raises EncodeFailure if anything on the way to disk fails; in that case
    the previous contents of `path` (if any) are left untouched.
    """
    print(f"[Codec] Saving {path}")
    data = encode(index)

    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile("wb", dir=directory, prefix=".index-",
                                         suffix=".tmp", delete=False) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise EncodeFailure(path, f"could not write index file: {e}") from e

    print(f"[Codec] Wrote {len(index)} documents to {path}")


def load_index(path: str) -> Index:
    """Read and decode the index at `path`; raises DecodeFailure on any problem."""
    print(f"[Codec] Reading {path}")
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise DecodeFailure(path, f"could not open index file: {e}") from e

    index = decode(data, source=path)
    print(f"[Codec] {path} contains {len(index)} documents")
    return index
