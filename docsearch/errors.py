"""
docsearch/errors.py

Failures the engine reports to its callers.

    ReadFailure   - a document could not be turned into text (skipped by the walker)
    EncodeFailure - the index could not be written (save aborted)
    DecodeFailure - the persisted index is unreadable or malformed (load aborted)
"""


class DocSearchError(Exception):
    """Base class; carries the offending path and a human readable reason."""

    def __init__(self, path, reason):
        self.path = str(path) if path is not None else "<memory>"
        self.reason = str(reason)
        super().__init__(f"{self.path}: {self.reason}")


class ReadFailure(DocSearchError):
    pass


class EncodeFailure(DocSearchError):
    pass


class DecodeFailure(DocSearchError):
    pass
