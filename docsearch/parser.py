import os
import sys
import html
import xml.etree.ElementTree as ET
from typing import Iterator, Tuple

from bs4 import BeautifulSoup
from ftfy import fix_text

from docsearch.errors import ReadFailure

XML_SUFFIXES = (".xml", ".xhtml")
HTML_SUFFIXES = (".html", ".htm")


class Parser:
    """
    Turns files on disk into plain text for the indexer.

    What it does:
    - XML / XHTML: every run of character data, joined by single spaces
    - HTML: visible text via BeautifulSoup (html.parser), joined by spaces
    - anything else: read as UTF-8 text, HTML entities unescaped
    - Fixes mojibake with ftfy in all three cases

    Methods:
        extract_text(path) -> str            raises ReadFailure
        iter_docs(root) -> (doc_id, text)    skips (and reports) unreadable files
    """

    def extract_text(self, path: str) -> str:
        lower = path.lower()
        if lower.endswith(XML_SUFFIXES):
            text = self._parse_xml(path)
        elif lower.endswith(HTML_SUFFIXES):
            text = self._parse_html(path)
        else:
            text = html.unescape(self._read_text(path))
        return fix_text(text)

    def _read_text(self, path: str) -> str:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise ReadFailure(path, f"not valid UTF-8: {e}") from e
        except OSError as e:
            raise ReadFailure(path, f"could not open file: {e}") from e

    def _parse_xml(self, path: str) -> str:
        try:
            tree = ET.parse(path)
        except ET.ParseError as e:
            # str(e) already carries "line L, column C"
            raise ReadFailure(path, f"malformed XML: {e}") from e
        except OSError as e:
            raise ReadFailure(path, f"could not open file: {e}") from e
        return " ".join(tree.getroot().itertext())

    def _parse_html(self, path: str) -> str:
        soup = BeautifulSoup(self._read_text(path), "html.parser")
        return soup.get_text(" ")

    def iter_docs(self, root: str) -> Iterator[Tuple[str, str]]:
        """
        Walk `root` recursively and yield (doc_id, text) per readable file.

        - Dot-files and dot-directories are ignored.
        - Files and directories are visited in sorted order.
        - A file that fails to read is reported on stderr and skipped;
          only an unreadable `root` itself is fatal (ReadFailure).
        """
        try:
            entries = sorted(os.scandir(root), key=lambda e: e.name)
        except OSError as e:
            raise ReadFailure(root, f"could not open directory for indexing: {e}") from e
        yield from self._walk_entries(entries)

    def _walk_entries(self, entries) -> Iterator[Tuple[str, str]]:
        for entry in entries:
            if entry.name.startswith("."):
                continue

            try:
                is_dir = entry.is_dir()
            except OSError as e:
                print(f"ERROR: could not determine type of file {entry.path}: {e}", file=sys.stderr)
                continue

            if is_dir:
                try:
                    children = sorted(os.scandir(entry.path), key=lambda e: e.name)
                except OSError as e:
                    print(f"ERROR: could not open directory {entry.path} for indexing: {e}",
                          file=sys.stderr)
                    continue
                yield from self._walk_entries(children)
                continue

            print(f"Indexing {entry.path}")
            try:
                text = self.extract_text(entry.path)
            except ReadFailure as e:
                print(f"ERROR: {e}", file=sys.stderr)
                continue
            yield entry.path, text


def extract_text(path: str) -> str:
    return Parser().extract_text(path)


def iter_documents(root: str) -> Iterator[Tuple[str, str]]:
    return Parser().iter_docs(root)
