"""
Editor document: the parsed tree of one source file plus the write-action
scope every mutation has to run in.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

from .errors import SummerUserError
from .tree.factory import NodeFactory
from .tree.model import NodeKind, SyntaxNode

logger = logging.getLogger(__name__)


class EditorDocument:
    """
    One source file with its editable tree.

    The tree is the source of truth; ``text`` is rendered from it on demand.
    """

    def __init__(self, text: str, path: Optional[Path] = None,
                 parse: Optional[Callable[[str], SyntaxNode]] = None,
                 factory: Optional[NodeFactory] = None):
        if parse is None:
            from .tree.kotlin import parse_kotlin
            parse = parse_kotlin
        self.path = path
        self.original_text = text
        self._parse = parse
        self.root: SyntaxNode = parse(text)
        self.factory = factory if factory is not None else NodeFactory(parse)
        self._lock = threading.RLock()
        self._write_depth = 0
        self._owner: Optional[int] = None

    @classmethod
    def load(cls, path: Path) -> EditorDocument:
        try:
            # newline="" keeps CRLF files byte-exact
            with path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SummerUserError(f"Cannot read {path}: {e}") from e
        return cls(text, path=path)

    @property
    def label(self) -> str:
        return self.path.as_posix() if self.path is not None else "<memory>"

    @property
    def text(self) -> str:
        return self.root.text

    @property
    def is_modified(self) -> bool:
        return self.text != self.original_text

    def save(self) -> None:
        if self.path is None:
            raise ValueError("Document has no path to save to")
        self.path.write_text(self.text, encoding="utf-8", newline="")
        self.original_text = self.text
        logger.debug("Saved %s", self.label)

    # ---- caret ----

    def offset_of(self, line: int, column: int) -> int:
        """Character offset of a 1-based line/column position."""
        if line < 1 or column < 1:
            raise SummerUserError(f"Caret position must be 1-based, got {line}:{column}")
        lines = self.text.split("\n")
        if line > len(lines):
            raise SummerUserError(f"Line {line} is past the end of {self.label} ({len(lines)} lines)")
        if column > len(lines[line - 1]) + 1:
            raise SummerUserError(f"Column {column} is past the end of line {line} in {self.label}")
        return sum(len(s) + 1 for s in lines[:line - 1]) + column - 1

    def node_at(self, offset: int) -> Optional[SyntaxNode]:
        """
        Leaf under the caret. A caret right after a word (``loading|``) selects
        that word, the way IDE caret lookup does.
        """
        if offset < 0 or offset > len(self.text):
            raise SummerUserError(f"Offset {offset} is outside {self.label}")
        leaf = self.root.leaf_at(offset)
        if (leaf is None or leaf.kind is NodeKind.WHITESPACE or leaf.kind is NodeKind.TOKEN) and offset > 0:
            before = self.root.leaf_at(offset - 1)
            if before is not None and before.kind is NodeKind.IDENTIFIER:
                return before
        return leaf

    # ---- write access ----

    @property
    def has_write_access(self) -> bool:
        return self._write_depth > 0 and self._owner == threading.get_ident()

    def assert_write_access(self) -> None:
        if not self.has_write_access:
            raise RuntimeError(f"Modification of {self.label} outside of a write action")

    @contextmanager
    def write_action(self) -> Iterator[EditorDocument]:
        """
        Exclusive mutation scope, released on every exit path.

        If the body raises, the tree is restored from the text it had when the
        outermost scope was entered, then the exception propagates.
        """
        with self._lock:
            outermost = self._write_depth == 0
            snapshot = self.text if outermost else None
            self._write_depth += 1
            self._owner = threading.get_ident()
            try:
                yield self
            except BaseException:
                if snapshot is not None and self.text != snapshot:
                    logger.warning("Rolling back partial modification of %s", self.label)
                    self.root = self._parse(snapshot)
                raise
            finally:
                self._write_depth -= 1
                if self._write_depth == 0:
                    self._owner = None


__all__ = ["EditorDocument"]
