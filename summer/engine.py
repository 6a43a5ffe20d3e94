"""
Main processing pipeline: load a file, find the element under the caret,
offer or run intentions on it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .config import load_config
from .document import EditorDocument
from .errors import SummerUserError
from .intentions import BaseIntention, IntentionOutcome, get_intentions_for_path, list_intentions
from .report_schema import ApplyReport, AvailabilityReport, IntentionInfo, IntentionsList
from .tree.model import SyntaxNode
from .types import Caret, RunOptions

logger = logging.getLogger(__name__)


def describe_intention(cls: type[BaseIntention]) -> IntentionInfo:
    return IntentionInfo(
        name=cls.name,
        text=cls.text,
        family_name=cls.family_name,
        priority=cls.priority.value,
        extensions=sorted(cls.extensions),
    )


def apply_intention(document: EditorDocument, intention: BaseIntention, node: SyntaxNode) -> IntentionOutcome:
    """Invoke ``intention`` the way the host does: inside a write action when it asks for one."""
    if not intention.start_in_write_action:
        return intention.invoke(document, node)
    with document.write_action():
        return intention.invoke(document, node)


class Engine:
    """
    Coordinates one run over one file.

    Manages interaction between components:
    - config loading and intention binding
    - EditorDocument for parsing and caret lookup
    - the intention pipeline for availability and invocation
    """

    def __init__(self, path: Path, options: RunOptions):
        self.options = options
        self.root = Path.cwd().resolve()
        self.path = path
        self.raw_cfg = load_config(self.root, options.config_path)
        self.document = EditorDocument.load(path)
        self.intentions = self._bind_intentions()

    def _bind_intentions(self) -> List[BaseIntention]:
        classes = get_intentions_for_path(self.path)
        if self.options.intention is not None:
            classes = [cls for cls in classes if cls.name == self.options.intention]
            if not classes:
                raise SummerUserError(
                    f"Intention '{self.options.intention}' is not available for {self.path.suffix or 'this'} files"
                )
        return [cls.bind(self.raw_cfg.get(cls.name)) for cls in classes]

    def caret_offset(self, caret: Caret) -> int:
        if caret.offset is not None:
            return caret.offset
        if caret.line is None or caret.column is None:
            raise SummerUserError("Caret position is required")
        return self.document.offset_of(caret.line, caret.column)

    def element_at(self, caret: Caret) -> Tuple[int, Optional[SyntaxNode]]:
        offset = self.caret_offset(caret)
        return offset, self.document.node_at(offset)

    def available(self, node: Optional[SyntaxNode]) -> List[BaseIntention]:
        return [i for i in self.intentions if i.is_available(self.document, node)]

    def check(self, caret: Caret) -> AvailabilityReport:
        offset, node = self.element_at(caret)
        return AvailabilityReport(
            file=self.document.label,
            offset=offset,
            element=node.text if node is not None else None,
            intentions=[describe_intention(type(i)) for i in self.available(node)],
        )

    def apply(self, caret: Caret) -> ApplyReport:
        offset, node = self.element_at(caret)
        candidates = self.available(node)
        if node is None or not candidates:
            logger.info("%s: nothing to do at offset %d", self.document.label, offset)
            return ApplyReport(
                file=self.document.label,
                offset=offset,
                outcome=IntentionOutcome.NOT_APPLICABLE.value,
            )

        intention = candidates[0]
        outcome = apply_intention(self.document, intention, node)

        written = False
        if outcome.changed and not self.options.dry_run:
            self.document.save()
            written = True

        return ApplyReport(
            file=self.document.label,
            offset=offset,
            intention=intention.name,
            outcome=outcome.value,
            property=node.text,
            changed=outcome.changed,
            written=written,
        )


def run_check(path: Path, caret: Caret, options: RunOptions) -> AvailabilityReport:
    return Engine(path, options).check(caret)


def run_apply(path: Path, caret: Caret, options: RunOptions) -> ApplyReport:
    return Engine(path, options).apply(caret)


def run_render(path: Path, caret: Caret, options: RunOptions) -> str:
    """Apply without writing; return the resulting text."""
    engine = Engine(path, RunOptions(config_path=options.config_path, intention=options.intention, dry_run=True))
    engine.apply(caret)
    return engine.document.text


def run_list() -> IntentionsList:
    return IntentionsList(intentions=[describe_intention(cls) for cls in list_intentions()])


__all__ = ["Engine", "apply_intention", "run_check", "run_apply", "run_render", "run_list"]
