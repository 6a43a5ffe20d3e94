"""
Construction of new, detached declaration nodes from textual templates.
"""

from __future__ import annotations

import logging
from string import Template
from typing import Callable

from .model import SyntaxNode
from .views import ClassDeclaration
from ..errors import StructuralAssumptionViolation

logger = logging.getLogger(__name__)

# Scratch class the template text is parsed inside of
_SCRATCH_NAME = "__SummerScratch"


class NodeFactory:
    """
    Turns a template plus substitution values into a detached declaration.

    The text is parsed as the only member of a scratch class body, which
    yields exactly the node shape a member of a real class body has.
    """

    def __init__(self, parse: Callable[[str], SyntaxNode]):
        self._parse = parse

    @classmethod
    def for_kotlin(cls) -> NodeFactory:
        from .kotlin import parse_kotlin
        return cls(parse_kotlin)

    def create_declaration(self, template: str, **values: str) -> SyntaxNode:
        text = Template(template).substitute(values)
        scratch = self._parse(f"class {_SCRATCH_NAME} {{\n{text}\n}}\n")

        holder = None
        for child in scratch.children:
            cls = ClassDeclaration.match(child)
            if cls is not None and cls.name == _SCRATCH_NAME:
                holder = cls
                break
        body = holder.body if holder is not None else None
        if body is None:
            raise StructuralAssumptionViolation(f"Cannot parse declaration template: {text!r}")

        members = body.members
        if len(members) != 1:
            raise StructuralAssumptionViolation(
                f"Template must produce exactly one declaration, got {len(members)}: {text!r}"
            )

        logger.debug("Created %s from template: %s", members[0].kind.name, text)
        return members[0].detach()


__all__ = ["NodeFactory"]
