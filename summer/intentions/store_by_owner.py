"""
"storeByOwner": mirror a State property into the presenter's view-state proxy.

Given the caret on ``loading`` in

    interface State {
        val loading: Boolean
    }

the intention adds ``override val loading by owner.delegateFor("loading")`` to
the object assigned to ``viewStateProxy`` in the file's presenter class.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from string import Template
from typing import TYPE_CHECKING, Any, Dict, Optional

from .base import BaseIntention, IntentionOutcome, Priority
from .locator import DEFAULT_PRESENTER_MARKER, DEFAULT_PROXY_PROPERTY, locate_targets
from .matching import DEFAULT_STATE_CLASS, match_state_property
from .members import has_member
from .mutator import DEFAULT_INDENT_UNIT, insert
from .synthesizer import DELEGATE_TEMPLATE, build_delegated_property
from ..errors import ConfigError, NoPresenterClass, NoProxyProperty
from ..tree.model import SyntaxNode

if TYPE_CHECKING:
    from ..document import EditorDocument

logger = logging.getLogger(__name__)


@dataclass
class StoreByOwnerCfg:
    state_class: str = DEFAULT_STATE_CLASS
    presenter_marker: str = DEFAULT_PRESENTER_MARKER
    proxy_property: str = DEFAULT_PROXY_PROPERTY
    delegate_template: str = DELEGATE_TEMPLATE
    indent_unit: str = DEFAULT_INDENT_UNIT

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> StoreByOwnerCfg:
        """Load configuration from YAML dictionary."""
        if not d:
            return StoreByOwnerCfg()

        known = {f.name for f in fields(StoreByOwnerCfg)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigError(f"store_by_owner: unknown option(s): {', '.join(unknown)}")

        for key, value in d.items():
            if not isinstance(value, str) or (key != "indent_unit" and not value):
                raise ConfigError(f"store_by_owner.{key}: expected a non-empty string, got {value!r}")

        template = d.get("delegate_template", DELEGATE_TEMPLATE)
        if "$name" not in template and "${name}" not in template:
            raise ConfigError("store_by_owner.delegate_template: must reference $name")
        try:
            Template(template).substitute(name="x")
        except (KeyError, ValueError) as e:
            raise ConfigError(
                f"store_by_owner.delegate_template: $name is the only placeholder allowed "
                f"(use $$ for a literal $): {e}"
            ) from e

        return StoreByOwnerCfg(**d)


class StoreByOwnerPropertyIntention(BaseIntention[StoreByOwnerCfg]):

    name = "store_by_owner"
    extensions = {".kt"}
    text = "storeByOwner"
    family_name = "StoreByOwnerPropertyIntention"
    priority = Priority.TOP
    start_in_write_action = True

    def is_available(self, document: EditorDocument, node: Optional[SyntaxNode]) -> bool:
        return match_state_property(node, self.cfg.state_class) is not None

    def invoke(self, document: EditorDocument, node: SyntaxNode) -> IntentionOutcome:
        document.assert_write_access()

        if match_state_property(node, self.cfg.state_class) is None:
            return IntentionOutcome.NOT_APPLICABLE
        property_name = node.text

        try:
            target = locate_targets(
                node.root,
                property_name,
                presenter_marker=self.cfg.presenter_marker,
                proxy_property=self.cfg.proxy_property,
            )
        except NoPresenterClass as e:
            logger.warning("%s: %s", document.label, e)
            return IntentionOutcome.NO_PRESENTER_CLASS
        except NoProxyProperty as e:
            logger.info("%s: %s, nothing to do", document.label, e)
            return IntentionOutcome.NO_PROXY_PROPERTY

        if has_member(target.body, property_name):
            logger.info("%s: '%s' is already in %s", document.label, property_name, self.cfg.proxy_property)
            return IntentionOutcome.ALREADY_PRESENT

        member = build_delegated_property(property_name, document.factory, self.cfg.delegate_template)
        insert(target.body, member, self.cfg.indent_unit)
        logger.info("%s: added '%s' to %s", document.label, property_name, self.cfg.proxy_property)
        return IntentionOutcome.INSERTED


__all__ = ["StoreByOwnerCfg", "StoreByOwnerPropertyIntention"]
