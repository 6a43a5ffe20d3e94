"""
Locating the proxy object's body inside the presenter class of a file.

Every step scans a fixed structural region in document order and takes the
first match. Nothing here mutates the tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import NoPresenterClass, NoProxyProperty, StructuralAssumptionViolation
from ..tree.model import SyntaxNode
from ..tree.views import ClassBody, ClassDeclaration, PropertyDeclaration

logger = logging.getLogger(__name__)

DEFAULT_PRESENTER_MARKER = "Presenter"
DEFAULT_PROXY_PROPERTY = "viewStateProxy"


@dataclass(frozen=True)
class ProxyTarget:
    """Body to receive the mirrored property, plus the property's name."""
    body: ClassBody
    property_name: str


def find_presenter_class(file: SyntaxNode, marker: str = DEFAULT_PRESENTER_MARKER) -> ClassDeclaration:
    """First top-level class whose name contains ``marker``."""
    for child in file.children:
        cls = ClassDeclaration.match(child)
        if cls is not None and cls.name is not None and marker in cls.name:
            return cls
    raise NoPresenterClass(marker)


def find_proxy_property(presenter: ClassDeclaration,
                        property_name: str = DEFAULT_PROXY_PROPERTY) -> PropertyDeclaration:
    body = presenter.body
    if body is None:
        raise StructuralAssumptionViolation(f"Class '{presenter.name}' has no body")
    for prop in body.properties:
        if prop.name == property_name:
            return prop
    raise NoProxyProperty(presenter.name or "", property_name)


def find_proxy_body(proxy: PropertyDeclaration) -> ClassBody:
    literal = proxy.initializer
    if literal is None:
        raise StructuralAssumptionViolation(
            f"Property '{proxy.name}' is not initialized with an object expression"
        )
    body = literal.body
    if body is None:
        raise StructuralAssumptionViolation(f"Object expression of '{proxy.name}' has no body")
    return body


def locate_targets(file: SyntaxNode,
                   property_name: str,
                   *,
                   presenter_marker: str = DEFAULT_PRESENTER_MARKER,
                   proxy_property: str = DEFAULT_PROXY_PROPERTY) -> ProxyTarget:
    """
    Resolve the body of the object assigned to the presenter's proxy property.

    Raises:
        NoPresenterClass: no class name contains ``presenter_marker``
        NoProxyProperty: presenter declares no ``proxy_property``
        StructuralAssumptionViolation: body/initializer shape is not the expected one
    """
    presenter = find_presenter_class(file, presenter_marker)
    logger.debug("Presenter class: %s", presenter.name)
    proxy = find_proxy_property(presenter, proxy_property)
    body = find_proxy_body(proxy)
    return ProxyTarget(body=body, property_name=property_name)


__all__ = [
    "ProxyTarget",
    "locate_targets",
    "find_presenter_class",
    "find_proxy_property",
    "find_proxy_body",
    "DEFAULT_PRESENTER_MARKER",
    "DEFAULT_PROXY_PROPERTY",
]
