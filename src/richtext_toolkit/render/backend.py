"""
Module: render.backend

Purpose:
    Output capability seam for the tree builder. The renderer never
    touches a concrete presentation technology; it creates and attaches
    nodes through an OutputBackend. ElementTreeBackend is the in-memory
    implementation used by default and in tests.

Key Classes:
    - OutputBackend: Protocol for node construction and attachment
    - Container: Attach point / content point pair for nested scopes
    - ElementTreeBackend: OutputBackend over xml.etree.ElementTree

Dependencies:
    - xml.etree.ElementTree (std): In-memory element tree

Used By:
    - render.renderer.Renderer
    - render.styles: Attribute-setting style implementations
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Protocol


class OutputBackend(Protocol):
    """Minimal node capability required by the renderer."""

    def create_element(self, tag: str, attrs: Optional[Dict[str, Any]] = None) -> Any: ...

    def set_attribute(self, node: Any, name: str, value: Any) -> None: ...

    def set_text(self, node: Any, text: str) -> None: ...

    def append_child(self, parent: Any, child: Any) -> None: ...

    def children(self, node: Any) -> List[Any]: ...

    def remove_child(self, parent: Any, child: Any) -> None: ...


@dataclass(frozen=True, slots=True)
class Container:
    """
    Nestable scope in the output tree.

    Attributes:
        element: Node attached to the enclosing scope
        content: Node receiving children while the container is open

    Example:
        >>> frame = backend.create_element("div")
        >>> body = backend.create_element("div")
        >>> backend.append_child(frame, body)
        >>> renderer.push_container(Container(element=frame, content=body))
    """
    element: Any
    content: Any

    @classmethod
    def single(cls, node: Any) -> Container:
        """Container whose attach point and content point are the same node."""
        return cls(element=node, content=node)


class ElementTreeBackend:
    """
    OutputBackend producing xml.etree.ElementTree elements.

    Attribute values are stringified on assignment. Text is stored on the
    element's ``text``; the renderer always wraps text in its own element,
    so mixed content never needs ``tail`` handling.
    """

    def create_element(self, tag: str, attrs: Optional[Dict[str, Any]] = None) -> ET.Element:
        element = ET.Element(tag)
        for name, value in (attrs or {}).items():
            self.set_attribute(element, name, value)
        return element

    def set_attribute(self, node: ET.Element, name: str, value: Any) -> None:
        node.set(name, str(value))

    def set_text(self, node: ET.Element, text: str) -> None:
        node.text = text

    def append_child(self, parent: ET.Element, child: ET.Element) -> None:
        parent.append(child)

    def children(self, node: ET.Element) -> List[ET.Element]:
        return list(node)

    def remove_child(self, parent: ET.Element, child: ET.Element) -> None:
        parent.remove(child)

    def to_html(self, nodes: Iterable[ET.Element]) -> str:
        """Serialize a root sequence as an HTML fragment."""
        return "".join(ET.tostring(node, encoding="unicode", method="html") for node in nodes)
