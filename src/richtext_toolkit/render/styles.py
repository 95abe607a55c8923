"""
Module: render.styles

Purpose:
    Style hooks applied by the renderer. Computing character and
    paragraph formatting belongs to the instruction producer; this module
    only defines when and how a computed style is applied to a node.

Key Classes:
    - StylePhase: INITIAL (outer chrome) or FINAL (content attributes)
    - CharacterStyle / ParagraphStyle: Protocols the renderer calls
    - AttributeCharacterStyle / AttributeParagraphStyle: Styles that set
      fixed attributes through the document's backend

Used By:
    - render.renderer.Renderer
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from .document import InstructionDocument


class StylePhase(str, Enum):
    """Moment at which a paragraph style is applied."""
    INITIAL = "initial"  # paragraph start: spacing, borders
    FINAL = "final"      # content boundary: alignment, indents

    def __str__(self) -> str:
        return self.value


class CharacterStyle(Protocol):
    def apply(self, doc: InstructionDocument, node: Any) -> None: ...


class ParagraphStyle(Protocol):
    def apply(
        self,
        doc: InstructionDocument,
        node: Any,
        chp: Optional[CharacterStyle],
        phase: StylePhase,
    ) -> None: ...


class AttributeCharacterStyle:
    """Character style that sets a fixed attribute map on each run."""

    def __init__(self, attrs: Mapping[str, Any]) -> None:
        self.attrs: Dict[str, Any] = dict(attrs)

    def apply(self, doc: InstructionDocument, node: Any) -> None:
        for name, value in self.attrs.items():
            doc.backend.set_attribute(node, name, value)


class AttributeParagraphStyle:
    """
    Paragraph style with separate attribute maps per phase.

    Example:
        >>> pap = AttributeParagraphStyle(
        ...     initial_attrs={"data-space-before": 12},
        ...     final_attrs={"align": "center"},
        ... )
    """

    def __init__(
        self,
        initial_attrs: Optional[Mapping[str, Any]] = None,
        final_attrs: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.initial_attrs: Dict[str, Any] = dict(initial_attrs or {})
        self.final_attrs: Dict[str, Any] = dict(final_attrs or {})

    def apply(
        self,
        doc: InstructionDocument,
        node: Any,
        chp: Optional[CharacterStyle],
        phase: StylePhase,
    ) -> None:
        attrs = self.initial_attrs if phase is StylePhase.INITIAL else self.final_attrs
        for name, value in attrs.items():
            doc.backend.set_attribute(node, name, value)
