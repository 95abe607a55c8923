"""
Module: render

Purpose:
    Tree building for rich-text documents. Replays a flat instruction
    stream into nested paragraph, sub-paragraph and container nodes
    through an injected output backend.

Key Classes:
    - Renderer: Incremental tree builder
    - InstructionDocument: Instruction stream plus backend
    - Container: Attach point / content point pair
    - ElementTreeBackend: Default in-memory backend
    - RendererConfig: Tags and placeholder texts

Dependencies:
    - xml.etree.ElementTree (std): Default backend
"""

from .backend import Container, ElementTreeBackend, OutputBackend
from .config import RendererConfig
from .document import Instruction, InstructionDocument, RenderAction
from .renderer import Renderer
from .styles import (
    AttributeCharacterStyle,
    AttributeParagraphStyle,
    CharacterStyle,
    ParagraphStyle,
    StylePhase,
)

__all__ = [
    "Container",
    "ElementTreeBackend",
    "OutputBackend",
    "RendererConfig",
    "Instruction",
    "InstructionDocument",
    "RenderAction",
    "Renderer",
    "AttributeCharacterStyle",
    "AttributeParagraphStyle",
    "CharacterStyle",
    "ParagraphStyle",
    "StylePhase",
]
