"""
Module: render.document

Purpose:
    Owner of the flat instruction stream consumed by the renderer. A
    control-word parser fills it; the renderer replays it once.

Key Classes:
    - InstructionDocument: Backend plus ordered instructions
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Union

from .backend import ElementTreeBackend, OutputBackend

if TYPE_CHECKING:
    from .renderer import Renderer

RenderAction = Callable[["Renderer"], None]
Instruction = Union[str, RenderAction]


class InstructionDocument:
    """
    Ordered instruction list plus the backend nodes are built with.

    Each instruction is either literal text or an action called with the
    renderer as its only argument.

    Example:
        >>> doc = InstructionDocument()
        >>> doc.add_text("Hello")
        >>> doc.add_action(lambda r: r.line_break())
        >>> len(doc.instructions)
        2
    """

    def __init__(
        self,
        backend: Optional[OutputBackend] = None,
        instructions: Optional[List[Instruction]] = None,
    ) -> None:
        self.backend: OutputBackend = backend if backend is not None else ElementTreeBackend()
        self.instructions: List[Instruction] = list(instructions or [])

    def add_text(self, text: str) -> None:
        self.instructions.append(text)

    def add_action(self, action: RenderAction) -> None:
        self.instructions.append(action)

    def __len__(self) -> int:
        return len(self.instructions)
