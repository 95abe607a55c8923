"""
Module: render.renderer

Purpose:
    Builds a nested paragraph/run tree from a flat instruction stream.
    Tracks the active paragraph, the sub-paragraph opened by the last
    line break and a stack of open containers, and applies character
    and paragraph styles at fixed points of that lifecycle.

Key Classes:
    - Renderer: Incremental tree builder over an InstructionDocument

Dependencies:
    - render.backend: OutputBackend, Container
    - render.styles: StylePhase and style protocols
    - dib.bitmap.DIBitmap (TYPE_CHECKING only)

Used By:
    - Instruction producers (control-word parsers) via render actions
"""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING, Any, List, Optional

from richtext_toolkit.core.errors import FormatError, StructuralError

from .backend import Container
from .config import RendererConfig
from .document import InstructionDocument
from .styles import CharacterStyle, ParagraphStyle, StylePhase

if TYPE_CHECKING:
    from richtext_toolkit.dib.bitmap import DIBitmap

logger = logging.getLogger(__name__)


class Renderer:
    """
    Paragraph tree builder.

    Content is routed to the innermost open container, else the active
    sub-paragraph, else the active paragraph; a paragraph is started on
    demand. build_dom() replays the document's instructions once and
    caches the resulting list of paragraph nodes.

    Attributes:
        doc: Document owning the instructions and the backend
        config: Tag names and placeholder texts

    Example:
        >>> doc = InstructionDocument()
        >>> doc.add_text("Hello")
        >>> doc.add_action(lambda r: r.line_break())
        >>> doc.add_text("world")
        >>> nodes = Renderer(doc).build_dom()
        >>> len(nodes)
        1
    """

    def __init__(self, doc: InstructionDocument, config: Optional[RendererConfig] = None) -> None:
        self.doc = doc
        self.config = config or RendererConfig()
        self._dom: List[Any] = []
        self._built = False

        self._cur_chp: Optional[CharacterStyle] = None
        self._cur_pap: Optional[ParagraphStyle] = None
        self._cur_par: Any = None
        self._cur_subpar: Any = None
        self._containers: List[Container] = []

    @property
    def backend(self):
        return self.doc.backend

    @property
    def dom(self) -> List[Any]:
        """Root sequence of paragraph nodes built so far."""
        return self._dom

    @property
    def container_depth(self) -> int:
        return len(self._containers)

    # ─────────────────────────────────────────────────────────────────────────
    # Containers
    # ─────────────────────────────────────────────────────────────────────────

    def push_container(self, container: Container) -> None:
        """
        Attach ``container.element`` to the current scope and open it.

        Content appended afterwards goes to ``container.content`` until
        the matching pop_container().
        """
        if self._cur_par is None:
            self.start_par()
        self.backend.append_child(self._current_scope(), container.element)
        self._containers.append(container)

    def pop_container(self) -> Container:
        """
        Close the innermost container.

        Raises:
            StructuralError: If no container is open
        """
        if not self._containers:
            raise StructuralError("No container on rendering stack")
        return self._containers.pop()

    def _current_scope(self) -> Any:
        if self._containers:
            return self._containers[-1].content
        if self._cur_subpar is not None:
            return self._cur_subpar
        return self._cur_par

    # ─────────────────────────────────────────────────────────────────────────
    # Paragraph lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def start_par(self) -> None:
        """Start a new paragraph and append it to the root sequence."""
        par = self.backend.create_element(self.config.paragraph_tag)
        if self._cur_pap is not None:
            self._cur_pap.apply(self.doc, par, self._cur_chp, StylePhase.INITIAL)
            self._cur_pap.apply(self.doc, par, self._cur_chp, StylePhase.FINAL)
        self._cur_par = par
        self._cur_subpar = None
        self._containers = []
        self._dom.append(par)

    def line_break(self) -> None:
        """Start a new sub-paragraph inside the active paragraph."""
        self._append_to_par(None, new_subpar=True)

    def _append_to_par(self, element: Any, new_subpar: bool = False) -> None:
        if self._cur_par is None:
            self.start_par()

        backend = self.backend
        if new_subpar:
            if self._cur_subpar is None:
                # Group everything before the first break
                wrapper = backend.create_element(self.config.paragraph_tag)
                for child in list(backend.children(self._cur_par)):
                    backend.remove_child(self._cur_par, child)
                    backend.append_child(wrapper, child)
                backend.append_child(self._cur_par, wrapper)

            subpar = backend.create_element(self.config.paragraph_tag)
            if element is not None:
                backend.append_child(subpar, element)
            if self._cur_pap is not None:
                self._cur_pap.apply(self.doc, subpar, self._cur_chp, StylePhase.FINAL)
            self._cur_subpar = subpar
            backend.append_child(self._cur_par, subpar)
        elif element is not None:
            backend.append_child(self._current_scope(), element)

    def append_element(self, element: Any) -> None:
        self._append_to_par(element)

    # ─────────────────────────────────────────────────────────────────────────
    # Styles
    # ─────────────────────────────────────────────────────────────────────────

    def set_chp(self, chp: Optional[CharacterStyle]) -> None:
        self._cur_chp = chp

    def set_pap(self, pap: Optional[ParagraphStyle]) -> None:
        """
        Replace the paragraph style and apply it to the open paragraph.

        With a sub-paragraph open only the FINAL phase is applied to it;
        otherwise both phases are applied to the paragraph itself.
        """
        self._cur_pap = pap
        if pap is None:
            return
        if self._cur_subpar is not None:
            pap.apply(self.doc, self._cur_subpar, None, StylePhase.FINAL)
        elif self._cur_par is not None:
            pap.apply(self.doc, self._cur_par, None, StylePhase.INITIAL)
            pap.apply(self.doc, self._cur_par, None, StylePhase.FINAL)

    # ─────────────────────────────────────────────────────────────────────────
    # Element builders
    # ─────────────────────────────────────────────────────────────────────────

    def _text_element(self, text: str, chp: Optional[CharacterStyle] = None) -> Any:
        span = self.backend.create_element(self.config.span_tag)
        if chp is not None:
            chp.apply(self.doc, span)
        self.backend.set_text(span, text)
        return span

    def build_hyperlink_element(self, url: str) -> Any:
        return self.backend.create_element(self.config.link_tag, {"href": url})

    def build_rendered_picture(self, element: Any) -> Any:
        """Return ``element``, or a failure placeholder when it is None."""
        if element is None:
            return self._text_element(self.config.failed_image_text)
        return element

    def rendered_picture(self, element: Any) -> None:
        self._append_to_par(self.build_rendered_picture(element))

    def build_picture(self, mime: Optional[str], data: Optional[bytes]) -> Any:
        """
        Build an image element for raw picture bytes.

        Args:
            mime: MIME type of ``data``
            data: Encoded image bytes, or None when the picture type
                could not be converted

        Returns:
            Image element with a data URI, or a bracketed text
            placeholder naming the MIME type
        """
        if data is not None:
            encoded = base64.b64encode(data).decode("ascii")
            return self.backend.create_element(
                self.config.image_tag, {"src": f"data:{mime};base64,{encoded}"}
            )
        return self._text_element(f"[{mime}]" if mime else self.config.unsupported_image_text)

    def picture(self, mime: Optional[str], data: Optional[bytes]) -> None:
        self._append_to_par(self.build_picture(mime, data))

    def embed_bitmap(self, bitmap: DIBitmap) -> None:
        """
        Append a decoded DIB as an image element.

        A bitmap whose segments cannot be read is logged and replaced by
        the failed-render placeholder; the rest of the tree is unaffected.
        """
        try:
            uri = bitmap.extract()
        except FormatError as exc:
            logger.warning(f"Could not extract embedded bitmap: {exc}")
            element = None
        else:
            element = self.backend.create_element(
                self.config.image_tag,
                {"src": uri, "width": bitmap.width, "height": bitmap.height},
            )
        self.rendered_picture(element)

    # ─────────────────────────────────────────────────────────────────────────
    # Instruction replay
    # ─────────────────────────────────────────────────────────────────────────

    def build_dom(self) -> List[Any]:
        """
        Replay the document's instructions and return the root sequence.

        Text instructions become styled spans; action instructions are
        called with this renderer. The result is cached: later calls
        return the same list without replaying anything.

        The first call starts from an empty tree: styles, the container
        stack and any paragraphs built by direct calls beforehand are
        discarded, so the result reflects the instructions alone.

        Raises:
            StructuralError: Propagated from unbalanced container pops
        """
        if self._built:
            return self._dom

        self._built = True
        self._dom = []
        self._cur_chp = None
        self._cur_pap = None
        self._cur_par = None
        self._cur_subpar = None
        self._containers = []

        for ins in self.doc.instructions:
            if isinstance(ins, str):
                self._append_to_par(self._text_element(ins, self._cur_chp))
            else:
                ins(self)

        logger.debug(f"Built {len(self._dom)} paragraphs from {len(self.doc.instructions)} instructions")
        return self._dom
