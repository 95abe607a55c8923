"""
Module: render.config

Purpose:
    Configuration dataclass for the tree builder. Provides the element
    names and placeholder texts the renderer emits.

Key Classes:
    - RendererConfig: Tags and placeholder strings

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - render.renderer.Renderer
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RendererConfig:
    """
    Configuration for the paragraph tree builder.

    Attributes:
        paragraph_tag: Element for paragraphs and sub-paragraphs (default "div")
        span_tag: Element wrapping each text run (default "span")
        image_tag: Element for embedded pictures (default "img")
        link_tag: Element for hyperlinks (default "a")
        failed_image_text: Placeholder for images that failed to render
        unsupported_image_text: Placeholder for pictures without data
            and without a known MIME type
    """
    paragraph_tag: str = "div"
    span_tag: str = "span"
    image_tag: str = "img"
    link_tag: str = "a"
    failed_image_text: str = "[failed to render image]"
    unsupported_image_text: str = "[image type not supported]"
