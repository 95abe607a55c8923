"""
Module: core.errors

Purpose:
    Exception hierarchy shared by the DIB decoder and the tree builder.

Key Classes:
    - RichTextError: Base class for every error raised by this package
    - FormatError: Malformed or truncated binary data
    - StructuralError: Contract violation in an instruction stream

Used By:
    - core.cursor: Out-of-range reads and seeks
    - dib: Propagated unchanged from header decoding and extraction
    - render.renderer: Unbalanced container pops
"""


class RichTextError(Exception):
    """Base error for the rich-text toolkit."""
    pass


class FormatError(RichTextError):
    """Binary data is malformed or truncated."""
    pass


class StructuralError(RichTextError):
    """Instruction stream violated the builder's stack discipline."""
    pass
