"""Structured text documents that render to markdown or plain text."""

from __future__ import annotations

import copy
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from lspkit.chars import is_space
from lspkit.escape import (
    canonicalize_spaces,
    choose_marker,
    get_marker_for_code_block,
    indent_lines,
    render_inline_block,
    render_text,
)

_WHITESPACE = " \t\n\v\f\r"
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_PLAIN_MARKERS = ("`", "'", '"')


class Block(ABC):
    """Text that knows how to lay itself out, including its trailing newlines."""

    @abstractmethod
    def render_markdown(self) -> str:
        """Return the markdown form of the block."""

    @abstractmethod
    def render_plain_text(self) -> str:
        """Return the plain-text form of the block."""

    def as_markdown(self) -> str:
        """Markdown form without surrounding whitespace."""
        return self.render_markdown().strip(_WHITESPACE)

    def as_plain_text(self) -> str:
        """Plain-text form without surrounding whitespace."""
        return self.render_plain_text().strip(_WHITESPACE)

    def is_ruler(self) -> bool:
        """True for horizontal separators."""
        return False


class _ChunkKind(Enum):
    PLAIN_TEXT = "plain"
    INLINE_CODE = "code"


@dataclass
class _Chunk:
    kind: _ChunkKind
    contents: str
    preserve: bool = False
    space_before: bool = False
    space_after: bool = False


class Paragraph(Block):
    """A run of plain text and inline code rendered as one line."""

    def __init__(self) -> None:
        self._chunks: list[_Chunk] = []

    def append_text(self, text: str) -> Paragraph:
        """Append plain text; whitespace is normalised to single spaces."""
        norm = canonicalize_spaces(text)
        if not norm:
            return self
        self._chunks.append(
            _Chunk(
                kind=_ChunkKind.PLAIN_TEXT,
                contents=norm,
                space_before=is_space(text[0]),
                space_after=is_space(text[-1]),
            )
        )
        return self

    def append_code(self, code: str, preserve: bool = False) -> Paragraph:
        """Append inline code; ``preserve`` keeps it marked in plain text too."""
        adjacent_code = bool(self._chunks) and self._chunks[-1].kind is _ChunkKind.INLINE_CODE
        norm = canonicalize_spaces(code)
        if not norm:
            return self
        # Markdown cannot render two code spans without a space between them.
        self._chunks.append(
            _Chunk(
                kind=_ChunkKind.INLINE_CODE,
                contents=norm,
                preserve=preserve,
                space_before=adjacent_code,
            )
        )
        return self

    def append_space(self) -> Paragraph:
        """Ensure a space after the last chunk; no effect on an empty paragraph."""
        if self._chunks:
            self._chunks[-1].space_after = True
        return self

    def render_markdown(self) -> str:
        parts: list[str] = []
        needs_space = False
        for chunk in self._chunks:
            if chunk.space_before or needs_space:
                parts.append(" ")
            if chunk.kind is _ChunkKind.PLAIN_TEXT:
                parts.append(render_text(chunk.contents, not parts))
            else:
                parts.append(render_inline_block(chunk.contents))
            needs_space = chunk.space_after
        # A paragraph is one markdown line; two trailing spaces force a break.
        parts.append("  \n")
        return "".join(parts)

    def render_plain_text(self) -> str:
        parts: list[str] = []
        needs_space = False
        for chunk in self._chunks:
            if chunk.space_before or needs_space:
                parts.append(" ")
            marker = ""
            if chunk.preserve and chunk.kind is _ChunkKind.INLINE_CODE:
                marker = choose_marker(_PLAIN_MARKERS, chunk.contents)
            parts.append(f"{marker}{chunk.contents}{marker}")
            needs_space = chunk.space_after
        parts.append("\n")
        return "".join(parts)


class Heading(Paragraph):
    """A paragraph prefixed with ``level`` hash marks in markdown."""

    def __init__(self, level: int) -> None:
        if level <= 0:
            raise ValueError(f"heading level must be positive: {level}")
        super().__init__()
        self.level = level

    def render_markdown(self) -> str:
        return "#" * self.level + " " + super().render_markdown()


class Ruler(Block):
    """A horizontal separator between blocks."""

    def render_markdown(self) -> str:
        # The leading newline keeps the previous block from becoming a heading.
        return "\n---\n"

    def render_plain_text(self) -> str:
        return "\n"

    def is_ruler(self) -> bool:
        return True


class CodeBlock(Block):
    """A fenced block of code."""

    def __init__(self, contents: str, language: str = "cpp") -> None:
        self.contents = contents
        self.language = language

    def render_markdown(self) -> str:
        marker = get_marker_for_code_block(self.contents)
        return f"{marker}{self.language}\n{self.contents}\n{marker}\n"

    def render_plain_text(self) -> str:
        return f"\n{self.contents}\n\n"


class BulletList(Block):
    """A list of documents, each rendered after a "- " marker."""

    def __init__(self) -> None:
        self._items: list[Document] = []

    def add_item(self) -> Document:
        """Add an empty item and return it for filling in."""
        item = Document()
        self._items.append(item)
        return item

    def render_markdown(self) -> str:
        lines = [f"- {indent_lines(item.as_markdown())}\n" for item in self._items]
        # A blank line terminates the list in markdown.
        return "".join(lines) + "\n"

    def render_plain_text(self) -> str:
        return "".join(f"- {indent_lines(item.as_plain_text())}\n" for item in self._items)


def _render_blocks(children: Iterable[Block], render: Callable[[Block], str]) -> str:
    text = "".join(render(child) for child in children if not child.is_ruler())
    text = text.strip(_WHITESPACE)
    # At most two consecutive newlines survive.
    return _EXCESS_NEWLINES.sub("\n\n", text)


class Document:
    """Format-agnostic structured text, renderable as markdown or plain text."""

    def __init__(self) -> None:
        self._children: list[Block] = []

    def append(self, other: Document) -> None:
        """Append copies of all blocks of ``other``."""
        self._children.extend(copy.deepcopy(other._children))

    def add_paragraph(self) -> Paragraph:
        """Add a new paragraph and return it."""
        paragraph = Paragraph()
        self._children.append(paragraph)
        return paragraph

    def add_ruler(self) -> None:
        """Add a horizontal separator."""
        self._children.append(Ruler())

    def add_code_block(self, code: str, language: str = "cpp") -> None:
        """Add a fenced block of code."""
        self._children.append(CodeBlock(code, language))

    def add_heading(self, level: int) -> Paragraph:
        """Add a heading of the given positive level and return it."""
        heading = Heading(level)
        self._children.append(heading)
        return heading

    def add_bullet_list(self) -> BulletList:
        """Add an empty bullet list and return it."""
        bullets = BulletList()
        self._children.append(bullets)
        return bullets

    def as_markdown(self) -> str:
        """Markdown rendering without trailing newlines."""
        return _render_blocks(self._children, lambda block: block.render_markdown())

    def as_plain_text(self) -> str:
        """Plain-text rendering without trailing newlines."""
        return _render_blocks(self._children, lambda block: block.render_plain_text())