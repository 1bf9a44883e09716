"""Text-document protocol types: save reasons, marked strings, colours, highlighting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class TextDocumentSaveReason(IntEnum):
    """Why a text document is saved."""

    MANUAL = 1
    AFTER_DELAY = 2
    FOCUS_OUT = 3


@dataclass
class MarkedString:
    """Markdown text, or a code snippet when a language is given."""

    language: str | None = None
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"value": self.value}
        if self.language is not None:
            data["language"] = self.language
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any] | str) -> MarkedString:
        if isinstance(data, str):
            return cls(value=data)
        return cls(language=data.get("language"), value=data.get("value", ""))


@dataclass
class MarkupContent:
    """Content of a given markup kind, such as plaintext or markdown."""

    kind: str = ""
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MarkupContent:
        return cls(kind=data.get("kind", ""), value=data.get("value", ""))


@dataclass
class Color:
    """An RGBA colour with each component in the range 0 to 1."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"red": self.red, "green": self.green, "blue": self.blue, "alpha": self.alpha}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Color:
        return cls(
            red=float(data.get("red", 0.0)),
            green=float(data.get("green", 0.0)),
            blue=float(data.get("blue", 0.0)),
            alpha=float(data.get("alpha", 0.0)),
        )


@dataclass
class SemanticHighlightingInformation:
    """Encoded highlighting ranges for one zero-based line of a document."""

    line: int = 0
    tokens: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "tokens": self.tokens}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SemanticHighlightingInformation:
        return cls(line=int(data.get("line", 0)), tokens=data.get("tokens", ""))