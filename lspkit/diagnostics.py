"""Diagnostic, code-action and window-message protocol types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any


class DiagnosticSeverity(IntEnum):
    """How serious a diagnostic is."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class DiagnosticTag(IntEnum):
    """Extra classification of a diagnostic."""

    UNNECESSARY = 1
    DEPRECATED = 2


@dataclass
class DiagnosticCodeDescription:
    """A link to more information about a diagnostic code."""

    href: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"href": self.href}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DiagnosticCodeDescription:
        return cls(href=data.get("href", ""))


class CodeActionKind(str, Enum):
    """Base kinds of code actions."""

    QUICK_FIX = "quickfix"
    REFACTOR = "refactor"
    REFACTOR_EXTRACT = "refactor.extract"
    REFACTOR_INLINE = "refactor.inline"
    REFACTOR_REWRITE = "refactor.rewrite"
    SOURCE = "source"
    SOURCE_ORGANIZE_IMPORTS = "source.organizeImports"


class MessageType(IntEnum):
    """Kind of message shown or logged by the client."""

    ERROR = 1
    WARNING = 2
    INFO = 3
    LOG = 4


@dataclass
class MessageParams:
    """Parameters of the log and show message notifications."""

    type: MessageType = MessageType.ERROR
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": int(self.type), "message": self.message}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageParams:
        return cls(
            type=MessageType(data.get("type", MessageType.ERROR)),
            message=data.get("message", ""),
        )


@dataclass
class MessageActionItem:
    """An action offered to the user, such as 'Retry'."""

    title: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageActionItem:
        return cls(title=data.get("title", ""))


@dataclass
class ShowMessageRequestParams(MessageParams):
    """Parameters of the show message request, with the actions to present."""

    actions: list[MessageActionItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["actions"] = [a.to_dict() for a in self.actions]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ShowMessageRequestParams:
        base = MessageParams.from_dict(data)
        return cls(
            type=base.type,
            message=base.message,
            actions=[MessageActionItem.from_dict(a) for a in data.get("actions", [])],
        )