"""JSON-RPC request ids, response messages and the method-to-parser registry."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RequestIdKind(Enum):
    """Which form a request id was received in."""

    NONE = "none"
    INT = "int"
    STRING = "string"


@dataclass(eq=False)
class RequestId:
    """A request id that keeps the int or string form it was given in."""

    kind: RequestIdKind = RequestIdKind.NONE
    value: int = -1
    text: str = ""

    def has_value(self) -> bool:
        """True once an int or string id has been set."""
        return self.kind is not RequestIdKind.NONE

    def set(self, value: int | str) -> None:
        """Set the id from an int or a string."""
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"request id must be an int or a string, not {type(value).__name__}")
        if isinstance(value, int):
            self.value = value
            self.kind = RequestIdKind.INT
        else:
            self.text = value
            self.kind = RequestIdKind.STRING

    def to_json(self) -> int | str | None:
        """The id in the form it was received in, None if unset."""
        if self.kind is RequestIdKind.INT:
            return self.value
        if self.kind is RequestIdKind.STRING:
            return self.text
        return None

    @classmethod
    def from_json(cls, data: int | str | None) -> RequestId:
        """Build an id from its JSON value."""
        rid = cls()
        if data is not None:
            rid.set(data)
        return rid

    def _key(self) -> tuple[RequestIdKind, int | str]:
        return (self.kind, self.value if self.kind is RequestIdKind.INT else self.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestId):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: RequestId) -> bool:
        if not isinstance(other, RequestId):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is RequestIdKind.INT:
            return self.value < other.value
        return self.text < other.text


class MessageKind(Enum):
    """The three kinds of JSON-RPC messages."""

    REQUEST = "request"
    RESPONSE = "response"
    NOTIFICATION = "notification"


@dataclass
class LspMessage(ABC):
    """Base of every protocol message."""

    jsonrpc: str = "2.0"
    method: str = ""

    @property
    @abstractmethod
    def kind(self) -> MessageKind:
        """The kind of this message."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """The message as a JSON-ready dictionary."""

    def to_json(self) -> str:
        """The message serialized as JSON text."""
        return json.dumps(self.to_dict())


@dataclass
class ResponseMessage(LspMessage):
    """A successful response to a request."""

    id: RequestId = field(default_factory=RequestId)
    result: Any = None

    @property
    def kind(self) -> MessageKind:
        return MessageKind.RESPONSE

    def is_error(self) -> bool:
        """True if this response carries an error."""
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id.to_json(), "result": self.result}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResponseMessage:
        return cls(
            jsonrpc=data.get("jsonrpc", "2.0"),
            id=RequestId.from_json(data.get("id")),
            result=data.get("result"),
        )


@dataclass
class ResponseError(ResponseMessage):
    """A response that reports an error instead of a result."""

    error: Any = None

    def is_error(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id.to_json(), "error": self.error}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResponseError:
        return cls(
            jsonrpc=data.get("jsonrpc", "2.0"),
            id=RequestId.from_json(data.get("id")),
            error=data.get("error"),
        )


MessageParser = Callable[[Any], LspMessage]


class MessageJsonHandler:
    """Registry of parsers for requests, responses and notifications by method."""

    def __init__(self) -> None:
        self.method_to_request: dict[str, MessageParser] = {}
        self.method_to_response: dict[str, MessageParser] = {}
        self.method_to_notification: dict[str, MessageParser] = {}

    def get_request_handler(self, method: str) -> MessageParser | None:
        """The request parser for ``method``, or None."""
        return self.method_to_request.get(method)

    def set_request_handler(self, method: str, handler: MessageParser) -> None:
        """Register the request parser for ``method``."""
        self.method_to_request[method] = handler

    def get_response_handler(self, method: str) -> MessageParser | None:
        """The response parser for ``method``, or None."""
        return self.method_to_response.get(method)

    def set_response_handler(self, method: str, handler: MessageParser) -> None:
        """Register the response parser for ``method``."""
        self.method_to_response[method] = handler

    def get_notification_handler(self, method: str) -> MessageParser | None:
        """The notification parser for ``method``, or None."""
        return self.method_to_notification.get(method)

    def set_notification_handler(self, method: str, handler: MessageParser) -> None:
        """Register the notification parser for ``method``."""
        self.method_to_notification[method] = handler