"""Markdown escaping and small rendering helpers for plain and inline text."""

from __future__ import annotations

from collections.abc import Sequence

from lspkit.chars import is_alnum, is_alpha, is_digit, is_hex_digit, is_space

_TAG_NAME_EXTRA = "-_:"


def looks_like_tag(contents: str) -> bool:
    """Tell whether ``<`` followed by ``contents`` could start an HTML tag."""
    if not contents:
        return False
    if contents[0] in "!?/":
        return True
    if not is_alpha(contents[0]):
        return False
    pos = 0
    while pos < len(contents) and (is_alnum(contents[pos]) or contents[pos] in _TAG_NAME_EXTRA):
        pos += 1
    while pos < len(contents) and is_space(contents[pos]):
        pos += 1
    # Attributes have restrictive names; '=' means anything may follow.
    rest = contents[pos:]
    for offset, ch in enumerate(rest):
        if is_alnum(ch) or is_space(ch):
            continue
        if ch == ">" or rest.startswith("/>", offset):
            return True
        return ch == "="
    return True


def _trim_left_keep_if_all(text: str, ch: str) -> str:
    """Strip leading ``ch``; a string made only of ``ch`` is left as it is."""
    stripped = text.lstrip(ch)
    return stripped if stripped else text


def needs_leading_escape(c: str, before: str, after: str, starts_line: bool) -> bool:
    """Tell whether ``c``, between ``before`` and ``after``, must be backslash-escaped."""
    at_line_start = starts_line and not before

    def ruler_length() -> int:
        if not at_line_start:
            return 0
        rest = after.rstrip(" ")
        return 1 + len(rest) if all(d == c for d in rest) else 0

    def is_bullet() -> bool:
        return at_line_start and (not after or after.startswith(" "))

    def space_surrounds() -> bool:
        return (not after or is_space(after[0])) and (not before or is_space(before[-1]))

    def word_surrounds() -> bool:
        return bool(after) and is_alnum(after[0]) and bool(before) and is_alnum(before[-1])

    match c:
        case "\\" | "`":
            return True
        case "~":
            return at_line_start and after.startswith("~~")
        case "#":
            if not at_line_start:
                return False
            rest = _trim_left_keep_if_all(after, c)
            return not rest or rest.startswith(" ")
        case "]":
            return after.startswith(":") or after.startswith("(")
        case "=":
            return ruler_length() > 0
        case "_":
            if ruler_length() >= 3:
                return True
            return not (space_surrounds() or word_surrounds())
        case "-":
            return ruler_length() > 0 or is_bullet()
        case "+":
            return is_bullet()
        case "*":
            return is_bullet() or ruler_length() >= 3 or not space_surrounds()
        case "<":
            return looks_like_tag(after)
        case ">":
            return at_line_start
        case "&":
            end = after.find(";")
            if end < 0:
                return False
            content = after[:end]
            if content.startswith("#"):
                content = content[1:]
                if content[:1] in ("x", "X"):
                    return all(is_hex_digit(ch) for ch in content[1:])
                return all(is_digit(ch) for ch in content)
            return all(is_alpha(ch) for ch in content)
        case "." | ")":
            return (
                starts_line
                and bool(before)
                and all(is_digit(ch) for ch in before)
                and after.startswith(" ")
            )
        case _:
            return False


def render_text(text: str, starts_line: bool) -> str:
    """Escape ``text`` so that its punctuation starts no markdown construct."""
    parts = []
    for index, ch in enumerate(text):
        if needs_leading_escape(ch, text[:index], text[index + 1:], starts_line):
            parts.append("\\")
        parts.append(ch)
    return "".join(parts)


def render_inline_block(text: str) -> str:
    """Render ``text`` as inline markdown code, surrounded by backticks."""
    body = text.replace("`", "``")
    if body.startswith("`") or body.endswith("`"):
        return f"` {body} `"
    if body.startswith(" ") and body.endswith(" "):
        return f"` {body} `"
    return f"`{body}`"


def get_marker_for_code_block(text: str) -> str:
    """Return a backtick fence longer than any backtick run in ``text``, at least 3."""
    longest = 0
    run = 0
    for ch in text:
        if ch == "`":
            run += 1
            continue
        longest = max(longest, run)
        run = 0
    longest = max(longest, run)
    return "`" * max(3, longest + 1)


def canonicalize_spaces(text: str) -> str:
    """Replace every whitespace character of ``text`` with a single space."""
    return "".join(" " if is_space(ch) else ch for ch in text)


def indent_lines(text: str) -> str:
    """Indent every line but the first by two spaces."""
    if text.endswith("\n"):
        raise ValueError("input should have been trimmed of trailing newlines")
    return text.replace("\n", "\n  ")


def choose_marker(options: Sequence[str], text: str) -> str:
    """Pick the first marker none of whose characters occur in ``text``."""
    if not options:
        raise ValueError("at least one marker option is required")
    for option in options:
        if not any(ch in text for ch in option):
            return option
    return options[0]