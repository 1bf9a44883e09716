# lspkit

Small, dependency-free building blocks for writing Language Server Protocol
tools in Python.

## What is inside

- `lspkit.document`: a format-agnostic `Document` made of paragraphs
  (`Paragraph`), headings (`Heading`), rulers (`Ruler`), code blocks
  (`CodeBlock`) and bullet lists (`BulletList`). It renders as Markdown
  (`as_markdown`) or as plain text (`as_plain_text`). Escaping is kept to a
  minimum, so hover text stays readable even where a client shows the Markdown
  as it is.
- `lspkit.escape`: the Markdown helpers behind the renderer:
  `needs_leading_escape`, `render_text`, `render_inline_block`,
  `get_marker_for_code_block`, `canonicalize_spaces`, `indent_lines`,
  `choose_marker` and `looks_like_tag`.
- `lspkit.jsonrpc`: `RequestId`, which keeps the int or string form an id was
  received in, the abstract `LspMessage`, `ResponseMessage` and
  `ResponseError` with `to_dict`/`from_dict`/`to_json`, and
  `MessageJsonHandler`, a registry of parsers for requests, responses and
  notifications, keyed by method name.
- `lspkit.results`: `ResponseOrError`, which holds either the response to a
  request or the error it produced (`from_response`, `from_error`,
  `is_error`, `to_json`).
- `lspkit.diagnostics`: `DiagnosticSeverity`, `DiagnosticTag`,
  `DiagnosticCodeDescription`, `CodeActionKind`, `MessageType`,
  `MessageParams`, `MessageActionItem` and `ShowMessageRequestParams`.
- `lspkit.documents`: `TextDocumentSaveReason`, `MarkedString`,
  `MarkupContent`, `Color` and `SemanticHighlightingInformation`.
- `lspkit.chars`: ASCII character classification (`is_digit`, `is_alpha`,
  `is_space`, ...), hex conversion (`to_hex`, `from_hex`, `utohexstr`),
  decimal formatting (`utostr`, `itostr`), `ordinal_suffix`, `join_items` and
  `ListSeparator`.
- `lspkit.strsplit`: `split_whitespace`, `split`, `chunk_split` and `join`.
- `lspkit.strcase`: ASCII-only `is_alnum`, `is_alpha`, `is_numeric`,
  `is_lower`, `is_upper`, `swapcase`, `to_lower`, `to_upper` and
  `compare_nocase`.

The protocol data classes convert to and from JSON-ready dictionaries with
`to_dict` and `from_dict`.

## Installation

```
pip install lspkit
```

## Example

```python
from lspkit.document import Document

doc = Document()
doc.add_heading(3).append_text("foo")
para = doc.add_paragraph()
para.append_text("Returns ").append_code("int", True)
doc.add_ruler()
doc.add_code_block("int x = 1;", "cpp")

print(doc.as_markdown())
print(doc.as_plain_text())
```

Keeping the result of a request:

```python
from lspkit.jsonrpc import RequestId, ResponseMessage
from lspkit.results import ResponseOrError

response = ResponseMessage(id=RequestId.from_json(1), result={"ok": True})
outcome = ResponseOrError.from_response(response)
assert not outcome.is_error()
print(outcome.to_json())
```

## What it does not do

lspkit holds message and data types only. It does not read or write messages
over a stream or socket, does not dispatch them to handlers, and does not run a
language server or client. It has no encoding of semantic tokens and no
string-trimming helpers beyond what the Python standard library offers.

## Running the tests

```
pip install lspkit[test]
pytest
```