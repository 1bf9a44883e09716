"""Building blocks for Language Server Protocol tools: markup documents,
markdown escaping, JSON-RPC message types, protocol data types and ASCII
string helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "diagnostics",
    "escape",
    "documents",
    "document",
    "jsonrpc",
    "strsplit",
    "strcase",
    "results",
]