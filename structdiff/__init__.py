"""
structdiff
==========

Minimal structural diff of two JSON documents, keyed by JSON Pointer.

    diff_json('{"a": 1, "b": 3.2}', '{"b": 3.2, "a": 1}')  → {}
    diff_json('{"a": 1, "b": 3.2}', '{"a": 2, "b": 3.2}')  → {"/a": DIFFERENT}
    diff_json('{"a": 1, "b": 3.2}', '{"a": 1}')            → {"/b": MISSING_B}
    diff_json('{"a": {"x": 1}}', '{"a": {"x": 2}}')         → {"/a/x": DIFFERENT}

Only the deepest divergent pointer of each change is reported: when
"/a/x" differs, "/a" and the root are not reported as well.

A pointer that is absent from the result is the same in both documents.
"""

from structdiff.core import (
    DiffType,
    DiffConfig,
    DEFAULT_CONFIG,
    classification,
    values_equal,
    diff_documents,
    diff_json,
)
from structdiff.errors import StructDiffError, ParseError, InternalInvariantError
from structdiff.formats import load_json, render, to_json, summarize
from structdiff.pointers import (
    list_pointers, path_set, pointer_set, split, join, depth, ancestors,
    resolve,
)

__version__ = "0.1.0"
__all__ = [
    "DiffType", "DiffConfig", "DEFAULT_CONFIG",
    "classification", "values_equal", "diff_documents", "diff_json",
    "StructDiffError", "ParseError", "InternalInvariantError",
    "load_json", "render", "to_json", "summarize",
    "list_pointers", "path_set", "pointer_set", "split", "join", "depth",
    "ancestors", "resolve",
]
