"""
structdiff.pointers — Path enumeration over JSON documents.

Every location in a document is named by a JSON Pointer (RFC 6901):

    ""          the document root
    "/a"        member "a" of the root object
    "/a/0"      first element of the array at "/a"
    "/a/~1"     member "/" of the object at "/a"
    "/a/~0"     member "~" of the object at "/a"

Escaping, splitting and resolution are delegated to `jsonpointer`.
Ancestors are derived from decoded segments, never by slicing the raw
string, so a "/" inside a key can never be mistaken for a separator.
"""

from typing import Any, Iterator

from jsonpointer import EndOfList, JsonPointer, JsonPointerException, escape

from .errors import InternalInvariantError
from .formats import RawDocument, load_json

ROOT = ""


# ═══════════════════════════════════════════════════════════════════
#  ENUMERATION
# ═══════════════════════════════════════════════════════════════════

def _walk(doc: Any) -> Iterator[str]:
    # explicit stack: nesting depth is bounded by memory, not recursion
    stack = [(ROOT, doc)]
    while stack:
        prefix, node = stack.pop()
        yield prefix
        if isinstance(node, dict):
            children = [(f"{prefix}/{escape(k)}", v) for k, v in node.items()]
        elif isinstance(node, list):
            children = [(f"{prefix}/{i}", v) for i, v in enumerate(node)]
        else:
            continue
        stack.extend(reversed(children))


def list_pointers(doc: Any) -> list[str]:
    """
    Every pointer in a parsed document, root first, depth-first.

        list_pointers({"a": [1, 2]})  →  ["", "/a", "/a/0", "/a/1"]
    """
    return list(_walk(doc))


def path_set(doc: Any) -> set[str]:
    """Set of all pointers in a parsed document."""
    return set(list_pointers(doc))


def pointer_set(raw: RawDocument) -> set[str]:
    """
    Parse raw JSON and return the set of all its pointers.

    This is the path set the differ builds for each side; ParseError on
    input that is not JSON.
    """
    return path_set(load_json(raw))


# ═══════════════════════════════════════════════════════════════════
#  SEGMENTS AND ANCESTORS
# ═══════════════════════════════════════════════════════════════════

def split(path: str) -> list[str]:
    """Decoded segments of a pointer.  split("/a/~1b") == ["a", "/b"]."""
    return JsonPointer(path).parts


def join(segments: list) -> str:
    """Inverse of split.  Segments are escaped; ints become indices."""
    return JsonPointer.from_parts(segments).path


def depth(path: str) -> int:
    """Number of segments; the root has depth 0."""
    return len(split(path))


def ancestors(path: str) -> list[str]:
    """
    Every strict ancestor of `path`, root first.

        ancestors("/a/b/c") == ["", "/a", "/a/b"]
        ancestors("/a/~1")  == ["", "/a"]
        ancestors("")       == []
    """
    parts = split(path)
    return [join(parts[:i]) for i in range(len(parts))]


# ═══════════════════════════════════════════════════════════════════
#  RESOLUTION
# ═══════════════════════════════════════════════════════════════════

def resolve(doc: Any, path: str) -> Any:
    """
    Value at `path` inside `doc`.

    Only called with pointers enumerated from `doc` itself, so any
    failure is a bug and surfaces as InternalInvariantError.
    """
    try:
        value = JsonPointer(path).resolve(doc)
    except JsonPointerException as exc:
        raise InternalInvariantError(path, str(exc)) from exc
    if isinstance(value, EndOfList):
        raise InternalInvariantError(path, "points past the end of an array")
    return value
