"""
structdiff.core — Minimal structural diff of JSON documents
============================================================

§1  THE RESULT
──────────────

For two documents A and B, every pointer that exists in either document
gets one of four verdicts:

    MISSING_A   pointer exists in B only   (it is missing from A)
    MISSING_B   pointer exists in A only   (it is missing from B)
    DIFFERENT   pointer exists in both, values differ
    SAME        everything else; never stored, absence means same

The verdict names the side where the pointer is ABSENT, not the side
where it is extra.


§2  MINIMALITY
──────────────

A changed leaf makes every container above it unequal too:

    A = {"a": {"x": 1}}
    B = {"a": {"x": 2}}

"", "/a" and "/a/x" all hold unequal values, but only "/a/x" is
informative.  The differ therefore reports the DEEPEST divergent
pointers only:

    (1)  Visit the common pointers deepest first.
    (2)  When a pointer is visited, mark all its strict ancestors as
         covered.  Covered pointers are never compared.
    (3)  Compare the two values at a visited pointer; report DIFFERENT
         if they are unequal.

Ancestors are covered on every visit, not only on a difference.  A
container whose children are all equal but whose key set changed is
already explained by the MISSING_* entries of those keys:

    diff_json('{"a": 1, "b": 3.2}', '{"a": 1}')  →  {"/b": MISSING_B}

A container is therefore compared only when it has no common
descendant, which is exactly when nothing deeper can explain it:

    diff_json('{}', '{"a": 1}')  →  {"": DIFFERENT, "/a": MISSING_A}

One case escapes that argument.  An object keyed "0", "1", ... and an
array of the same length enumerate identical pointers, so no MISSING_*
entry exists.  A covered pointer whose two values are an object and an
array is still reported:

    diff_json('{"a": {"0": 1}}', '{"a": [1]}')  →  {"/a": DIFFERENT}

Independent subtrees do not cover each other: a change at "/a/x" covers
"/a" and "", never "/b/y".


§3  ORDERING
────────────

"Deepest first" is the segment count of the pointer.  Raw string
length ("length" ordering) also visits every descendant before its
ancestors, since an ancestor pointer is a strict prefix of its
descendants, but it interleaves tree levels: "/abcdef" sorts ahead of
"/a/b".  Segment count is the default; both orderings give the same
result.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from . import pointers
from .errors import ParseError
from .formats import RawDocument, load_json

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════

class DiffType(Enum):
    """Verdict attached to one pointer."""
    SAME = "same"
    MISSING_A = "missing a"
    MISSING_B = "missing b"
    DIFFERENT = "different value"

    def __str__(self) -> str:
        return self.value


def classification(result: Mapping[str, DiffType], path: str) -> DiffType:
    """Verdict for `path`; a pointer absent from `result` is SAME."""
    if path in result:
        return result[path]
    return DiffType.SAME


# ═══════════════════════════════════════════════════════════════════
#  CONFIGURATION
# ═══════════════════════════════════════════════════════════════════

ORDERINGS = ("depth", "length")


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """
    Per-call options.

    ordering:        "depth" sorts common pointers by segment count,
                     "length" by raw pointer length (see §3).
    strict_numbers:  when True, 1 and 1.0 are different values.
    """
    ordering: str = "depth"
    strict_numbers: bool = False

    def __post_init__(self):
        if self.ordering not in ORDERINGS:
            raise ValueError(
                f"ordering must be one of {ORDERINGS}, got {self.ordering!r}"
            )


DEFAULT_CONFIG = DiffConfig()


# ═══════════════════════════════════════════════════════════════════
#  VALUE EQUALITY
# ═══════════════════════════════════════════════════════════════════

def values_equal(a: Any, b: Any, strict_numbers: bool = False) -> bool:
    """
    Deep structural equality of two parsed JSON values.

        objects  same key set, equal values (key order ignored)
        arrays   same length, equal elements in order
        scalars  equal value AND compatible type:
                 true ≠ 1, "1" ≠ 1, null only equals null

    Python's own == is not enough: True == 1 and {"a": True} == {"a": 1}.
    Containers are walked with an explicit stack, so nesting depth is not
    limited by the interpreter's recursion limit.
    """
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()

        if isinstance(x, dict):
            if not isinstance(y, dict) or x.keys() != y.keys():
                return False
            pending.extend((x[k], y[k]) for k in x)
        elif isinstance(x, list):
            if not isinstance(y, list) or len(x) != len(y):
                return False
            pending.extend(zip(x, y))
        elif not _scalars_equal(x, y, strict_numbers):
            return False
    return True


def _scalars_equal(a: Any, b: Any, strict_numbers: bool) -> bool:
    # bool is a subclass of int, so this guard must come first
    a_is_bool = type(a) is bool
    b_is_bool = type(b) is bool
    if a_is_bool or b_is_bool:
        return a_is_bool and b_is_bool and a is b

    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        if strict_numbers and type(a) is not type(b):
            return False
        return a == b

    if type(a) is not type(b):
        return False
    return a == b


# ═══════════════════════════════════════════════════════════════════
#  DIFF
# ═══════════════════════════════════════════════════════════════════

def _by_length(path: str) -> tuple:
    return (len(path), path)


def _by_depth(path: str) -> tuple:
    return (pointers.depth(path), len(path), path)


def _visit_order(paths: set[str], ordering: str) -> list[str]:
    key = _by_length if ordering == "length" else _by_depth
    return sorted(paths, key=key, reverse=True)


def _kind_changed(a: Any, b: Any) -> bool:
    """True when one side is an object and the other an array."""
    return isinstance(a, dict) != isinstance(b, dict)


def diff_documents(
    a: Any, b: Any, config: Optional[DiffConfig] = None
) -> dict[str, DiffType]:
    """
    Diff two already-parsed JSON documents.

    Returns a dict of pointer → DiffType holding only the pointers that
    are missing on one side or minimally different (see §2).  Raises
    InternalInvariantError if an enumerated pointer cannot be resolved.
    """
    config = config or DEFAULT_CONFIG

    a_paths = pointers.path_set(a)
    b_paths = pointers.path_set(b)

    result: dict[str, DiffType] = {}
    for path in a_paths - b_paths:
        result[path] = DiffType.MISSING_B
    for path in b_paths - a_paths:
        result[path] = DiffType.MISSING_A

    common = a_paths & b_paths
    logger.debug(
        "diff: %d pointers in a, %d in b, %d common",
        len(a_paths), len(b_paths), len(common),
    )

    covered: set[str] = set()
    for path in _visit_order(common, config.ordering):
        a_val = pointers.resolve(a, path)
        b_val = pointers.resolve(b, path)

        if path in covered:
            # covered pointers are containers on both sides; "0"-keyed
            # objects and arrays share pointers, so only the kind tells
            # them apart
            if _kind_changed(a_val, b_val):
                result[path] = DiffType.DIFFERENT
            continue
        covered.update(pointers.ancestors(path))

        if not values_equal(a_val, b_val, config.strict_numbers):
            result[path] = DiffType.DIFFERENT

    logger.debug("diff: %d pointers reported", len(result))
    return result


def diff_json(
    a: RawDocument, b: RawDocument, config: Optional[DiffConfig] = None
) -> dict[str, DiffType]:
    """
    Diff two raw JSON documents (str or bytes).

        diff_json('{"a": 1, "b": 3.2}', '{"a": 2}')
            → {"/a": DiffType.DIFFERENT, "/b": DiffType.MISSING_B}

    Both inputs are parsed before any comparison; a ParseError on either
    side aborts the whole diff with no partial result.
    """
    docs = []
    for side, raw in (("a", a), ("b", b)):
        try:
            docs.append(load_json(raw))
        except ParseError as exc:
            raise ParseError(str(exc), side=side) from exc
    return diff_documents(docs[0], docs[1], config)
