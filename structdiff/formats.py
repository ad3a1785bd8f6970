"""
structdiff.formats — Getting documents in, getting results out.

Supported conversions:
    • JSON text or bytes → parsed document (strict RFC 8259: no NaN/Infinity)
    • diff result → sorted human-readable lines
    • diff result → JSON object of pointer → display string
"""

import json
import logging
from collections import Counter
from typing import Any, Mapping, Union

from .errors import ParseError

logger = logging.getLogger(__name__)

RawDocument = Union[str, bytes, bytearray]


# ═══════════════════════════════════════════════════════════════════
#  JSON TEXT → DOCUMENT
# ═══════════════════════════════════════════════════════════════════

def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity by default; they are not JSON.
    raise ValueError(f"non-standard JSON constant {name!r}")


def load_json(raw: RawDocument) -> Any:
    """
    Parse JSON text or bytes into a plain Python document.

    Raises ParseError for anything that is not a single well-formed JSON
    value, including empty input and None.
    """
    if raw is None:
        raise ParseError("no input")
    if not isinstance(raw, (str, bytes, bytearray)):
        raise ParseError(f"expected str or bytes, got {type(raw).__name__}")
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.debug("JSON parse failed: %s", exc)
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        logger.debug("JSON parse failed: %s", exc)
        raise ParseError("document nested too deeply") from exc


# ═══════════════════════════════════════════════════════════════════
#  DIFF RESULT → TEXT
# ═══════════════════════════════════════════════════════════════════

def _display_path(path: str) -> str:
    return path or "(root)"


def render(result: Mapping[str, Any]) -> list[str]:
    """
    One line per reported pointer, sorted by pointer:

        /a: different value
        /b: missing b
    """
    return [f"{_display_path(path)}: {result[path]}" for path in sorted(result)]


def to_json(result: Mapping[str, Any], **kwargs) -> str:
    """Serialize a diff result as a JSON object of pointer → display string."""
    return json.dumps({path: str(tag) for path, tag in result.items()}, **kwargs)


def summarize(result: Mapping[str, Any]) -> dict[str, int]:
    """Count of reported pointers per classification display string."""
    return dict(Counter(str(tag) for tag in result.values()))
