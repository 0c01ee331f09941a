"""JSON form of ``Text``: an ordered array of ``{"text", "face"}`` objects.

Faces are encoded with a caller-supplied function. The default encodes
``Enum`` members by name (``{"text": "part", "face": "Strong"}``) and passes
any other face through as a JSON value. Decoding typed faces needs the
matching decoder, e.g. ``enum_face_decoder(Face)``.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from ornament.text import Text, TextFragment

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def encode_face(face: Any) -> Any:
    """Default face encoder: Enum members by name, anything else unchanged."""
    if isinstance(face, Enum):
        return face.name
    return face


def decode_face(raw: Any) -> Any:
    """Default face decoder: the JSON value unchanged."""
    return raw


def enum_face_decoder(enum_cls: type[Enum]) -> Callable[[Any], Enum]:
    """Build a decoder mapping member names back to *enum_cls* members."""

    def _decode(raw: Any) -> Enum:
        try:
            return enum_cls[raw]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Unknown {enum_cls.__name__} face: {raw!r}") from e

    return _decode


def text_to_dicts(
    text: Text,
    encode: Callable[[Any], Any] = encode_face,
) -> list[dict[str, Any]]:
    """Convert *text* to a list of JSON-ready dicts, in fragment order."""
    return [{"text": fragment.text, "face": encode(fragment.face)} for fragment in text]


def text_from_dicts(
    data: Any,
    decode: Callable[[Any], Any] = decode_face,
) -> Text:
    """Rebuild a ``Text`` from the output of ``text_to_dicts``.

    Raises:
        ValueError: If *data* is not a list of objects with ``text`` and
            ``face`` fields, or a face fails to decode.
    """
    if not isinstance(data, list):
        msg = f"Expected a JSON array of fragments, got {type(data).__name__}"
        raise ValueError(msg)

    fragments = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"Fragment {position} is not an object")
        missing = [key for key in ("text", "face") if key not in entry]
        if missing:
            raise ValueError(
                f"Fragment {position} missing required field: {', '.join(missing)}"
            )
        if not isinstance(entry["text"], str):
            raise ValueError(f"Fragment {position} text must be a string")
        fragments.append(TextFragment(text=entry["text"], face=decode(entry["face"])))

    return Text(fragments)


def dumps(
    text: Text,
    encode: Callable[[Any], Any] = encode_face,
    *,
    indent: int | None = None,
    ensure_ascii: bool = False,
) -> str:
    """Serialize *text* to a JSON string."""
    return json.dumps(
        text_to_dicts(text, encode), indent=indent, ensure_ascii=ensure_ascii
    )


def loads(raw: str, decode: Callable[[Any], Any] = decode_face) -> Text:
    """Parse a JSON string produced by ``dumps``.

    Raises:
        ValueError: If *raw* is not valid JSON or has the wrong shape.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    text = text_from_dicts(data, decode)
    logger.debug("Loaded %d fragments (%d chars)", len(text), text.text_len())
    return text
