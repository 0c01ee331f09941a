"""Render ``Text`` to the terminal with rich styles."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from rich.text import Text as RichText

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from ornament.text import Text


def face_name(face: Any) -> str:
    """Key used to look a face up in a style mapping."""
    if face is None:
        return ""
    if isinstance(face, Enum):
        return face.name
    return str(face)


def to_rich(
    text: Text,
    styles: Mapping[str, str],
    face_key: Callable[[Any], str] = face_name,
) -> RichText:
    """Build a rich ``Text`` with one styled span per fragment.

    Faces without an entry in *styles* are left unstyled.
    """
    rich_text = RichText()
    for fragment in text:
        rich_text.append(fragment.text, style=styles.get(face_key(fragment.face)))
    return rich_text
