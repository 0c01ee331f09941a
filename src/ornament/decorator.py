"""Builder for ``Text`` instances.

A ``Decorator`` can be used in several manners:

- Incremental, using a "current face" (``set_face`` / ``reset_face`` and
  ``append``).
- Immediate, by assigning faces to ranges directly (``set``).
- A combination of both.

All mutators return the decorator so calls can be chained::

    text = (
        Decorator.with_text("Text can be with emphasis.", default_face=Face.DEFAULT)
        .set(Face.EMPHASIS, 17, 25)
        .build()
    )
"""

from __future__ import annotations

import logging
from typing import Any

from ornament.decorations import DecorationTree
from ornament.text import Text, TextFragment

logger = logging.getLogger(__name__)


class Decorator:
    """Owns the raw text buffer, the current face and the decoration tree.

    Offsets are positions in the Python string buffer built so far.

    Attributes:
        default_face: Face of the root tree; ``reset_face`` returns to it.
    """

    def __init__(self, default_face: Any = None) -> None:
        self.default_face = default_face
        self._text = ""
        self._current_face = default_face
        self._decorations: DecorationTree[Any] = DecorationTree(default_face)

    @classmethod
    def with_text(cls, text: str, default_face: Any = None) -> Decorator:
        """Create a decorator initialised with *text* under the default face."""
        return cls(default_face).append(text)

    @property
    def current_face(self) -> Any:
        """Face assigned by ``append``. Starts as ``default_face``."""
        return self._current_face

    def set_face(self, face: Any) -> Decorator:
        self._current_face = face
        return self

    def reset_face(self) -> Decorator:
        """Equivalent to ``set_face(default_face)``."""
        return self.set_face(self.default_face)

    set_current_face = set_face
    reset_current_face = reset_face

    def append(self, text: str) -> Decorator:
        """Append *text* to the buffer under the current face."""
        if not text:
            return self
        self._text += text
        self._decorations.append(self._current_face, len(text))
        return self

    def set(self, face: Any, start: int, end: int) -> Decorator:
        """Assign *face* to ``[start, end)``, overriding earlier assignments.

        Offsets outside the current buffer are clamped to ``[0, len]``
        rather than rejected; an empty clamped range does nothing.
        """
        length = len(self._text)
        safe_start = min(max(start, 0), length)
        safe_end = min(max(end, 0), length)
        if (safe_start, safe_end) != (start, end):
            logger.debug(
                "Clamped range %d..%d to %d..%d (length %d)",
                start,
                end,
                safe_start,
                safe_end,
                length,
            )
        if safe_start >= safe_end:
            return self
        self._decorations.set(face, safe_start, safe_end)
        return self

    override_range = set

    def build(self) -> Text:
        """Process all face assignments and return the resulting ``Text``."""
        fragments = []
        offset = 0
        for face, length in self._decorations.flatten():
            fragments.append(
                TextFragment(text=self._text[offset : offset + length], face=face)
            )
            offset += length
        return Text(fragments)

    def __len__(self) -> int:
        return len(self._text)
