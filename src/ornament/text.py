"""Immutable decorated text produced by ``Decorator.build()``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


@dataclass(frozen=True, slots=True)
class TextFragment:
    """A slice of text and the face assigned to it.

    Attributes:
        text: The raw text.
        face: The associated face.
    """

    text: str
    face: Any = None

    @classmethod
    def from_str(cls, text: str, face: Any = None) -> TextFragment:
        return cls(text=text, face=face)

    def __iter__(self) -> Iterator[Any]:
        # Lets callers unpack ``text, face = fragment``.
        yield self.text
        yield self.face


class Text:
    """Ordered sequence of ``TextFragment`` entries.

    Fragments are stored as a tuple; a ``Text`` is never mutated after
    construction.
    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: Iterable[TextFragment] = ()) -> None:
        self._fragments: tuple[TextFragment, ...] = tuple(fragments)

    @classmethod
    def from_str(cls, text: str, face: Any = None) -> Text:
        """Single-fragment text under *face*."""
        return cls([TextFragment(text=text, face=face)])

    @classmethod
    def from_fragment(cls, fragment: TextFragment) -> Text:
        return cls([fragment])

    @property
    def fragments(self) -> tuple[TextFragment, ...]:
        return self._fragments

    def text_len(self) -> int:
        """Length of the underlying text, without decorations."""
        return sum(len(fragment.text) for fragment in self._fragments)

    length = text_len

    def render(self, decorator: Callable[[TextFragment], str]) -> str:
        """Convert to rich text, using *decorator* to handle each face.

        Example::

            text.render(lambda tf: f"*{tf.text}*" if tf.face else tf.text)
        """
        return "".join(decorator(fragment) for fragment in self._fragments)

    def plain(self) -> str:
        """Concatenated text with all decorations stripped."""
        return "".join(fragment.text for fragment in self._fragments)

    def __iter__(self) -> Iterator[TextFragment]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __getitem__(self, index: int) -> TextFragment:
        return self._fragments[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self._fragments == other._fragments

    def __hash__(self) -> int:
        return hash(self._fragments)

    def __repr__(self) -> str:
        return f"Text({list(self._fragments)!r})"
