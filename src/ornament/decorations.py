"""Range-assignment engine for decorated text.

A ``DecorationTree`` records which face applies to every offset of a text
buffer without storing the text itself. Each tree has an ambient face and an
ordered list of runs:

- ``Plain(length)`` covers ``length`` offsets under the ambient face.
- ``Nested(tree)`` covers ``tree.length()`` offsets under the nested tree's
  own face (and, recursively, whatever that tree overrides).

Offsets are never stored; they are recomputed by prefix-summing run lengths.

Architecture:
    ``append`` grows the tree at the end and merges with the last run when the
    face matches. ``set`` overrides an arbitrary range by trimming the runs at
    both ends (``keep_start`` / ``keep_end``) and splicing a new override run
    between the remainders. Overrides never re-merge with their neighbours,
    so a tree built with ``set`` can be less compact than the equivalent
    append-only tree; ``flatten`` output is still correct.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeAlias, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F")


class InvalidRangeError(IndexError):
    """An offset could not be resolved to a run of the tree."""

    def __init__(self, offset: int, length: int) -> None:
        self.offset = offset
        self.length = length
        super().__init__(f"offset {offset} is outside tree of length {length}")


@dataclass(slots=True)
class Plain:
    """Span of ``length`` offsets under the enclosing tree's face."""

    length: int


@dataclass(slots=True)
class Nested:
    """Sub-tree overriding the enclosing face for its whole extent."""

    tree: DecorationTree[Any]


Run: TypeAlias = Plain | Nested


def run_length(run: Run) -> int:
    match run:
        case Plain(length=length):
            return length
        case Nested(tree=tree):
            return tree.length()
    raise TypeError(f"not a run: {run!r}")


def keep_start(run: Run, offset: int) -> Run | None:
    """Return the part of *run* before *offset*, or None if nothing is left.

    For a nested run the straddling child is trimmed recursively and every
    child after it is dropped.
    """
    if offset <= 0:
        return None

    match run:
        case Plain():
            return Plain(min(offset, run.length))
        case Nested(tree=tree):
            idx, idx_offset = tree.run_index_of(offset)
            kept = tree.sliced(0, idx)
            tail = keep_start(tree.runs[idx], offset - idx_offset)
            if tail is not None:
                kept.runs.append(tail)
            if not kept.runs:
                return None
            return Nested(kept)
    raise TypeError(f"not a run: {run!r}")


def keep_end(run: Run, offset: int) -> Run | None:
    """Return the part of *run* from *offset* on, or None if nothing is left.

    Mirror of ``keep_start``: the straddling child is trimmed recursively and
    every child after it is kept whole.
    """
    length = run_length(run)
    if offset >= length:
        return None

    match run:
        case Plain():
            return Plain(length - offset)
        case Nested(tree=tree):
            idx, idx_offset = tree.run_index_of(offset)
            kept = DecorationTree(tree.face)
            head = keep_end(tree.runs[idx], offset - idx_offset)
            if head is not None:
                kept.runs.append(head)
            kept.runs.extend(tree.runs[idx + 1 :])
            if not kept.runs:
                return None
            return Nested(kept)
    raise TypeError(f"not a run: {run!r}")


@dataclass
class DecorationTree(Generic[F]):
    """Ordered runs sharing one ambient face.

    Attributes:
        face: Face applied to every ``Plain`` run directly inside this tree.
        runs: Runs in left-to-right buffer order.
    """

    face: F
    runs: list[Run] = field(default_factory=list)

    @classmethod
    def with_length(cls, face: F, length: int) -> DecorationTree[F]:
        """Tree of a single ``Plain(length)`` run under *face*."""
        return cls(face, [Plain(length)])

    def sliced(self, start: int, stop: int) -> DecorationTree[F]:
        """Shallow copy holding ``runs[start:stop]``."""
        return DecorationTree(self.face, self.runs[start:stop])

    def length(self) -> int:
        """Total offsets covered. Computed on every call, never cached."""
        return sum(run_length(run) for run in self.runs)

    def __len__(self) -> int:
        return self.length()

    def run_index_of(self, offset: int) -> tuple[int, int]:
        """Locate the run containing *offset*.

        Scans forward accumulating run lengths and stops at the first run
        whose cumulative end reaches *offset*, so an offset sitting exactly on
        a run boundary resolves to the run that ends there. Offset 0 always
        resolves to the first run.

        Returns:
            ``(index, run_start)``: the run index and the offset at which
            that run begins.

        Raises:
            InvalidRangeError: If *offset* is negative or past the end.
        """
        if offset < 0 or not self.runs:
            raise InvalidRangeError(offset, self.length())

        run_start = 0
        for idx, run in enumerate(self.runs):
            run_end = run_start + run_length(run)
            if run_end >= offset:
                return idx, run_start
            run_start = run_end

        raise InvalidRangeError(offset, run_start)

    def append(self, face: F, length: int) -> None:
        """Extend the tree by *length* offsets under *face*.

        Consecutive appends of one face collapse into a single run: into the
        last ``Plain`` when *face* is the ambient face, otherwise into the
        last ``Nested`` of that face (recursively).
        """
        if length < 0:
            raise ValueError(f"append length must be non-negative, got {length}")

        last = self.runs[-1] if self.runs else None
        if face == self.face:
            if isinstance(last, Plain):
                last.length += length
            else:
                self.runs.append(Plain(length))
        elif isinstance(last, Nested) and last.tree.face == face:
            last.tree.append(face, length)
        else:
            self.runs.append(Nested(DecorationTree.with_length(face, length)))

    def set(self, face: F, start: int, end: int) -> None:
        """Assign *face* to ``[start, end)``, replacing whatever was there.

        The range must already lie within ``[0, self.length()]``; callers
        clamp. An empty range is a no-op.

        Raises:
            InvalidRangeError: If either end cannot be resolved to a run.
        """
        if start == end:
            return
        if start > end:
            raise InvalidRangeError(start, self.length())

        start_idx, start_offset = self.run_index_of(start)
        end_idx, end_offset = self.run_index_of(end)

        if start_idx == end_idx:
            target = self.runs[start_idx]
            if isinstance(target, Nested):
                # Keep the finer structure around the range inside that run.
                target.tree.set(face, start - start_offset, end - start_offset)
                return

        replacement: list[Run] = []
        head = keep_start(self.runs[start_idx], start - start_offset)
        if head is not None:
            replacement.append(head)
        replacement.append(Nested(DecorationTree.with_length(face, end - start)))
        tail = keep_end(self.runs[end_idx], end - end_offset)
        if tail is not None:
            replacement.append(tail)

        logger.debug(
            "Override %d..%d replaces runs %d..%d with %d runs",
            start,
            end,
            start_idx,
            end_idx,
            len(replacement),
        )
        self.runs[start_idx : end_idx + 1] = replacement

    def flatten(self) -> list[tuple[F, int]]:
        """Ordered ``(face, length)`` pairs covering the whole tree."""
        flat: list[tuple[F, int]] = []
        for run in self.runs:
            match run:
                case Plain(length=length):
                    flat.append((self.face, length))
                case Nested(tree=tree):
                    flat.extend(tree.flatten())
        return flat
