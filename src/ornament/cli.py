"""Command-line demos and rendering for ornament.

Usage:
    ornament demo append|set|split|json
    ornament render FILE [--plain]
"""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from ornament import setup_logging
from ornament.config import get_settings
from ornament.decorator import Decorator
from ornament.serialization import dumps, enum_face_decoder, loads
from ornament.terminal import to_rich

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ornament.text import Text, TextFragment

console = Console()


class DemoFace(Enum):
    """Faces used by the demo programs."""

    DEFAULT = "default"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    ERROR = "error"
    STAR = "star"
    PIPE = "pipe"


def markdown(fragment: TextFragment) -> str:
    """Render a demo fragment following a simple Markdown-like syntax."""
    match fragment.face:
        case DemoFace.EMPHASIS:
            return f"_{fragment.text}_"
        case DemoFace.STRONG:
            return f"**{fragment.text}**"
        case DemoFace.ERROR | DemoFace.STAR:
            return f"*{fragment.text}*"
        case DemoFace.PIPE:
            return f"|{fragment.text}|"
        case _:
            return fragment.text


def build_append_demo() -> Text:
    return (
        Decorator.with_text("This ", default_face=DemoFace.DEFAULT)
        .set_face(DemoFace.ERROR)
        .append("error")
        .reset_face()
        .append(" is important!")
        .build()
    )


def build_set_demo() -> Text:
    return (
        Decorator.with_text("This part is important.", default_face=DemoFace.DEFAULT)
        .set(DemoFace.STRONG, 5, 9)
        .build()
    )


def build_split_demo() -> Text:
    """A face interrupted by another one and then resumed."""
    return (
        Decorator(default_face=DemoFace.DEFAULT)
        .append("This ")
        .set_face(DemoFace.STAR)
        .append("weird ")
        .set_face(DemoFace.PIPE)
        .append("tiny")
        .set_face(DemoFace.STAR)
        .append(" error")
        .reset_face()
        .append(" is important!")
        .build()
    )


_DEMOS = {
    "append": build_append_demo,
    "set": build_set_demo,
    "split": build_split_demo,
}


def _cmd_demo(name: str, *, console: Console | None = None) -> None:
    """Print a demo rendered as Markdown-like text and with terminal styles."""
    con = console or globals()["console"]
    styles = get_settings().render.styles

    if name == "json":
        _cmd_json_demo(console=con)
        return

    text = _DEMOS[name]()
    con.print(escape(text.render(markdown)))
    con.print(to_rich(text, styles))


def _cmd_json_demo(*, console: Console) -> None:
    """Serialize the set demo, then parse it back."""
    serialization = get_settings().serialization
    text = build_set_demo()

    raw = dumps(
        text,
        indent=serialization.indent,
        ensure_ascii=serialization.ensure_ascii,
    )
    console.print(raw, markup=False, highlight=False, soft_wrap=True)

    parsed = loads(raw, enum_face_decoder(DemoFace))
    console.print(repr(parsed), markup=False, highlight=False, soft_wrap=True)
    if parsed != text:
        console.print("[red]Error:[/] parsed text differs from the original")
        sys.exit(1)


def _cmd_render(
    path: Path, *, plain: bool = False, console: Console | None = None
) -> None:
    """Print a serialized text file, styled or plain."""
    con = console or globals()["console"]

    try:
        text = loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        con.print(
            f"[red]Error:[/] cannot render {escape(str(path))}: {escape(str(e))}",
            soft_wrap=True,
        )
        sys.exit(1)

    if plain:
        con.print(text.plain(), markup=False, highlight=False, soft_wrap=True)
    else:
        con.print(to_rich(text, get_settings().render.styles))


def _build_parser() -> argparse.ArgumentParser:
    """Build argparse parser for ornament subcommands."""
    parser = argparse.ArgumentParser(
        prog="ornament",
        description="Build and render decorated text.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # demo
    demo_p = sub.add_parser("demo", help="Run one of the example programs")
    demo_p.add_argument("name", choices=[*_DEMOS, "json"], help="Demo to run")

    # render
    render_p = sub.add_parser("render", help="Render a serialized text file")
    render_p.add_argument("file", type=Path, help="JSON file of text fragments")
    render_p.add_argument(
        "--plain", action="store_true", help="Strip faces and print plain text"
    )

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the ``ornament`` command."""
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    log = get_settings().log
    setup_logging(log.level, log.file)

    match args.command:
        case "demo":
            _cmd_demo(args.name)
        case "render":
            _cmd_render(args.file, plain=args.plain)
