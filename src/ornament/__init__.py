"""ornament - build decorated text.

A ``Decorator`` assigns a caller-defined face to every offset of a text
buffer, either while appending or by overriding ranges afterwards, and
``build()`` flattens the result into a ``Text`` of ``(text, face)``
fragments ready for rendering::

    class Face(Enum):
        DEFAULT = 0
        EMPHASIS = 1
        STRONG = 2

    text = (
        Decorator.with_text(
            "Text can be with emphasis or even strong.", default_face=Face.DEFAULT
        )
        .set(Face.EMPHASIS, 17, 25)
        .set(Face.STRONG, 34, 40)
        .build()
    )
    text.render(markdown)  # "Text can be with _emphasis_ or even **strong**."
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ornament.decorations import DecorationTree, InvalidRangeError
from ornament.decorator import Decorator
from ornament.text import Text, TextFragment

__version__ = "0.1.0"

__all__ = [
    "DecorationTree",
    "Decorator",
    "InvalidRangeError",
    "Text",
    "TextFragment",
    "setup_logging",
]


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Configure logging to the console and, optionally, a rotating file."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # File handler - detailed logging with rotation (10MB, keep 5 backups)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)
        logging.info("Logging configured. Log file: %s", log_file.absolute())
