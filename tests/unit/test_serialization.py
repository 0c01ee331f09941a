"""Tests for the JSON form of Text."""

from __future__ import annotations

import json

import pytest

from ornament import Decorator, Text, TextFragment
from ornament.serialization import (
    dumps,
    encode_face,
    enum_face_decoder,
    loads,
    text_from_dicts,
    text_to_dicts,
)
from tests.helpers.faces import Face


@pytest.fixture
def text() -> Text:
    return (
        Decorator.with_text("This part is important.", default_face=Face.DEFAULT)
        .set(Face.STRONG, 5, 9)
        .build()
    )


class TestDumps:
    """Serializing to JSON."""

    def test_array_of_text_face_objects(self, text: Text) -> None:
        """Enum faces are written by member name, in fragment order."""
        assert json.loads(dumps(text)) == [
            {"text": "This ", "face": "DEFAULT"},
            {"text": "part", "face": "STRONG"},
            {"text": " is important.", "face": "DEFAULT"},
        ]

    def test_compact_by_default(self, text: Text) -> None:
        assert "\n" not in dumps(text)

    def test_indent(self, text: Text) -> None:
        assert dumps(text, indent=2).startswith('[\n  {\n    "text": "This "')

    def test_non_ascii_kept_by_default(self) -> None:
        raw = dumps(Text.from_str("café"))
        assert "café" in raw
        assert "\\u00e9" in dumps(Text.from_str("café"), ensure_ascii=True)

    def test_non_enum_faces_pass_through(self) -> None:
        """Faces that are plain JSON values are written unchanged."""
        text = Text([TextFragment("a", None), TextFragment("b", {"bold": True})])
        assert text_to_dicts(text) == [
            {"text": "a", "face": None},
            {"text": "b", "face": {"bold": True}},
        ]

    def test_custom_encoder(self, text: Text) -> None:
        data = text_to_dicts(text, lambda face: face.value)
        assert [entry["face"] for entry in data] == [0, 2, 0]

    def test_encode_face(self) -> None:
        assert encode_face(Face.PIPE) == "PIPE"
        assert encode_face("plain") == "plain"

    def test_empty(self) -> None:
        assert dumps(Text()) == "[]"


class TestLoads:
    """Parsing the JSON form back."""

    def test_round_trip(self, text: Text) -> None:
        """dumps then loads with the matching decoder is lossless."""
        assert loads(dumps(text), enum_face_decoder(Face)) == text

    def test_round_trip_without_decoder_keeps_raw_faces(self, text: Text) -> None:
        parsed = loads(dumps(text))
        assert [f.face for f in parsed] == ["DEFAULT", "STRONG", "DEFAULT"]
        assert parsed.plain() == text.plain()

    def test_round_trip_plain_faces(self) -> None:
        text = Text([TextFragment("x", None), TextFragment("y", [1, 2])])
        assert loads(dumps(text)) == Text(
            [TextFragment("x", None), TextFragment("y", [1, 2])]
        )

    def test_from_dicts(self) -> None:
        data = [{"text": "a", "face": "ERROR"}]
        assert text_from_dicts(data, enum_face_decoder(Face)) == Text(
            [TextFragment("a", Face.ERROR)]
        )

    @pytest.mark.parametrize(
        ("raw", "message"),
        [
            ("not json", "Invalid JSON"),
            ('{"text": "a", "face": null}', "Expected a JSON array"),
            ('["a"]', "Fragment 0 is not an object"),
            ('[{"text": "a"}]', "missing required field: face"),
            ('[{"face": null}]', "missing required field: text"),
            ('[{"text": 1, "face": null}]', "text must be a string"),
        ],
    )
    def test_invalid_input(self, raw: str, message: str) -> None:
        """Malformed payloads raise ValueError naming the problem."""
        with pytest.raises(ValueError, match=message):
            loads(raw)

    def test_unknown_enum_face(self) -> None:
        with pytest.raises(ValueError, match="Unknown Face face: 'BOLD'"):
            loads('[{"text": "a", "face": "BOLD"}]', enum_face_decoder(Face))
