"""Conversion of raw whisper results into Transcription values."""

import pytest

from typed_whisper.errors import (
    ExternalRuntimeError,
    InvalidLanguageString,
    MissingResultError,
)
from typed_whisper.language import Language
from typed_whisper.transcription import Segment, Transcription


def _raw_result(**overrides):
    result = {
        "text": " Hello world. How are you?",
        "segments": [
            {"id": 0, "text": " Hello world.", "start": 0.0, "end": 1.2, "tokens": [1, 2]},
            {"id": 1, "text": " How are you?", "start": 1.2, "end": 2.5, "tokens": [3]},
        ],
        "language": "en",
    }
    result.update(overrides)
    return result


def test_well_formed_result_preserves_segments():
    transcription = Transcription.from_raw(_raw_result())

    assert transcription.text == " Hello world. How are you?"
    assert transcription.segments == (
        Segment(" Hello world.", 0.0, 1.2),
        Segment(" How are you?", 1.2, 2.5),
    )
    assert transcription.language is Language.ENGLISH


def test_hello_world_scenario():
    raw = {
        "text": "Hello world.",
        "segments": [{"text": "Hello world.", "start": 0.0, "end": 1.2}],
        "language": "english",
    }

    assert Transcription.from_raw(raw) == Transcription(
        text="Hello world.",
        segments=(Segment(text="Hello world.", start=0.0, end=1.2),),
        language=Language.ENGLISH,
    )


def test_segment_order_is_kept_as_reported():
    segments = [
        {"text": "b", "start": 5.0, "end": 6.0},
        {"text": "a", "start": 1.0, "end": 2.0},
    ]
    transcription = Transcription.from_raw(_raw_result(segments=segments))
    assert [seg.text for seg in transcription.segments] == ["b", "a"]


def test_empty_segments_allowed():
    transcription = Transcription.from_raw(_raw_result(text="", segments=[]))
    assert transcription.segments == ()


def test_integer_timestamps_become_floats():
    segments = [{"text": "x", "start": 0, "end": 2}]
    segment = Transcription.from_raw(_raw_result(segments=segments)).segments[0]
    assert segment.start == 0.0
    assert isinstance(segment.end, float)


@pytest.mark.parametrize("field", ["text", "segments", "language"])
def test_missing_top_level_field(field):
    raw = _raw_result()
    del raw[field]

    with pytest.raises(MissingResultError) as excinfo:
        Transcription.from_raw(raw)

    assert excinfo.value.field == field
    assert field in str(excinfo.value)


@pytest.mark.parametrize("field", ["text", "start", "end"])
def test_missing_segment_field_aborts_conversion(field):
    raw = _raw_result()
    del raw["segments"][1][field]

    with pytest.raises(MissingResultError) as excinfo:
        Transcription.from_raw(raw)

    assert excinfo.value.field == field


def test_unknown_language_is_rejected():
    with pytest.raises(InvalidLanguageString) as excinfo:
        Transcription.from_raw(_raw_result(language="elvish"))
    assert excinfo.value.input == "elvish"


def test_non_mapping_result():
    with pytest.raises(ExternalRuntimeError, match="mapping"):
        Transcription.from_raw(["text", "segments"])


class TestTypeMismatches:
    def test_text_not_string(self):
        with pytest.raises(ExternalRuntimeError):
            Transcription.from_raw(_raw_result(text=42))

    def test_segments_not_list(self):
        with pytest.raises(ExternalRuntimeError):
            Transcription.from_raw(_raw_result(segments="oops"))

    def test_segment_not_mapping(self):
        with pytest.raises(ExternalRuntimeError):
            Transcription.from_raw(_raw_result(segments=["not_a_dict"]))

    def test_start_not_number(self):
        segments = [{"text": "x", "start": "bad", "end": 1.0}]
        with pytest.raises(ExternalRuntimeError):
            Transcription.from_raw(_raw_result(segments=segments))

    def test_bool_timestamp_rejected(self):
        segments = [{"text": "x", "start": 0.0, "end": True}]
        with pytest.raises(ExternalRuntimeError):
            Transcription.from_raw(_raw_result(segments=segments))

    def test_language_not_string(self):
        with pytest.raises(ExternalRuntimeError, match="language must be a string"):
            Transcription.from_raw(_raw_result(language=42))

    def test_language_none_rejected(self):
        with pytest.raises(ExternalRuntimeError):
            Transcription.from_raw(_raw_result(language=None))

    def test_segment_text_none_rejected(self):
        segments = [{"text": None, "start": 0.0, "end": 1.0}]
        with pytest.raises(ExternalRuntimeError):
            Transcription.from_raw(_raw_result(segments=segments))


def test_transcription_is_immutable():
    transcription = Transcription.from_raw(_raw_result())
    with pytest.raises(AttributeError):
        transcription.text = "changed"
