"""Language name and code mapping tests."""

import pytest

from typed_whisper.errors import ErrorCode, InvalidLanguageString
from typed_whisper.language import LANGUAGE_CODES, Language


def test_language_to_string():
    assert Language.ENGLISH.to_string() == "english"
    assert Language.JAPANESE.to_string() == "japanese"
    assert Language.HAITIAN_CREOLE.to_string() == "haitian creole"


def test_str_matches_canonical_form():
    assert str(Language.HAITIAN_CREOLE) == "haitian creole"
    assert f"{Language.GERMAN}" == "german"


@pytest.mark.parametrize("language", list(Language))
def test_every_language_round_trips(language):
    assert Language.from_string(language.to_string()) is language


def test_canonical_forms_are_lowercase_and_unique():
    values = [language.value for language in Language]
    assert len(values) == len(set(values)) == 99
    assert all(value == value.lower() for value in values)


def test_from_string_rejects_unknown_value():
    with pytest.raises(InvalidLanguageString) as excinfo:
        Language.from_string("not-a-real-language")

    assert excinfo.value.input == "not-a-real-language"
    assert excinfo.value.code is ErrorCode.INVALID_LANGUAGE_STRING
    assert "not-a-real-language" in str(excinfo.value)


def test_from_string_is_case_sensitive():
    with pytest.raises(InvalidLanguageString):
        Language.from_string("English")


def test_from_string_rejects_underscored_name():
    with pytest.raises(InvalidLanguageString):
        Language.from_string("haitian_creole")


def test_every_language_has_a_unique_code():
    assert set(LANGUAGE_CODES) == set(Language)
    assert len(set(LANGUAGE_CODES.values())) == len(LANGUAGE_CODES)


class TestCodes:
    def test_common_codes(self):
        assert Language.ENGLISH.code == "en"
        assert Language.HAWAIIAN.code == "haw"
        assert Language.JAVANESE.code == "jw"
        assert Language.HAITIAN_CREOLE.code == "ht"

    def test_from_code(self):
        assert Language.from_code("ja") is Language.JAPANESE

    def test_from_code_rejects_unknown(self):
        with pytest.raises(InvalidLanguageString) as excinfo:
            Language.from_code("xx")
        assert excinfo.value.input == "xx"

    def test_from_code_rejects_name(self):
        with pytest.raises(InvalidLanguageString):
            Language.from_code("english")


class TestFromWhisper:
    def test_accepts_name(self):
        assert Language.from_whisper("korean") is Language.KOREAN

    def test_accepts_code(self):
        assert Language.from_whisper("ko") is Language.KOREAN

    def test_rejects_unknown(self):
        with pytest.raises(InvalidLanguageString):
            Language.from_whisper("klingon")

    def test_code_match_is_case_sensitive(self):
        with pytest.raises(InvalidLanguageString) as excinfo:
            Language.from_whisper("EN")
        assert excinfo.value.input == "EN"
