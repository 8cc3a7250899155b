"""Tests for the Language enumeration."""

import pickle

import pytest

from isolang.language import LANGUAGES, Language
from isolang.tables.codes import CODES


class TestCodeLookups:
    """Tests for 639-1 and 639-3 conversions."""

    def test_from_639_1(self) -> None:
        """Test the German example."""
        assert Language.from_639_1("de") is Language.Deu

    def test_from_639_3(self) -> None:
        """Test the Spanish example."""
        language = Language.from_639_3("spa")
        assert language is Language.Spa
        assert language.to_639_1() == "es"

    def test_unknown_639_3(self) -> None:
        """Test that an unknown three-letter code is absent."""
        assert Language.from_639_3("xyz") is None

    def test_unknown_639_1(self) -> None:
        """Test that an unknown two-letter code is absent."""
        assert Language.from_639_1("xx") is None

    @pytest.mark.parametrize("code", ["", "d", "deu", "deut", "…"])
    def test_from_639_1_wrong_length(self, code: str) -> None:
        """Test that inputs which are not two characters are absent."""
        assert Language.from_639_1(code) is None

    @pytest.mark.parametrize("code", ["", "de", "deut", "…"])
    def test_from_639_3_wrong_length(self, code: str) -> None:
        """Test that inputs which are not three characters are absent."""
        assert Language.from_639_3(code) is None

    def test_codes_are_case_sensitive(self) -> None:
        """Test that registry codes only match in lower case."""
        assert Language.from_639_1("DE") is None
        assert Language.from_639_3("DEU") is None

    def test_no_639_1_code(self) -> None:
        """Test a language without a two-letter code."""
        assert Language.Gha.to_639_1() is None
        assert Language.Swh.to_639_1() is None

    def test_to_639_3(self) -> None:
        assert Language.Deu.to_639_3() == "deu"


class TestRoundTrips:
    """Tests covering every entry of the table."""

    def test_639_3_round_trip(self) -> None:
        """Test from_639_3(to_639_3(E)) == E for all entries."""
        for language in Language:
            assert Language.from_639_3(language.to_639_3()) is language

    def test_639_1_round_trip(self) -> None:
        """Test from_639_1(to_639_1(E)) == E for entries with a 639-1 code."""
        with_code = [language for language in Language if language.to_639_1()]
        assert len(with_code) == 184
        for language in with_code:
            assert Language.from_639_1(language.to_639_1()) is language

    def test_both_codes_agree(self) -> None:
        """Test that both codes of a language resolve to the same member."""
        for language in Language:
            code_1 = language.to_639_1()
            if code_1 is not None:
                assert Language.from_639_1(code_1) is Language.from_639_3(
                    language.to_639_3()
                )

    def test_639_3_codes_unique(self) -> None:
        codes = [code_3 for code_3, _ in CODES]
        assert len(codes) == len(set(codes))
        assert all(len(code) == 3 for code in codes)

    def test_639_1_codes_unique(self) -> None:
        codes = [code_1 for _, code_1 in CODES if code_1 is not None]
        assert len(codes) == len(set(codes))
        assert all(len(code) == 2 for code in codes)


class TestEnumeration:
    """Tests for discriminants and member naming."""

    def test_member_count(self) -> None:
        assert len(Language) == len(CODES) == 7910
        assert LANGUAGES == tuple(Language)

    def test_discriminant_is_table_index(self) -> None:
        """Test that member values index the generated tables."""
        assert int(Language.Aaa) == 0
        assert int(Language.Deu) == 1538
        assert CODES[Language.Deu] == ("deu", "de")

    def test_declaration_order(self) -> None:
        """Test that iteration follows the discriminant."""
        assert [int(language) for language in Language] == list(range(len(CODES)))

    def test_member_names(self) -> None:
        """Test that member names are title-cased 639-3 codes."""
        assert Language["Deu"] is Language.Deu
        assert Language.Eng.name == "Eng"

    def test_ordering(self) -> None:
        assert Language.Aaa < Language.Deu < Language.Zzj

    def test_pickle(self) -> None:
        assert pickle.loads(pickle.dumps(Language.Fra)) is Language.Fra


class TestDefault:
    """Tests for the undetermined language."""

    def test_default_is_und(self) -> None:
        assert Language.default() is Language.from_639_3("und")
        assert Language.default() is Language.Und

    def test_default_has_no_639_1(self) -> None:
        assert Language.default().to_639_1() is None


class TestLocale:
    """Tests for locale parsing."""

    @pytest.mark.parametrize(
        "locale, expected",
        [
            ("de_DE.UTF-8", "deu"),
            ("de", "deu"),
            ("pt-BR", "por"),
            ("sr@latin", "srp"),
            ("zh_CN.GB2312", "zho"),
            ("fra_FR", "fra"),
            ("en.UTF-8", "eng"),
        ],
    )
    def test_from_locale(self, locale: str, expected: str) -> None:
        language = Language.from_locale(locale)
        assert language is not None
        assert language.to_639_3() == expected

    @pytest.mark.parametrize("locale", ["", "C", "POSIX", "xx_XX", "_DE", "german"])
    def test_from_locale_unknown(self, locale: str) -> None:
        assert Language.from_locale(locale) is None


class TestSerializedForm:
    """Tests for the 639-3 string form."""

    def test_str(self) -> None:
        assert str(Language.Deu) == "deu"

    def test_format(self) -> None:
        assert f"{Language.Spa}" == "spa"
        assert f"[{Language.Spa:>5}]" == "[  spa]"

    def test_parse(self) -> None:
        assert Language.parse("deu") is Language.Deu

    @pytest.mark.parametrize("value", ["xyz", "de", "", "Deu", "deu "])
    def test_parse_invalid(self, value: str) -> None:
        with pytest.raises(ValueError, match="Unknown ISO 639-3 code"):
            Language.parse(value)
