"""Tests for configured language tables."""

import pytest

from isolang import (
    AllLanguages,
    Language,
    LanguageTable,
    LanguageTableConfig,
    build_table,
    get_default_table,
)


@pytest.fixture
def full_table() -> LanguageTable:
    """Table with every feature enabled."""
    return build_table(
        LanguageTableConfig(
            english_names=True,
            lowercase_names=True,
            local_names=True,
            list_languages=True,
        )
    )


@pytest.fixture
def codes_only_table() -> LanguageTable:
    """Table without any optional feature."""
    return build_table(LanguageTableConfig(english_names=False))


class TestDefaultTable:
    """Tests for the default configuration (English names only)."""

    def test_german_example(self) -> None:
        table = get_default_table()
        language = table.from_639_1("de")
        assert language is Language.Deu
        assert table.to_name(language) == "German"

    def test_spanish_example(self) -> None:
        table = get_default_table()
        assert table.to_639_1(table.from_639_3("spa")) == "es"

    def test_unknown_code(self) -> None:
        assert get_default_table().from_639_3("xyz") is None

    def test_default(self) -> None:
        table = get_default_table()
        assert table.default() is Language.Und
        assert table.to_639_1(table.default()) is None
        assert table.to_639_3(table.default()) == "und"
        assert table.to_name(table.default()) == "Undetermined"

    def test_cached(self) -> None:
        """Test that the default table is built once per process."""
        assert get_default_table() is get_default_table()

    def test_names_case_sensitive(self) -> None:
        table = get_default_table()
        assert table.from_name("German") is Language.Deu
        assert table.from_name("german") is None
        assert table.from_name("GERMAN") is None

    def test_no_autonyms_or_listing(self) -> None:
        table = get_default_table()
        assert not hasattr(table, "from_autonym")
        assert not hasattr(table, "to_autonym")
        assert not hasattr(table, "all_languages")

    def test_is_language_table(self) -> None:
        assert isinstance(get_default_table(), LanguageTable)


class TestEnglishNames:
    """Tests for English name lookups."""

    def test_comment_is_stripped(self) -> None:
        """Test that both Swahili entries are named without registry comments."""
        table = get_default_table()
        assert table.to_name(Language.Swa) == "Swahili"
        assert table.to_name(Language.Swh) == "Swahili"

    def test_duplicate_name_first_match(self) -> None:
        """Test that duplicated names resolve to the first declared entry."""
        table = get_default_table()
        assert table.from_name("Swahili") is Language.Swa
        assert table.from_name("Ainu") is Language.Aib

    def test_every_name_resolves_to_a_language_with_that_name(self) -> None:
        table = get_default_table()
        for language in Language:
            name = table.to_name(language)
            assert name
            found = table.from_name(name)
            assert found is not None
            assert found <= language
            assert table.to_name(found) == name

    def test_unknown_name(self) -> None:
        table = get_default_table()
        assert table.from_name("Klingonese") is None
        assert table.from_name("") is None

    def test_lowercase_names(self) -> None:
        table = build_table(LanguageTableConfig(lowercase_names=True))
        assert table.from_name("spanish") is Language.Spa
        assert table.from_name("GERMAN") is table.from_name("German") is Language.Deu

    def test_lowercase_keeps_display_name(self) -> None:
        table = build_table(LanguageTableConfig(lowercase_names=True))
        assert table.to_name(Language.Spa) == "Spanish"


class TestLocalNames:
    """Tests for autonym lookups."""

    def test_to_autonym(self, full_table: LanguageTable) -> None:
        assert full_table.to_autonym(Language.Deu) == "Deutsch"
        assert full_table.to_autonym(Language.Eng) == "English"
        assert full_table.to_autonym(Language.Ell) == "Ελληνικά"
        assert full_table.to_autonym(Language.Zho) == "中文"

    def test_to_autonym_unknown(self, full_table: LanguageTable) -> None:
        assert full_table.to_autonym(Language.Aaa) is None
        assert full_table.to_autonym(Language.Und) is None

    def test_from_autonym(self, full_table: LanguageTable) -> None:
        assert full_table.from_autonym("Español") is Language.Spa
        assert full_table.from_autonym("français") is Language.Fra
        assert full_table.from_autonym("English") is Language.Eng
        assert full_table.from_autonym("Հայերեն") is Language.Hye

    def test_from_autonym_lowercase(self, full_table: LanguageTable) -> None:
        assert full_table.from_autonym("deutsch") is Language.Deu
        assert full_table.from_autonym("ESPAÑOL") is Language.Spa

    def test_from_autonym_case_sensitive(self) -> None:
        table = build_table(LanguageTableConfig(local_names=True))
        assert table.from_autonym("Deutsch") is Language.Deu
        assert table.from_autonym("deutsch") is None

    def test_autonyms_without_english_names(self) -> None:
        table = build_table(LanguageTableConfig(english_names=False, local_names=True))
        assert table.from_autonym("Deutsch") is Language.Deu
        assert not hasattr(table, "from_name")

    def test_autonym_round_trip(self, full_table: LanguageTable) -> None:
        known = [
            language for language in Language if full_table.to_autonym(language)
        ]
        assert len(known) == 190
        for language in known:
            assert full_table.from_autonym(full_table.to_autonym(language)) is language


class TestFromStrAny:
    """Tests for the combined lookup and its priority order."""

    def test_codes(self) -> None:
        table = get_default_table()
        assert table.from_str_any("de") is Language.Deu
        assert table.from_str_any("deu") is Language.Deu

    def test_name(self) -> None:
        assert get_default_table().from_str_any("German") is Language.Deu

    def test_639_1_before_name(self, full_table: LanguageTable) -> None:
        """Test that "ga" (Irish) wins over the lower-cased name of Ga."""
        assert full_table.from_name("ga") is Language.Gaa
        assert full_table.from_str_any("ga") is Language.Gle

    def test_name_when_no_code_matches(self) -> None:
        assert get_default_table().from_str_any("Ga") is Language.Gaa

    def test_autonym(self, full_table: LanguageTable) -> None:
        assert full_table.from_str_any("Deutsch") is Language.Deu
        assert full_table.from_str_any("Ελληνικά") is Language.Ell
        assert full_table.from_str_any("Føroyskt") is Language.Fao

    def test_autonym_disabled(self) -> None:
        assert get_default_table().from_str_any("Deutsch") is None

    def test_codes_only(self, codes_only_table: LanguageTable) -> None:
        assert codes_only_table.from_str_any("es") is Language.Spa
        assert codes_only_table.from_str_any("Spanish") is None

    @pytest.mark.parametrize("value", ["", "x", "xyz", "Klingonese"])
    def test_unknown(self, full_table: LanguageTable, value: str) -> None:
        assert full_table.from_str_any(value) is None


class TestFeatureAbsence:
    """Tests that disabled features have no API surface."""

    def test_codes_only(self, codes_only_table: LanguageTable) -> None:
        for attribute in (
            "from_name",
            "to_name",
            "from_autonym",
            "to_autonym",
            "all_languages",
        ):
            assert not hasattr(codes_only_table, attribute)

    def test_codes_only_still_converts(self, codes_only_table: LanguageTable) -> None:
        assert codes_only_table.from_639_1("de") is Language.Deu
        assert codes_only_table.to_639_3(Language.Deu) == "deu"
        assert codes_only_table.default() is Language.Und

    def test_missing_method_raises_attribute_error(
        self, codes_only_table: LanguageTable
    ) -> None:
        with pytest.raises(AttributeError):
            codes_only_table.to_name(Language.Deu)

    def test_full_table_has_everything(self, full_table: LanguageTable) -> None:
        for attribute in (
            "from_name",
            "to_name",
            "from_autonym",
            "to_autonym",
            "all_languages",
        ):
            assert hasattr(full_table, attribute)

    def test_from_config(self) -> None:
        table = LanguageTable.from_config(LanguageTableConfig(list_languages=True))
        assert hasattr(table, "all_languages")
        assert hasattr(table, "from_name")

    def test_repr(self, codes_only_table: LanguageTable) -> None:
        assert repr(codes_only_table) == "LanguageTable(features=[])"


class TestAllLanguages:
    """Tests for the enumeration of every language."""

    def test_type_and_length(self, full_table: LanguageTable) -> None:
        languages = full_table.all_languages()
        assert isinstance(languages, AllLanguages)
        assert len(languages) == 7910

    def test_declaration_order(self, full_table: LanguageTable) -> None:
        languages = list(full_table.all_languages())
        assert languages[0] is Language.Aaa
        assert languages[-1] is Language.Zzj
        assert languages == sorted(languages)

    def test_restartable(self, full_table: LanguageTable) -> None:
        languages = full_table.all_languages()
        assert list(languages) == list(languages)

    def test_indexing(self, full_table: LanguageTable) -> None:
        languages = full_table.all_languages()
        assert languages[1538] is Language.Deu
        assert languages[-1] is Language.Zzj
        assert list(languages[:2]) == [Language.Aaa, Language.Aab]

    def test_contains(self, full_table: LanguageTable) -> None:
        languages = full_table.all_languages()
        assert Language.Deu in languages
        assert "deu" not in languages

    def test_contains_matches_iteration(self, full_table: LanguageTable) -> None:
        """Test that membership agrees with the listed values."""
        languages = full_table.all_languages()
        assert 1538 in languages
        assert (1538 in languages) == (1538 in list(languages))
        assert 7910 not in languages
