"""
Configured lookup tables over :class:`isolang.language.Language`.

A :class:`LanguageTable` always supports the code lookups. English names,
autonyms and the enumeration of all languages are added by mixins chosen from
the :class:`LanguageTableConfig`, so a table built without a feature has no
method for it and never imports that feature's data module.

Examples:
    >>> table = build_table(LanguageTableConfig(lowercase_names=True))
    >>> table.to_name(table.from_639_1("de"))
    'German'
    >>> table.from_name("spanish").to_639_3()
    'spa'
"""

from collections.abc import Callable, Iterator, Sequence
from functools import lru_cache

from .config import LanguageTableConfig
from .language import LANGUAGES, Language


def _build_name_index(
    names: Sequence[str | None], lowercase: bool
) -> dict[str, Language]:
    """Map names to languages; the first language declaring a name wins."""
    index: dict[str, Language] = {}
    for language, name in zip(LANGUAGES, names):
        if name is None:
            continue
        key = name.lower() if lowercase else name
        index.setdefault(key, language)
    return index


class AllLanguages(Sequence):
    """
    Every language in declaration order.

    A read-only view: iterating it twice yields the same languages in the
    same order.
    """

    def __len__(self) -> int:
        return len(LANGUAGES)

    def __getitem__(self, index):
        return LANGUAGES[index]

    def __iter__(self) -> Iterator[Language]:
        return iter(LANGUAGES)

    def __repr__(self) -> str:
        return f"AllLanguages(len={len(self)})"


class LanguageTable:
    """
    Lookup facade for ISO 639 codes and, depending on configuration, names.

    Use :func:`build_table` (or :meth:`from_config`) rather than instantiating
    this class directly; only the built class carries the feature mixins.
    """

    def __init__(self, config: LanguageTableConfig):
        """
        Initialize the table with a configuration.

        Args:
            config: Feature configuration for this table.
        """
        self.config = config

    @classmethod
    def from_config(cls, config: LanguageTableConfig | None = None) -> "LanguageTable":
        """Build a table with the mixins enabled by ``config``."""
        return build_table(config)

    def from_639_1(self, code: str) -> Language | None:
        return Language.from_639_1(code)

    def from_639_3(self, code: str) -> Language | None:
        return Language.from_639_3(code)

    def to_639_1(self, language: Language) -> str | None:
        return language.to_639_1()

    def to_639_3(self, language: Language) -> str:
        return language.to_639_3()

    def default(self) -> Language:
        return Language.default()

    def from_str_any(self, code_or_name: str) -> Language | None:
        """
        Look up a language by any supported representation.

        Tries, in order: ISO 639-1 code, ISO 639-3 code, English name (if
        enabled) and autonym (if enabled). Standardized codes take precedence
        over free-text names.

        Args:
            code_or_name: A code or a name.

        Returns:
            The first match, or None if no lookup succeeds.
        """
        for lookup in self._lookups():
            language = lookup(code_or_name)
            if language is not None:
                return language
        return None

    def _lookups(self) -> list[Callable[[str], Language | None]]:
        lookups = [Language.from_639_1, Language.from_639_3]
        if self.config.english_names:
            lookups.append(self.from_name)
        if self.config.local_names:
            lookups.append(self.from_autonym)
        return lookups

    def __repr__(self) -> str:
        enabled = [name for name, value in self.config.to_dict().items() if value]
        return f"LanguageTable(features={enabled})"


class EnglishNamesMixin:
    """English name lookups; present only with ``english_names``."""

    def __init__(self, config: LanguageTableConfig):
        super().__init__(config)
        from .tables.english import NAMES

        self._names = NAMES
        self._name_index = _build_name_index(NAMES, config.lowercase_names)

    def to_name(self, language: Language) -> str:
        """
        Get the English name of a language.

        Registry comments are not included, so both the Swahili
        macrolanguage and the individual language are named "Swahili".
        """
        return self._names[language]

    def from_name(self, name: str) -> Language | None:
        """
        Look up a language by its English name.

        Matching is exact unless the table was built with
        ``lowercase_names``, in which case it ignores case.

        Args:
            name: English name, e.g. ``"German"``.

        Returns:
            The first language with that name, or None.
        """
        if self.config.lowercase_names:
            name = name.lower()
        return self._name_index.get(name)


class LocalNamesMixin:
    """Autonym lookups; present only with ``local_names``."""

    def __init__(self, config: LanguageTableConfig):
        super().__init__(config)
        from .tables.autonyms import AUTONYMS

        self._autonyms = AUTONYMS
        self._autonym_index = _build_name_index(AUTONYMS, config.lowercase_names)

    def to_autonym(self, language: Language) -> str | None:
        """Get the name of a language in that language, if known."""
        return self._autonyms[language]

    def from_autonym(self, name: str) -> Language | None:
        """
        Look up a language by its autonym, e.g. ``"Deutsch"``.

        Uses the same matching policy as English names.
        """
        if self.config.lowercase_names:
            name = name.lower()
        return self._autonym_index.get(name)


class ListLanguagesMixin:
    """Enumeration of all languages; present only with ``list_languages``."""

    def all_languages(self) -> AllLanguages:
        """Get every language in declaration order."""
        return AllLanguages()


@lru_cache(maxsize=None)
def _table_class(
    english_names: bool, local_names: bool, list_languages: bool
) -> type[LanguageTable]:
    bases: list[type] = []
    if english_names:
        bases.append(EnglishNamesMixin)
    if local_names:
        bases.append(LocalNamesMixin)
    if list_languages:
        bases.append(ListLanguagesMixin)
    if not bases:
        return LanguageTable
    return type("LanguageTable", (*bases, LanguageTable), {"__module__": __name__})


def build_table(config: LanguageTableConfig | None = None) -> LanguageTable:
    """
    Build a lookup table for a configuration.

    Args:
        config: Feature configuration (None = defaults, English names only).

    Returns:
        A table exposing exactly the operations the configuration enables.
    """
    config = config or LanguageTableConfig()
    table_class = _table_class(
        config.english_names, config.local_names, config.list_languages
    )
    return table_class(config)


@lru_cache(maxsize=None)
def get_default_table() -> LanguageTable:
    """Get the process-wide table for the default configuration."""
    return build_table()
