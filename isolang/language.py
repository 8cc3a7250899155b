"""
The ISO 639 language enumeration.

:class:`Language` has one member per ISO 639-3 code. A member's integer value
is its discriminant, the index of the language in the generated tables under
:mod:`isolang.tables`. Member names are the title-cased 639-3 code, so German
is ``Language.Deu`` and the undetermined language is ``Language.Und``.

Only the code tables are needed here; English names and autonyms are
feature-gated and live on :class:`isolang.table.LanguageTable`.

Examples:
    >>> Language.from_639_1("de").to_639_3()
    'deu'
    >>> Language.from_639_3("spa").to_639_1()
    'es'
    >>> str(Language.Deu)
    'deu'
"""

import re
from enum import IntEnum
from typing import Any

from .tables.codes import CODES

_LOCALE_SEPARATORS = re.compile(r"[_\-.@]")


class _LanguageEnum(IntEnum):
    """Conversion methods shared by every :class:`Language` member."""

    def to_639_3(self) -> str:
        """
        Get the three-letter ISO 639-3 code of this language.

        Returns:
            The 639-3 code, e.g. ``"deu"``.
        """
        return CODES[self][0]

    def to_639_1(self) -> str | None:
        """
        Get the two-letter ISO 639-1 code of this language.

        Only the most common languages have one.

        Returns:
            The 639-1 code, e.g. ``"de"``, or None if there is none.
        """
        return CODES[self][1]

    @classmethod
    def from_639_1(cls, code: str) -> "Language | None":
        """
        Look up a language by its ISO 639-1 code.

        Args:
            code: Two-letter code. Matching is exact and case-sensitive.

        Returns:
            The language, or None if the input is not a known 639-1 code.
        """
        if len(code) != 2:
            return None
        return _TWO_TO_LANGUAGE.get(code)

    @classmethod
    def from_639_3(cls, code: str) -> "Language | None":
        """
        Look up a language by its ISO 639-3 code.

        Args:
            code: Three-letter code. Matching is exact and case-sensitive.

        Returns:
            The language, or None if the input is not a known 639-3 code.
        """
        if len(code) != 3:
            return None
        return _THREE_TO_LANGUAGE.get(code)

    @classmethod
    def from_locale(cls, locale: str) -> "Language | None":
        """
        Look up the language part of a locale string.

        Accepts forms such as ``"de_DE.UTF-8"``, ``"pt-BR"``, ``"sr@latin"``
        or a bare code. The part before the first separator is resolved as a
        639-1 code if it has two characters and as a 639-3 code if it has
        three.

        Args:
            locale: Locale string.

        Returns:
            The language, or None if the language part is not a known code.
        """
        code = _LOCALE_SEPARATORS.split(locale, maxsplit=1)[0]
        if len(code) == 2:
            return cls.from_639_1(code)
        return cls.from_639_3(code)

    @classmethod
    def default(cls) -> "Language":
        """Get the undetermined language (``und``)."""
        return _THREE_TO_LANGUAGE["und"]

    @classmethod
    def parse(cls, value: str) -> "Language":
        """
        Parse the serialized form of a language, its 639-3 code.

        Args:
            value: A 639-3 code such as ``"deu"``.

        Returns:
            The matching language.

        Raises:
            ValueError: If the value is not a known 639-3 code.
        """
        language = cls.from_639_3(value)
        if language is None:
            raise ValueError(f"Unknown ISO 639-3 code: {value!r}")
        return language

    def __str__(self) -> str:
        """String representation is the 639-3 code."""
        return self.to_639_3()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_639_3(), format_spec)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        # Validates from a 639-3 string (or a member), serializes to the string.
        from pydantic_core import core_schema

        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_639_3
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return {
            "type": "string",
            "pattern": "^[a-z]{3}$",
            "description": "ISO 639-3 language code",
            "examples": ["deu"],
        }


Language = _LanguageEnum(
    "Language",
    [(code_3.title(), index) for index, (code_3, _) in enumerate(CODES)],
    module=__name__,
    qualname="Language",
)
Language.__doc__ = """ISO 639 language, one member per ISO 639-3 code."""

# Every member in declaration order
LANGUAGES: tuple = tuple(Language)

_THREE_TO_LANGUAGE: dict[str, Language] = {}
_TWO_TO_LANGUAGE: dict[str, Language] = {}
for _language, (_code_3, _code_1) in zip(LANGUAGES, CODES):
    _THREE_TO_LANGUAGE[_code_3] = _language
    if _code_1 is not None:
        _TWO_TO_LANGUAGE[_code_1] = _language
del _language, _code_3, _code_1
