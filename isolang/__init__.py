"""
isolang - Static lookup tables for ISO 639 language codes.

Converts between ISO 639-1 codes, ISO 639-3 codes, English names and
autonyms for the ~7,900 languages of the ISO 639-3 registry.

Examples:
    >>> from isolang import Language, get_default_table
    >>> table = get_default_table()
    >>> table.to_name(Language.from_639_1("de"))
    'German'
    >>> Language.from_639_3("spa").to_639_1()
    'es'
"""

from .config import LanguageTableConfig
from .language import LANGUAGES, Language
from .table import AllLanguages, LanguageTable, build_table, get_default_table

__version__ = "2.4.0"

__all__ = [
    # Languages
    "Language",
    "LANGUAGES",
    # Tables
    "LanguageTable",
    "LanguageTableConfig",
    "AllLanguages",
    "build_table",
    "get_default_table",
]
