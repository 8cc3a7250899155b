"""
Generated static language tables.

Each module holds one tuple indexed by the integer value of a
:class:`isolang.Language` member. The modules are written by
``python -m isolang generate`` from the registry files under ``data/``.
Optional tables (English names, autonyms) are only imported by a
:class:`isolang.LanguageTable` configured to use them.
"""
