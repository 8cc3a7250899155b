"""
SQLAlchemy column type for :class:`isolang.Language`.

Stores a language as its ISO 639-3 code in a ``VARCHAR(3)`` column.

Examples:
    >>> from sqlalchemy import Column, Integer
    >>> from sqlalchemy.orm import declarative_base
    >>> Base = declarative_base()
    >>> class Book(Base):
    ...     __tablename__ = "book"
    ...     id = Column(Integer, primary_key=True)
    ...     language = Column(LanguageType())
"""

from typing import Any

from sqlalchemy.types import String, TypeDecorator

from .language import Language


class LanguageType(TypeDecorator):
    """Persist :class:`Language` members as ISO 639-3 text."""

    impl = String(3)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        if not isinstance(value, Language):
            value = Language.parse(value)
        return value.to_639_3()

    def process_result_value(self, value: str | None, dialect: Any) -> Language | None:
        if value is None:
            return None
        language = Language.from_639_3(value)
        if language is None:
            raise ValueError(f"Unknown ISO 639-3 code in database: {value!r}")
        return language

    @property
    def python_type(self) -> type:
        return Language
