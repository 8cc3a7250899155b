"""Tests for the SQLAlchemy language column type."""

import pytest

sqlalchemy = pytest.importorskip("sqlalchemy")

from sqlalchemy import Column, Integer, MetaData, Table, create_engine, insert, select, text  # noqa: E402

from isolang import Language  # noqa: E402
from isolang.sqlalchemy_type import LanguageType  # noqa: E402


@pytest.fixture
def books():
    """In-memory SQLite table with a language column."""
    engine = create_engine("sqlite://")
    metadata = MetaData()
    table = Table(
        "book",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("language", LanguageType(), nullable=True),
    )
    metadata.create_all(engine)
    yield engine, table
    engine.dispose()


class TestLanguageType:
    """Tests for storing and loading languages."""

    def test_round_trip(self, books) -> None:
        engine, table = books
        with engine.begin() as conn:
            conn.execute(insert(table), [{"id": 1, "language": Language.Deu}])
            assert conn.execute(select(table.c.language)).scalar_one() is Language.Deu

    def test_stored_as_639_3(self, books) -> None:
        engine, table = books
        with engine.begin() as conn:
            conn.execute(insert(table), [{"id": 1, "language": Language.Spa}])
            stored = conn.execute(text("SELECT language FROM book")).scalar_one()
        assert stored == "spa"

    def test_bind_string(self, books) -> None:
        engine, table = books
        with engine.begin() as conn:
            conn.execute(insert(table), [{"id": 1, "language": "fra"}])
            assert conn.execute(select(table.c.language)).scalar_one() is Language.Fra

    def test_null(self, books) -> None:
        engine, table = books
        with engine.begin() as conn:
            conn.execute(insert(table), [{"id": 1, "language": None}])
            assert conn.execute(select(table.c.language)).scalar_one() is None

    def test_bind_unknown_code(self, books) -> None:
        engine, table = books
        with pytest.raises(
            (sqlalchemy.exc.StatementError, ValueError), match="Unknown ISO 639-3 code"
        ):
            with engine.begin() as conn:
                conn.execute(insert(table), [{"id": 1, "language": "xyz"}])

    def test_load_unknown_code(self, books) -> None:
        engine, table = books
        with engine.begin() as conn:
            conn.execute(text("INSERT INTO book (id, language) VALUES (1, 'xyz')"))
            with pytest.raises(
                (sqlalchemy.exc.StatementError, ValueError),
                match="Unknown ISO 639-3 code",
            ):
                conn.execute(select(table.c.language)).scalar_one()

    def test_python_type(self) -> None:
        assert LanguageType().python_type is Language
