"""Tests for the static table generator."""

import ast
from pathlib import Path

import pytest

from isolang.generate import (
    HEADER,
    RENDERERS,
    LangCode,
    generate,
    read_autonyms_table,
    read_iso_table,
    render_autonyms,
    render_codes,
    render_english_names,
)

REPO_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = REPO_ROOT / "data"
TABLES_DIR = REPO_ROOT / "isolang" / "tables"

ISO_HEADER = "Id\tPart2B\tPart2T\tPart1\tScope\tLanguage_Type\tRef_Name\tComment\n"
AUTONYMS_HEADER = "code_3\tcode_1\tname\tautonym\n"


def write_tables(tmp_path: Path, iso_rows: list[str], autonym_rows: list[str]):
    iso_path = tmp_path / "iso-639-3.tab"
    iso_path.write_text(ISO_HEADER + "".join(iso_rows), encoding="utf-8")
    autonyms_path = tmp_path / "autonyms.tsv"
    autonyms_path.write_text(AUTONYMS_HEADER + "".join(autonym_rows), encoding="utf-8")
    return iso_path, autonyms_path


SAMPLE_ISO_ROWS = [
    "deu\tger\tdeu\tde\tI\tL\tGerman\t\n",
    "gha\t\t\t\tI\tL\tGhadamès\t\n",
    "swa\tswa\tswa\tsw\tM\tL\tSwahili (macrolanguage)\t\n",
    "und\tund\tund\t\tS\tS\tUndetermined\t\n",
]
SAMPLE_AUTONYM_ROWS = [
    "deu\tde\tGerman\tDeutsch\n",
    "swa\tsw\tSwahili\t\n",
]


class TestReadTables:
    """Tests for parsing the registry files."""

    def test_read_autonyms_table(self, tmp_path: Path) -> None:
        _, autonyms_path = write_tables(tmp_path, [], SAMPLE_AUTONYM_ROWS)
        assert read_autonyms_table(autonyms_path) == {"deu": "Deutsch", "swa": None}

    def test_read_iso_table(self, tmp_path: Path) -> None:
        iso_path, autonyms_path = write_tables(
            tmp_path, SAMPLE_ISO_ROWS, SAMPLE_AUTONYM_ROWS
        )
        codes = read_iso_table(iso_path, autonyms_path)
        assert codes == [
            LangCode("deu", "de", "German", "Deutsch"),
            LangCode("gha", None, "Ghadamès", None),
            LangCode("swa", "sw", "Swahili", None),
            LangCode("und", None, "Undetermined", None),
        ]

    def test_crlf_and_blank_lines(self, tmp_path: Path) -> None:
        """Test that Windows line endings and blank lines are tolerated."""
        rows = [row.replace("\n", "\r\n") for row in SAMPLE_ISO_ROWS] + ["\r\n"]
        iso_path, autonyms_path = write_tables(tmp_path, rows, [])
        codes = read_iso_table(iso_path, autonyms_path)
        assert [lang.code_3 for lang in codes] == ["deu", "gha", "swa", "und"]
        assert codes[0].name_en == "German"

    def test_duplicate_639_3(self, tmp_path: Path) -> None:
        rows = SAMPLE_ISO_ROWS + ["deu\t\t\t\tI\tL\tOther German\t\n"]
        iso_path, autonyms_path = write_tables(tmp_path, rows, [])
        with pytest.raises(ValueError, match="duplicate ISO 639-3 code 'deu'"):
            read_iso_table(iso_path, autonyms_path)

    def test_duplicate_639_1(self, tmp_path: Path) -> None:
        rows = SAMPLE_ISO_ROWS + ["gsw\t\t\tde\tI\tL\tSwiss German\t\n"]
        iso_path, autonyms_path = write_tables(tmp_path, rows, [])
        with pytest.raises(ValueError, match="duplicate ISO 639-1 code 'de'"):
            read_iso_table(iso_path, autonyms_path)

    def test_empty_639_3(self, tmp_path: Path) -> None:
        rows = ["\t\t\t\tI\tL\tNameless\t\n"]
        iso_path, autonyms_path = write_tables(tmp_path, rows, [])
        with pytest.raises(ValueError, match="empty ISO 639-3 code"):
            read_iso_table(iso_path, autonyms_path)

    def test_short_row(self, tmp_path: Path) -> None:
        iso_path, autonyms_path = write_tables(tmp_path, ["deu\tger\n"], [])
        with pytest.raises(ValueError, match=r"iso-639-3.tab:2"):
            read_iso_table(iso_path, autonyms_path)


class TestRender:
    """Tests for module rendering."""

    CODES = [
        LangCode("deu", "de", "German", "Deutsch"),
        LangCode("aah", None, "Abu' Arapesh", None),
    ]

    def test_render_codes(self) -> None:
        source = render_codes(self.CODES)
        assert source.startswith(HEADER + "\n")
        assert '    ("deu", "de"),\n' in source
        assert '    ("aah", None),\n' in source

    def test_rendered_modules_are_python(self) -> None:
        """Test that every rendered module evaluates to the expected tuple."""
        expected = {
            render_codes: (("deu", "de"), ("aah", None)),
            render_english_names: ("German", "Abu' Arapesh"),
            render_autonyms: ("Deutsch", None),
        }
        for render, value in expected.items():
            module = ast.parse(render(self.CODES))
            assign = module.body[-1]
            assert ast.literal_eval(assign.value) == value

    def test_generate_writes_modules(self, tmp_path: Path) -> None:
        iso_path, autonyms_path = write_tables(
            tmp_path, SAMPLE_ISO_ROWS, SAMPLE_AUTONYM_ROWS
        )
        output_dir = tmp_path / "tables"
        written = generate(iso_path, autonyms_path, output_dir)
        assert sorted(path.name for path in written) == sorted(RENDERERS)
        assert '"Ghadamès"' in (output_dir / "english.py").read_text(encoding="utf-8")


@pytest.mark.skipif(not DATA_DIR.exists(), reason="registry files not available")
class TestCommittedTables:
    """Check that the committed tables match the registry files."""

    def test_generated_code_is_fresh(self) -> None:
        codes = read_iso_table(
            DATA_DIR / "iso-639-3.tab", DATA_DIR / "iso639-autonyms.tsv"
        )
        for filename, render in RENDERERS.items():
            committed = (TABLES_DIR / filename).read_text(encoding="utf-8")
            assert committed == render(codes), (
                f"isolang/tables/{filename} is outdated, "
                "run `python -m isolang generate`"
            )
