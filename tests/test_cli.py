"""Tests for the isolang command line interface."""

import json
from pathlib import Path

import pytest

from isolang.__main__ import main


class TestLookup:
    """Tests for the lookup command."""

    def test_lookup_codes_and_names(self, capsys) -> None:
        assert main(["lookup", "de", "spa", "Swahili"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "deu\tde\tGerman",
            "spa\tes\tSpanish",
            "swa\tsw\tSwahili",
        ]

    def test_lookup_without_639_1(self, capsys) -> None:
        assert main(["lookup", "und"]) == 0
        assert capsys.readouterr().out == "und\t-\tUndetermined\n"

    def test_lookup_unknown(self, capsys) -> None:
        assert main(["lookup", "de", "xyz"]) == 1
        captured = capsys.readouterr()
        assert captured.out == "deu\tde\tGerman\n"
        assert "Unknown language: 'xyz'" in captured.err

    def test_lookup_with_config(self, tmp_path: Path, capsys) -> None:
        config_path = tmp_path / "isolang.json"
        config_path.write_text(
            json.dumps({"lowercase_names": True, "local_names": True})
        )
        assert main(["--config", str(config_path), "lookup", "deutsch"]) == 0
        assert capsys.readouterr().out == "deu\tde\tGerman\tDeutsch\n"


class TestList:
    """Tests for the list command."""

    def test_list(self, capsys) -> None:
        assert main(["list"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 7910
        assert lines[0] == "aaa\t-\tGhotuo"
        assert "deu\tde\tGerman" in lines


class TestConfigHandling:
    """Tests for configuration errors and creation."""

    def test_create_config(self, tmp_path: Path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        assert main(["--create-config"]) == 0
        created = json.loads((tmp_path / "isolang.json").read_text())
        assert created["english_names"] is True
        assert "Created default configuration" in capsys.readouterr().out

    def test_missing_config(self, tmp_path: Path, capsys) -> None:
        missing = tmp_path / "missing.json"
        assert main(["--config", str(missing), "lookup", "de"]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path: Path, capsys) -> None:
        config_path = tmp_path / "isolang.json"
        config_path.write_text("{not json")
        assert main(["--config", str(config_path), "lookup", "de"]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_inconsistent_config(self, tmp_path: Path, capsys) -> None:
        config_path = tmp_path / "isolang.json"
        config_path.write_text(
            json.dumps({"english_names": False, "lowercase_names": True})
        )
        assert main(["--config", str(config_path), "lookup", "de"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])


class TestGenerate:
    """Tests for the generate command."""

    def test_generate(self, tmp_path: Path, capsys) -> None:
        iso_path = tmp_path / "iso-639-3.tab"
        iso_path.write_text(
            "Id\tPart2B\tPart2T\tPart1\tScope\tLanguage_Type\tRef_Name\tComment\n"
            "deu\tger\tdeu\tde\tI\tL\tGerman\t\n",
            encoding="utf-8",
        )
        autonyms_path = tmp_path / "autonyms.tsv"
        autonyms_path.write_text(
            "code_3\tcode_1\tname\tautonym\ndeu\tde\tGerman\tDeutsch\n",
            encoding="utf-8",
        )
        output_dir = tmp_path / "tables"
        argv = [
            "--verbose",
            "generate",
            "--iso-table",
            str(iso_path),
            "--autonyms-table",
            str(autonyms_path),
            "--output-dir",
            str(output_dir),
        ]
        assert main(argv) == 0
        assert (output_dir / "codes.py").exists()
        assert "Generated 1 languages" in capsys.readouterr().out

    def test_generate_missing_table(self, tmp_path: Path, capsys) -> None:
        argv = ["generate", "--iso-table", str(tmp_path / "missing.tab")]
        assert main(argv) == 1
        assert "Table not found" in capsys.readouterr().err
