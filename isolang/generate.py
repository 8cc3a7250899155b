"""
Generate the static tables in :mod:`isolang.tables`.

Inputs are the SIL ISO 639-3 code table (``iso-639-3.tab``, from
https://iso639-3.sil.org/code_tables/download_tables) and a TSV of autonyms
keyed by 639-3 code. Both live under ``data/`` in the source tree and are only
read here, never at runtime.

Usage:
    python -m isolang generate --iso-table data/iso-639-3.tab \\
        --autonyms-table data/iso639-autonyms.tsv --output-dir isolang/tables
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

HEADER = "# This file is generated by `python -m isolang generate`; do not edit it directly."

# SIL columns: Id, Part2B, Part2T, Part1, Scope, Language_Type, Ref_Name, Comment
_ID_COLUMN = 0
_PART1_COLUMN = 3
_REF_NAME_COLUMN = 6

_AUTONYM_CODE_COLUMN = 0
_AUTONYM_COLUMN = 3


@dataclass
class LangCode:
    """One row of the generated tables."""

    code_3: str
    code_1: str | None
    name_en: str
    autonym: str | None = None


def _read_rows(path: Path) -> Iterable[tuple[int, list[str]]]:
    """Yield (line number, columns) for each data row, skipping the header."""
    with path.open("r", encoding="utf-8") as f:
        next(f, None)
        for line_number, line in enumerate(f, start=2):
            line = line.rstrip("\r\n")
            if not line:
                continue
            yield line_number, line.split("\t")


def read_autonyms_table(path: str | Path) -> dict[str, str | None]:
    """
    Read the autonyms table.

    Args:
        path: TSV file with a header row; column 0 holds the 639-3 code and
            column 3 the autonym (empty if unknown).

    Returns:
        Mapping from 639-3 code to autonym or None.

    Raises:
        ValueError: If a row has too few columns.
    """
    path = Path(path)
    autonyms: dict[str, str | None] = {}
    for line_number, cols in _read_rows(path):
        if len(cols) <= _AUTONYM_COLUMN:
            raise ValueError(
                f"{path}:{line_number}: expected at least {_AUTONYM_COLUMN + 1} "
                f"columns, got {len(cols)}"
            )
        autonyms[cols[_AUTONYM_CODE_COLUMN]] = cols[_AUTONYM_COLUMN] or None
    return autonyms


def read_iso_table(
    iso_path: str | Path,
    autonyms_path: str | Path,
    verbose: bool = False,
) -> list[LangCode]:
    """
    Read the ISO 639-3 code table and attach autonyms.

    The English name is the reference name without its parenthesised comment,
    e.g. "Swahili (macrolanguage)" becomes "Swahili".

    Args:
        iso_path: SIL ``iso-639-3.tab`` file.
        autonyms_path: Autonyms TSV, see :func:`read_autonyms_table`.
        verbose: Show a progress bar.

    Returns:
        Languages in table order.

    Raises:
        ValueError: On a short row, an empty 639-3 code or a duplicate code.
    """
    iso_path = Path(iso_path)
    autonyms = read_autonyms_table(autonyms_path)

    codes: list[LangCode] = []
    seen_3: set[str] = set()
    seen_1: set[str] = set()
    rows = tqdm(
        _read_rows(iso_path),
        desc="Reading ISO 639-3 table",
        unit="lang",
        disable=not verbose,
    )
    for line_number, cols in rows:
        if len(cols) <= _REF_NAME_COLUMN:
            raise ValueError(
                f"{iso_path}:{line_number}: expected at least {_REF_NAME_COLUMN + 1} "
                f"columns, got {len(cols)}"
            )

        code_3 = cols[_ID_COLUMN]
        if not code_3:
            raise ValueError(f"{iso_path}:{line_number}: empty ISO 639-3 code")
        if code_3 in seen_3:
            raise ValueError(f"{iso_path}:{line_number}: duplicate ISO 639-3 code {code_3!r}")
        seen_3.add(code_3)

        code_1 = cols[_PART1_COLUMN] if len(cols[_PART1_COLUMN]) == 2 else None
        if code_1 is not None:
            if code_1 in seen_1:
                raise ValueError(
                    f"{iso_path}:{line_number}: duplicate ISO 639-1 code {code_1!r}"
                )
            seen_1.add(code_1)

        name_en = cols[_REF_NAME_COLUMN].split("(")[0].rstrip()
        codes.append(LangCode(code_3, code_1, name_en, autonyms.get(code_3)))

    return codes


def _literal(value: str | None) -> str:
    if value is None:
        return "None"
    return json.dumps(value, ensure_ascii=False)


def _render_module(docstring: str, name: str, items: Iterable[str]) -> str:
    lines = [HEADER, f'"""{docstring}"""', "", f"{name} = ("]
    lines.extend(f"    {item}," for item in items)
    lines.append(")")
    return "\n".join(lines) + "\n"


def render_codes(codes: list[LangCode]) -> str:
    """Render the module holding (639-3, 639-1) pairs."""
    return _render_module(
        "ISO 639-3 and ISO 639-1 codes, indexed by language discriminant.",
        "CODES",
        (f"({_literal(lang.code_3)}, {_literal(lang.code_1)})" for lang in codes),
    )


def render_english_names(codes: list[LangCode]) -> str:
    """Render the module holding English names."""
    return _render_module(
        "English reference names, indexed by language discriminant.",
        "NAMES",
        (_literal(lang.name_en) for lang in codes),
    )


def render_autonyms(codes: list[LangCode]) -> str:
    """Render the module holding autonyms."""
    return _render_module(
        "Autonyms (local names), indexed by language discriminant.",
        "AUTONYMS",
        (_literal(lang.autonym) for lang in codes),
    )


RENDERERS = {
    "codes.py": render_codes,
    "english.py": render_english_names,
    "autonyms.py": render_autonyms,
}


def write_tables(codes: list[LangCode], output_dir: str | Path) -> list[Path]:
    """
    Write every table module into a directory.

    Args:
        codes: Languages in table order.
        output_dir: Target directory, created if missing.

    Returns:
        Paths of the written modules.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for filename, render in RENDERERS.items():
        path = output_dir / filename
        path.write_text(render(codes), encoding="utf-8")
        written.append(path)
    return written


def generate(
    iso_path: str | Path,
    autonyms_path: str | Path,
    output_dir: str | Path,
    verbose: bool = False,
) -> list[Path]:
    """
    Read the registry tables and write the table modules.

    Args:
        iso_path: SIL ``iso-639-3.tab`` file.
        autonyms_path: Autonyms TSV.
        output_dir: Directory receiving ``codes.py``, ``english.py`` and
            ``autonyms.py``.
        verbose: Print progress information.

    Returns:
        Paths of the written modules.
    """
    codes = read_iso_table(iso_path, autonyms_path, verbose=verbose)
    written = write_tables(codes, output_dir)
    if verbose:
        with_1 = sum(1 for lang in codes if lang.code_1)
        with_autonym = sum(1 for lang in codes if lang.autonym)
        print(
            f"Generated {len(codes)} languages "
            f"({with_1} with ISO 639-1 codes, {with_autonym} with autonyms)"
        )
        for path in written:
            print(f"  {path}")
    return written
