"""Load lexicon.csv into Lexeme records.

File format (CSV, UTF-8):
- A header row that must include the columns id, translation and
  generator, in any order. Any other columns are user columns and are
  carried through untouched.
- One row per lexeme. Short rows are padded with empty cells.
- Rows consisting of a single blank cell are ignored.

The translation column holds gloss syntax in implicit-literals mode, so
"arth" is a literal and "*bear#PL" points at another lexeme.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

from glossator.errors import LineError
from glossator.gloss.parser import GlossMode, GlossParseError, parse_gloss
from glossator.lexicon.index import REQUIRED_COLUMNS, Lexeme, Lexicon

logger = logging.getLogger(__name__)


class LexiconParseError(LineError):
    """Raised when lexicon data fails structural validation."""


def _is_empty_row(row: list[str]) -> bool:
    return len(row) == 0 or (len(row) == 1 and not row[0].strip())


def _read_rows(raw: str) -> list[tuple[int, list[str]]]:
    """Split CSV text into (line_number, cells) pairs."""
    reader = csv.reader(io.StringIO(raw, newline=""), strict=True)
    rows = []
    try:
        for row in reader:
            rows.append((reader.line_num, row))
    except csv.Error as e:
        raise LexiconParseError(f"malformed CSV: {e}", reader.line_num)
    return rows


def _pad(cells: list[str], length: int) -> list[str]:
    return cells + [""] * (length - len(cells))


def parse_lexicon(raw: str) -> Lexicon:
    """
    Parse lexicon CSV text.

    Args:
        raw: Contents of a lexicon CSV file

    Returns:
        Lexicon with the header order and one Lexeme per data row

    Raises:
        LexiconParseError: On a missing header, missing required columns,
            malformed CSV, or a translation that is not valid gloss syntax
    """
    rows = [(n, cells) for n, cells in _read_rows(raw) if not _is_empty_row(cells)]
    if not rows:
        raise LexiconParseError("missing header row")

    _, header = rows[0]
    missing = [c for c in REQUIRED_COLUMNS if c not in header]
    if missing:
        raise LexiconParseError(f"missing header columns: {', '.join(missing)}")

    id_index = header.index("id")
    translation_index = header.index("translation")
    generator_index = header.index("generator")
    app_indices = {id_index, translation_index, generator_index}

    lexemes = []
    for line_number, row in rows[1:]:
        cells = _pad(row, len(header))
        try:
            translation = parse_gloss(
                GlossMode.IMPLICIT_LITERALS, cells[translation_index]
            )
        except GlossParseError as e:
            raise LexiconParseError(str(e), line_number)

        lexemes.append(
            Lexeme(
                id=cells[id_index],
                translation=translation,
                generator=cells[generator_index],
                user_columns=tuple(
                    cell for i, cell in enumerate(cells) if i not in app_indices
                ),
            )
        )

    logger.debug(f"Parsed {len(lexemes)} lexemes ({len(header)} columns)")
    return Lexicon(column_order=tuple(header), lexemes=tuple(lexemes))


def load_lexicon(path: Path | str) -> Lexicon:
    """Read and parse a lexicon CSV file."""
    path = Path(path)
    logger.debug(f"Loading lexicon from {path}")
    return parse_lexicon(path.read_text(encoding="utf-8"))
