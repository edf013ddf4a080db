"""CSV deck loader.

Input format (UTF-8, header required)::

    front,back,hint
    bonjour,hello,greeting
    merci,thank you,

- ``front`` and ``back`` columns are required, ``hint`` is optional.
- Column names are case-sensitive. Empty header cells (a trailing comma) are
  ignored, as are unknown named columns.
- An empty hint cell, or a row that stops before the hint column, means "no hint".
- Loading is all-or-nothing: the first malformed row raises ``ParseError``.
"""
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import IO, Any, Callable, Mapping

from .card import Card
from .deck import Deck
from .logging_utils import get_logger
from .types import C

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("front", "back")
OPTIONAL_COLUMNS = ("hint",)


class ParseError(ValueError):
    """Raised when a deck table cannot be loaded.

    ``row`` is the 1-based line of the table (the header is row 1), ``column``
    the offending column name when one applies.
    """

    def __init__(self, message: str, *, row: int | None = None, column: str | None = None):
        self.message = message
        self.row = row
        self.column = column
        where = []
        if row is not None:
            where.append(f"row {row}")
        if column is not None:
            where.append(f"column {column!r}")
        super().__init__(f"{', '.join(where)}: {message}" if where else message)


def _text_stream(stream: IO[Any]) -> IO[str]:
    if isinstance(stream, io.TextIOBase):
        return stream
    # utf-8-sig tolerates a BOM written by spreadsheet exports.
    return io.TextIOWrapper(stream, encoding="utf-8-sig", newline="")


def _parse_header(header: list[str]) -> dict[str, int]:
    columns: dict[str, int] = {}
    for idx, name in enumerate(header):
        name = name.strip()
        if not name:
            continue
        if name in columns:
            raise ParseError("duplicate column", row=1, column=name)
        columns[name] = idx
    for name in REQUIRED_COLUMNS:
        if name not in columns:
            raise ParseError("missing required column", row=1, column=name)
    return columns


def _parse_row(
    record: list[str],
    columns: dict[str, int],
    width: int,
    line: int,
    build: Callable[[Mapping[str, Any]], C],
) -> C:
    extra = [cell for cell in record[width:] if cell.strip()]
    if extra:
        raise ParseError(f"expected at most {width} fields, found {len(record)}", row=line)

    values: dict[str, str | None] = {}
    for name in REQUIRED_COLUMNS:
        idx = columns[name]
        if idx >= len(record):
            raise ParseError("missing value", row=line, column=name)
        values[name] = record[idx]
    for name in OPTIONAL_COLUMNS:
        idx = columns.get(name)
        values[name] = record[idx] if idx is not None and idx < len(record) else None

    return build(values)


def load(stream: IO[Any], card_type: type[C] = Card) -> Deck[C]:
    """Parse a deck table from a readable stream.

    Args:
        stream: binary (preferred) or text stream holding the table.
        card_type: card class built from each row via its ``from_row``.

    Returns:
        A deck whose ``draw()`` yields the cards in file order.

    Raises:
        ParseError: on a missing/invalid header, a malformed row, or a
            decoding/I/O failure.
    """
    text = _text_stream(stream)
    reader = csv.reader(text)
    cards: list[C] = []
    try:
        header = next(reader, None)
        if header is None:
            raise ParseError("missing header row", row=1)
        columns = _parse_header(header)
        width = len(header)

        for record in reader:
            if not any(cell.strip() for cell in record):
                continue
            cards.append(_parse_row(record, columns, width, reader.line_num, card_type.from_row))
    except csv.Error as e:
        raise ParseError(str(e), row=reader.line_num or None) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"invalid utf-8: {e}", row=reader.line_num or None) from e
    except OSError as e:
        raise ParseError(f"read failed: {e}") from e
    finally:
        if text is not stream:
            # Do not let the wrapper close the caller's stream.
            text.detach()

    # draw() pops the tail, so the first row is placed last.
    deck: Deck[C] = Deck()
    for card in cards:
        deck.add_to_top(card)

    logger.debug("loaded deck cards=%d", deck.deck_size())
    return deck


def load_path(path: str | Path, card_type: type[C] = Card) -> Deck[C]:
    with open(path, "rb") as f:
        return load(f, card_type)
