"""PGN reader yielding each game's header tags and raw text."""

import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Optional, TextIO

from criteria import Game

log = logging.getLogger(__name__)

_TAG_LINE_RE = re.compile(r'\[\s*(\w+)\s+"(.*)"\s*\]')


def detect_encoding(path: Path) -> str:
    """Detect file encoding by checking for BOM bytes.

    Args:
        path: Path to the PGN file.

    Returns:
        Encoding string suitable for open().
    """
    with open(path, 'rb') as f:
        bom = f.read(2)
    if bom == b'\xff\xfe':
        return 'utf-16-le'
    return 'utf-8-sig'


def parse_tag_line(line: str) -> Optional[tuple[str, str]]:
    """Split a ``[Name "value"]`` line; escaped quotes and backslashes are undone."""
    m = _TAG_LINE_RE.fullmatch(line.strip())
    if m is None:
        return None
    value = m.group(2).replace('\\"', '"').replace('\\\\', '\\')
    return m.group(1), value


def iter_games(stream: TextIO) -> Iterator[Game]:
    """Yield games from a PGN text stream.

    A game is flushed when the next header block starts or the stream ends.
    Header lines that do not parse are kept in the raw text only.
    """
    header_lines: list[str] = []
    movetext_lines: list[str] = []
    headers: dict[str, str] = {}
    in_headers = False
    number = 0

    def flush() -> Optional[Game]:
        nonlocal header_lines, movetext_lines, headers, number
        if not header_lines and not movetext_lines:
            return None
        number += 1
        raw = '\n'.join(header_lines) + '\n\n' + '\n'.join(movetext_lines) + '\n\n'
        game = Game(headers=headers, raw=raw, number=number)
        header_lines, movetext_lines, headers = [], [], {}
        return game

    for line in stream:
        line = line.rstrip('\r\n').lstrip('\ufeff')

        if line.startswith('['):
            if not in_headers and (header_lines or movetext_lines):
                game = flush()
                if game is not None:
                    yield game
            in_headers = True
            header_lines.append(line)
            kv = parse_tag_line(line)
            if kv is not None:
                headers[kv[0]] = kv[1]
            continue

        if line.strip() == '':
            in_headers = False
            continue

        in_headers = False
        movetext_lines.append(line)

    game = flush()
    if game is not None:
        yield game


def read_games(path: str | Path) -> Iterator[Game]:
    """Read games from a PGN file.

    Handles UTF-16LE (with BOM) and UTF-8 encoded files automatically.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    encoding = detect_encoding(path)

    count = 0
    with open(path, 'r', encoding=encoding) as f:
        for game in iter_games(f):
            count += 1
            yield game

    log.info("%d Partien gelesen aus %s", count, path)
