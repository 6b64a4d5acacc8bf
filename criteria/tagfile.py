"""Criteria files: one ``TagName [operator] "value"`` criterion per line."""

import logging
import re
from pathlib import Path
from typing import Optional

from criteria import Operator
from criteria.reader import detect_encoding
from criteria.registry import CriteriaRegistry

log = logging.getLogger(__name__)

_CRITERION_RE = re.compile(r'(\w+)\s*(<>|!=|<=|>=|=|<|>|~)?\s*"(.*)"')

# Alias accepted for board patterns.
FEN_PATTERN_NAME = 'FENPattern'


def parse_criteria_line(line: str) -> Optional[tuple[str, Operator, str]]:
    """Split a criteria line into tag name, operator and pattern.

    Returns:
        The three parts, or None for blank lines, comments and lines that
        do not have the expected shape.
    """
    line = line.strip()
    if not line or line[0] in '%#':
        return None
    m = _CRITERION_RE.fullmatch(line)
    if m is None:
        return None
    name, symbol, pattern = m.groups()
    operator = Operator.from_symbol(symbol) if symbol else Operator.NONE
    return name, operator, pattern


def read_criteria_file(path: str | Path, registry: CriteriaRegistry) -> int:
    """Register every criterion in a criteria file.

    Unknown tag names are added to the registry's schema.

    Args:
        path: Path to the criteria file.
        registry: Registry receiving the criteria.

    Returns:
        Number of criteria registered.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    registered = 0
    with open(path, 'r', encoding=detect_encoding(path)) as f:
        for line_num, line in enumerate(f, start=1):
            parsed = parse_criteria_line(line)
            if parsed is None:
                if line.strip() and line.lstrip()[0] not in '%#':
                    log.warning("Zeile %d in %s uebersprungen: %s", line_num, path, line.strip())
                continue
            name, operator, pattern = parsed
            if name == FEN_PATTERN_NAME:
                name = 'FEN'
            if registry.register_name(name, pattern, operator):
                registered += 1

    log.info("%d Kriterien gelesen aus %s", registered, path)
    return registered
