"""Report generation for selection results (PGN, CSV, HTML, summary)."""

import csv
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from criteria import Selection

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates'

CSV_COLUMNS = [
    'Number',
    'Event',
    'Site',
    'Date',
    'Round',
    'White',
    'Black',
    'Result',
    'WhiteElo',
    'BlackElo',
    'ECO',
    'TimeControl',
    'Selected',
    'Reason',
]

REASONS = ('SELECTED', 'SETUP', 'TAGS', 'ECO', 'POSITION')


def _selection_to_row(selection: Selection) -> dict:
    """Convert a Selection to a flat dict for CSV/HTML output."""
    headers = selection.game.headers
    row = {name: headers.get(name, '') for name in CSV_COLUMNS}
    row['Number'] = str(selection.game.number)
    row['Selected'] = 'ja' if selection.selected else 'nein'
    row['Reason'] = selection.reason
    return row


def write_pgn(selections: list[Selection], output_path: Path) -> int:
    """Write the raw text of every selected game.

    Returns:
        Number of games written.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with open(output_path, 'w', encoding='utf-8') as f:
        for selection in selections:
            if selection.selected:
                f.write(selection.game.raw)
                written += 1

    log.info("PGN geschrieben: %s (%d Partien)", output_path, written)
    return written


def write_csv_report(selections: list[Selection], output_path: Path) -> None:
    """Write one row per game with its key tags and verdict.

    Uses UTF-8 with BOM (utf-8-sig) and semicolon delimiter for
    compatibility with German Excel.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.DictWriter(
            f, fieldnames=CSV_COLUMNS, delimiter=';', extrasaction='ignore',
        )
        writer.writeheader()
        for selection in selections:
            writer.writerow(_selection_to_row(selection))

    log.info("CSV-Report geschrieben: %s (%d Zeilen)", output_path, len(selections))


def write_html_report(
    selections: list[Selection],
    output_path: Path,
    source_name: str = '',
) -> None:
    """Write selection results as an HTML report using Jinja2.

    Args:
        selections: Results for every game read.
        output_path: Path for the output HTML file.
        source_name: Name of the PGN file (for the report title).
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template('report.html')

    html = template.render(
        source_name=source_name,
        rows=[_selection_to_row(s) for s in selections],
        stats=compute_stats(selections),
        columns=CSV_COLUMNS,
    )

    output_path.write_text(html, encoding='utf-8')
    log.info("HTML-Report geschrieben: %s", output_path)


def compute_stats(selections: list[Selection]) -> dict:
    """Count games per selection reason."""
    stats = {reason.lower(): 0 for reason in REASONS}
    for selection in selections:
        stats[selection.reason.lower()] += 1
    stats['total'] = len(selections)
    return stats


def print_summary(selections: list[Selection], source_name: str = '') -> None:
    """Print a summary of selection results to stdout."""
    stats = compute_stats(selections)

    print(f"\n=== Auswahl-Report: {source_name} ===")
    print(f"Gelesene Partien:          {stats['total']:>5}")
    print(f"Ausgewaehlt:               {stats['selected']:>5}")
    print("---")
    print(f"Verworfen wegen SetUp:     {stats['setup']:>5}")
    print(f"Verworfen wegen Tags:      {stats['tags']:>5}")
    print(f"Verworfen wegen ECO:       {stats['eco']:>5}")
    print(f"Verworfen wegen Stellung:  {stats['position']:>5}")
    print()
