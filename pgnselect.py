"""pgnselect – CLI-Tool zur Auswahl von Schachpartien anhand ihrer PGN-Tags."""

import argparse
import logging
import sys
from pathlib import Path

from criteria import CriteriaError, MatchConfig, SetupGate
from criteria.reader import read_games
from criteria.registry import CriteriaRegistry
from criteria.reporter import print_summary, write_csv_report, write_html_report, write_pgn
from criteria.selection import RecordSelector
from criteria.tagfile import read_criteria_file

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='Auswahl von Schachpartien aus einer PGN-Datei anhand ihrer Tags.',
        prog='pgnselect.py',
    )
    parser.add_argument(
        '--pgn', required=True, type=Path,
        help='Pfad zur PGN-Eingabedatei',
    )
    parser.add_argument(
        '--output', required=True, type=Path,
        help='Pfad fuer die PGN-Ausgabe der ausgewaehlten Partien',
    )
    parser.add_argument(
        '--tags', type=Path,
        help='Datei mit Kriterien, eine Zeile je Kriterium: Tag [Operator] "Wert"',
    )
    parser.add_argument(
        '-T', '--tag-arg', action='append', default=[], metavar='BUCHSTABE+WERT',
        help='Einzelnes Kriterium, z.B. wKasparov, d1990, pTal (mehrfach erlaubt)',
    )
    parser.add_argument(
        '--soundex', action='store_true',
        help='Spielernamen, Event, Site und Annotator phonetisch vergleichen',
    )
    parser.add_argument(
        '--match-anywhere', action='store_true',
        help='Muster ueberall im Tag-Wert suchen statt nur am Anfang',
    )
    parser.add_argument(
        '--setup', choices=[g.value for g in SetupGate], default=SetupGate.ANY.value,
        help='SetUp-Tag: any (egal), none (darf fehlen), only (muss vorhanden sein)',
    )
    parser.add_argument(
        '--report', type=Path,
        help='Pfad fuer einen CSV-Report ueber alle gelesenen Partien',
    )
    parser.add_argument(
        '--html', action='store_true',
        help='Zusaetzlich einen HTML-Report erzeugen (benoetigt --report)',
    )
    parser.add_argument(
        '--summary', action='store_true',
        help='Zusammenfassung auf stdout ausgeben',
    )
    return parser


def build_registry(args: argparse.Namespace) -> CriteriaRegistry:
    """Turn the command-line options into a filled criteria registry."""
    config = MatchConfig(
        use_soundex=args.soundex,
        match_anywhere=args.match_anywhere,
        setup_gate=SetupGate(args.setup),
    )
    registry = CriteriaRegistry(config)
    if args.tags:
        read_criteria_file(args.tags, registry)
    for argstr in args.tag_arg:
        registry.extract_tag_argument(argstr)
    return registry


def main() -> None:
    """Main entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    parser = build_parser()
    args = parser.parse_args()

    if args.html and not args.report:
        parser.error('--html ist nur zusammen mit --report moeglich.')

    try:
        registry = build_registry(args)
        selector = RecordSelector(registry)
        selections = selector.select_games(read_games(args.pgn))
    except CriteriaError as exc:
        log.error("%s", exc)
        sys.exit(1)

    write_pgn(selections, args.output)

    if args.report:
        write_csv_report(selections, args.report)
        if args.html:
            write_html_report(selections, args.report.with_suffix('.html'), args.pgn.name)

    if args.summary:
        print_summary(selections, args.pgn.name)


if __name__ == '__main__':
    main()
