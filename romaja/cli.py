from __future__ import annotations

import argparse
import logging
import sys

from romaja.domain.enums import AssimilationDirection, WordClass
from romaja.domain.romanization_rr import romanize_text
from romaja.services.reference_corpus import load_reference_corpus, verify_corpus
from romaja.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="romaja", description="Romanize Korean text with pronunciation rules.")
    parser.add_argument("text", nargs="*", help="Text to romanize (reads stdin when omitted).")
    parser.add_argument("--direction", choices=[d.value for d in AssimilationDirection])
    parser.add_argument("--word-class", choices=[w.value for w in WordClass])
    parser.add_argument("--settings", help="Path to settings.yaml.")
    parser.add_argument("--details", action="store_true", help="Show syllables changed by context.")
    parser.add_argument("--verify", action="store_true", help="Check the bundled reference corpus.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _run_verify() -> int:
    entries = load_reference_corpus()
    mismatches = verify_corpus(entries)
    for m in mismatches:
        print("[FAIL] {} ({}, {}): expected {!r}, got {!r}".format(
            m.entry.hangul, m.entry.word_class.value, m.entry.direction.value, m.entry.rr, m.actual
        ))
    print("{} of {} entries passed".format(len(entries) - len(mismatches), len(entries)))
    return 1 if mismatches else 0


def _emit(line: str, *, direction: AssimilationDirection, word_class: WordClass, details: bool) -> None:
    result = romanize_text(line, direction=direction, word_class=word_class)
    print(result.rr)
    if details:
        for d in result.details:
            print("  " + d)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.verify:
        return _run_verify()

    store = SettingsStore(args.settings)
    direction = AssimilationDirection(args.direction) if args.direction else store.get_direction()
    word_class = WordClass(args.word_class) if args.word_class else store.get_word_class()
    logger.debug("Romanizing with direction=%s word_class=%s", direction.value, word_class.value)

    if args.text:
        _emit(" ".join(args.text), direction=direction, word_class=word_class, details=args.details)
        return 0

    for line in sys.stdin:
        _emit(line.rstrip("\n"), direction=direction, word_class=word_class, details=args.details)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
