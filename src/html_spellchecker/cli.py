# src/html_spellchecker/cli.py
"""
html-spellcheck: command-line front end.

Checks HTML fragments from files (or stdin) and prints the rewritten HTML,
or one JSON object per document with --json.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm.auto import tqdm

from html_spellchecker.managers.config_manager import config_manager
from html_spellchecker.managers.registry_manager import for_language
from html_spellchecker.model import SpellcheckResult
from html_spellchecker.services.dictionary_service import DictionaryUnavailableError
from html_spellchecker.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSPELLED = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-spellcheck",
        description="Mark misspelled words in HTML fragments."
    )
    parser.add_argument("files", nargs="*", type=Path, help="HTML fragments to check (default: stdin)")
    parser.add_argument(
        "--lang",
        default=config_manager.get_nested("spellcheck.default_language", "en_US"),
        help="Dictionary locale, e.g. en_US or fr_FR"
    )
    parser.add_argument("--skip-tag", action="append", default=[], metavar="TAG",
                        help="Additional element whose content is never checked (repeatable)")
    parser.add_argument("--add-word", action="append", default=[], metavar="WORD",
                        help="Accept WORD for this run (repeatable)")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per document")
    parser.add_argument("--strict", action="store_true", help="Exit with status 1 when any word is misspelled")
    parser.add_argument("--log-level", default=config_manager.get_nested("debug.level", "WARNING"),
                        help="Root log level (DEBUG, INFO, WARNING, ...)")
    return parser


def _read_sources(files: List[Path]) -> List[Tuple[str, str]]:
    if not files:
        return [("<stdin>", sys.stdin.read())]
    return [(str(path), path.read_text(encoding="utf-8")) for path in files]


def _emit(source: str, result: SpellcheckResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"source": source, **result.model_dump()}, ensure_ascii=False))
    else:
        print(result.html)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(args.log_level)

    try:
        sources = _read_sources(args.files)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return EXIT_FAILURE

    try:
        checker = for_language(args.lang)
    except DictionaryUnavailableError as e:
        logger.error("Cannot load dictionary: %s", e)
        return EXIT_FAILURE

    checker.policy.skip(*args.skip_tag)
    for word in args.add_word:
        checker.add_word(word)

    iterator = sources if len(sources) < 2 else tqdm(sources, desc="Spellchecking", unit="file", leave=False)

    results = []
    for source, html in iterator:
        result = checker.spellcheck(html)
        if result.error_count:
            logger.info("%s: %d misspelled word(s)", source, result.error_count)
        results.append((source, result))

    # Output only once the progress bar is closed.
    for source, result in results:
        _emit(source, result, args.json)

    total_errors = sum(result.error_count for _, result in results)

    if args.strict and total_errors:
        return EXIT_MISSPELLED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
