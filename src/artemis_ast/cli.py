"""``artemis-ast`` command line entry point.

Subcommands::

    artemis-ast extract  INPUT.ast OUTPUT.yaml
    artemis-ast prune    INPUT.ast OUTPUT.ast
    artemis-ast merge    INPUT.ast STRINGS.yaml OUTPUT.ast
    artemis-ast extract-dir INPUT_DIR [--suffix .yaml]
    artemis-ast merge-dir   INPUT_DIR OUTPUT_DIR [--suffix .cn]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from . import config
from .document import Document
from .errors import ArtemisAstError, SourceDecodeError
from .reader import parse
from .scenario import extract, merge, prune
from .strings_file import dump_strings, load_strings
from .writer import dumps

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------

def read_ast(path: Path, encoding: str) -> Document:
    # newline="" keeps \r inside string literals intact
    try:
        with open(path, encoding=encoding, newline="") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise SourceDecodeError(
            f"{path}: not valid {encoding} text ({exc.reason} at byte {exc.start})"
        ) from exc
    return parse(text.removeprefix("\ufeff"))


def write_ast(document: Document, path: Path, encoding: str) -> None:
    with open(path, "w", encoding=encoding, newline="") as fh:
        fh.write(dumps(document))


def _find_ast_files(root: Path) -> list[Path]:
    return sorted(root.rglob("*.ast"))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_extract(args: argparse.Namespace) -> int:
    strings = extract(read_ast(args.input, args.encoding))
    dump_strings(strings, args.output)
    logger.info("%s: extracted %d lines -> %s", args.input, len(strings), args.output)
    return 0


def cmd_prune(args: argparse.Namespace) -> int:
    doc = prune(read_ast(args.input, args.encoding))
    write_ast(doc, args.output, args.encoding)
    logger.info("%s: pruned -> %s", args.input, args.output)
    return 0


def cmd_merge(args: argparse.Namespace) -> int:
    doc = read_ast(args.ast_input, args.encoding)
    strings = load_strings(args.strings_input)
    merge(doc, strings)
    write_ast(doc, args.output, args.encoding)
    logger.info("%s: merged %d lines -> %s", args.ast_input, len(strings), args.output)
    return 0


def cmd_extract_dir(args: argparse.Namespace) -> int:
    files = _find_ast_files(args.input_dir)
    failed = 0
    for ast_file in tqdm(files, desc="extract", unit="file"):
        output = ast_file.with_suffix(args.suffix)
        try:
            dump_strings(extract(read_ast(ast_file, args.encoding)), output)
        except (ArtemisAstError, OSError) as exc:
            logger.error("%s: %s", ast_file, exc)
            failed += 1
    logger.info("extracted %d of %d files", len(files) - failed, len(files))
    return 1 if failed else 0


def cmd_merge_dir(args: argparse.Namespace) -> int:
    files = _find_ast_files(args.input_dir)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    failed = 0
    for ast_file in tqdm(files, desc="merge", unit="file"):
        strings_file = ast_file.with_suffix(args.suffix)
        try:
            doc = read_ast(ast_file, args.encoding)
            merge(doc, load_strings(strings_file))
            write_ast(doc, args.output_dir / ast_file.name, args.encoding)
        except (ArtemisAstError, OSError) as exc:
            logger.error("%s: %s", ast_file, exc)
            failed += 1
    logger.info("merged %d of %d files", len(files) - failed, len(files))
    return 1 if failed else 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="artemis-ast",
        description="Extract, prune and merge scenario text in Artemis .ast script dumps.",
    )
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="-v for progress info, -vv for debug output")
    p.add_argument("--encoding", default=config.ENCODING,
                   help=f"text encoding of .ast files (default: {config.ENCODING})")
    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("extract", help="extract all scenario text to a strings file")
    sp.add_argument("input", type=Path)
    sp.add_argument("output", type=Path)
    sp.set_defaults(func=cmd_extract)

    sp = sub.add_parser("prune", help="remove all scenario text, keeping only links and line numbers")
    sp.add_argument("input", type=Path)
    sp.add_argument("output", type=Path)
    sp.set_defaults(func=cmd_prune)

    sp = sub.add_parser("merge", help="merge translated scenario text back into an .ast file")
    sp.add_argument("ast_input", type=Path)
    sp.add_argument("strings_input", type=Path)
    sp.add_argument("output", type=Path)
    sp.set_defaults(func=cmd_merge)

    sp = sub.add_parser("extract-dir", help="extract every .ast file under a directory")
    sp.add_argument("input_dir", type=Path)
    sp.add_argument("--suffix", default=config.EXTRACT_SUFFIX,
                    help=f"suffix of the strings files to write (default: {config.EXTRACT_SUFFIX})")
    sp.set_defaults(func=cmd_extract_dir)

    sp = sub.add_parser("merge-dir", help="merge every .ast file under a directory into OUTPUT_DIR")
    sp.add_argument("input_dir", type=Path)
    sp.add_argument("output_dir", type=Path)
    sp.add_argument("--suffix", default=config.MERGE_SUFFIX,
                    help=f"suffix of the translated strings files (default: {config.MERGE_SUFFIX})")
    sp.set_defaults(func=cmd_merge_dir)

    return p


def _log_level(verbose: int) -> int | str:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return config.LOG_LEVEL


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (ArtemisAstError, OSError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
