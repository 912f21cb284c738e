import argparse
import logging
import sys

from .errors import GrammarError, LexicalError
from .grammar import Grammar
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grammar-tokenizer",
        description="Split text into tokens using a YAML grammar (longest match wins).",
    )
    parser.add_argument("grammar", help="path to the grammar YAML file")
    parser.add_argument("text", nargs="?", help="text to tokenize (default: read stdin)")
    trim = parser.add_mutually_exclusive_group()
    trim.add_argument(
        "--trim", dest="trimming", action="store_true", default=None,
        help="strip surrounding whitespace before each match",
    )
    trim.add_argument(
        "--no-trim", dest="trimming", action="store_false",
        help="keep whitespace, the grammar must match it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None, stdin=None, stdout=None, stderr=None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    # Options may sit between the grammar path and the text
    args = build_parser().parse_intermixed_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    try:
        grammar = Grammar.from_yaml(args.grammar)
    except (GrammarError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=stderr)
        return 1

    if args.trimming is not None:
        grammar.trimming = args.trimming

    text = args.text if args.text is not None else stdin.read()
    logger.debug("Tokenizing %d characters with %r", len(text), grammar)

    try:
        for index, token in enumerate(Tokenizer(grammar, text)):
            print(f"{index}\t{token.name}\t{token.value!r}", file=stdout)
    except LexicalError as e:
        print(f"error: {e}", file=stderr)
        return 1
    return 0
