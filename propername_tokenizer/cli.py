"""
CLI interface for propername-tokenizer.

Usage:
    propername-tokenizer story.txt
    propername-tokenizer story.txt names.txt
    propername-tokenizer --xml story.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from propername_tokenizer import __version__
from propername_tokenizer.dictionary import load_names
from propername_tokenizer.tokenizer import ProperNameDocumentTokenizer, all_proper_names
from propername_tokenizer.xml_output import to_xml

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propername-tokenizer",
        description="Split a text into sentences and tokens and list its proper names",
    )
    parser.add_argument(
        "input",
        help="Text file to tokenize",
    )
    parser.add_argument(
        "dictionary",
        nargs="?",
        help="Proper names file, one name per line (default: bundled dictionary)",
    )
    parser.add_argument(
        "--xml", "-x",
        action="store_true",
        help="Print the parsed document as XML instead of the name list",
    )
    parser.add_argument(
        "--encoding", "-e",
        default="utf-8",
        help="Encoding of the input and dictionary files (default: utf-8)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"propername-tokenizer {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
    
    try:
        if args.dictionary is not None:
            tokenizer = ProperNameDocumentTokenizer(load_names(args.dictionary, encoding=args.encoding))
        else:
            tokenizer = ProperNameDocumentTokenizer()
        
        text = Path(args.input).read_text(encoding=args.encoding)
        document = tokenizer.parse_document(text)
        
        if args.xml:
            print(to_xml(document), end="")
        else:
            for name in all_proper_names(document):
                print(name)
    
    except Exception as e:
        logger.debug("Tokenization failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
