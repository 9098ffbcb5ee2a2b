#!/usr/bin/env python3
"""
Dictionary Builder for propername-tokenizer.

Compiles a line-oriented proper names file (one name per line) into a
binary marisa trie that ProperNameDictionary.load() memory-maps.

Usage:
    python scripts/build_dictionary.py [--names PATH] [--output PATH]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from propername_tokenizer.dictionary import (
    ProperNameDictionary,
    get_default_dictionary_path,
    load_names,
)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


DEFAULT_OUTPUT = Path(__file__).parent.parent / "build" / "names.dic"


def build_dictionary(names_path: Path, output_path: Path, encoding: str = "utf-8") -> ProperNameDictionary:
    """Read names_path and save it compiled to output_path."""
    logger.info(f"Reading proper names from {names_path}...")
    dictionary = ProperNameDictionary(load_names(names_path, encoding=encoding))
    logger.info(f"  {len(dictionary)} names under {len(dictionary.keys())} keys")
    
    output_path.parent.mkdir(parents=True, exist_ok=True)
    dictionary.save(output_path)
    
    file_size = output_path.stat().st_size / 1024
    logger.info(f"Saved dictionary to {output_path} ({file_size:.1f} KB)")
    return dictionary


def main():
    parser = argparse.ArgumentParser(
        description="Compile a proper names file into a binary dictionary"
    )
    parser.add_argument(
        '--names', '-n',
        type=Path,
        default=get_default_dictionary_path(),
        help="Proper names file, one per line (default: bundled NER.txt)"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output dictionary path (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        '--encoding', '-e',
        default="utf-8",
        help="Encoding of the names file (default: utf-8)"
    )
    
    args = parser.parse_args()
    
    if not args.names.exists():
        logger.error(f"Names file not found: {args.names}")
        sys.exit(1)
    
    start_time = time.time()
    build_dictionary(args.names, args.output, args.encoding)
    
    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.2f} seconds")


if __name__ == '__main__':
    main()
