"""
propername-tokenizer: Sentence and word tokenizer with proper name detection

Splits a text into sentences, and sentences into word and non-word
tokens, using Unicode text segmentation. Multi-word proper names from a
dictionary ("Gavrilo Princip") come out as single PROPER_WORD tokens.

Basic Usage:
    import propername_tokenizer
    
    doc = propername_tokenizer.parse_document("Gavrilo Princip was arrested.")
    for sentence in doc:
        print([(t.kind.name, t.text) for t in sentence])
    
    print(propername_tokenizer.find_proper_names("Gavrilo Princip was arrested."))
"""

import time
from typing import Iterable, List, Tuple, Union

__version__ = "0.1.0"

from propername_tokenizer.boundaries import (
    DEFAULT_LOCALE,
    BoundaryCursor,
    BoundarySegmenter,
    UnicodeBoundarySegmenter,
)
from propername_tokenizer.dictionary import (
    ProperNameDictionary,
    get_default_names,
    load_names,
)
from propername_tokenizer.models import Document, Sentence, Token, TokenKind
from propername_tokenizer.tokenizer import (
    DocumentTokenizer,
    ProperNameDocumentTokenizer,
    all_proper_names,
)

Names = Union[Iterable[str], ProperNameDictionary, None]


# =============================================================================
# Main API
# =============================================================================

def parse_document(text: str, names: Names = None) -> Document:
    """
    Parse text into sentences and tokens, recognizing proper names.
    
    Args:
        text: The document text
        names: Proper names to recognize. Uses the bundled dictionary if None.
        
    Returns:
        The parsed Document
        
    Example:
        >>> doc = propername_tokenizer.parse_document("hello world", names=[])
        >>> doc.all_words_as_text()
        ['hello', 'world']
    """
    return ProperNameDocumentTokenizer(names).parse_document(text)


def find_proper_names(text: str, names: Names = None) -> List[str]:
    """
    List the distinct proper names found in text, sorted.
    
    Example:
        >>> propername_tokenizer.find_proper_names("Gavrilo Princip", ["Gavrilo Princip"])
        ['Gavrilo Princip']
    """
    return all_proper_names(parse_document(text, names))


def warm_up(verbose: bool = False) -> Tuple[float, dict]:
    """
    Load the default dictionary now instead of on first use.
    
    Args:
        verbose: If True, print timing information
        
    Returns:
        Tuple of (total_time_seconds, timing_details_dict)
    """
    timings = {}
    total_start = time.perf_counter()
    
    if verbose:
        print("Loading default proper names dictionary...")
    
    t0 = time.perf_counter()
    names = get_default_names()
    timings['dictionary'] = (time.perf_counter() - t0) * 1000
    
    if verbose:
        print(f"  Dictionary:     {timings['dictionary']:>7.1f}ms ({len(names):,} names)")
    
    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000
    
    return total_time, timings


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Data classes
    "Document",
    "Sentence",
    "Token",
    "TokenKind",
    # Tokenizers
    "DocumentTokenizer",
    "ProperNameDocumentTokenizer",
    "ProperNameDictionary",
    # Segmentation
    "BoundarySegmenter",
    "BoundaryCursor",
    "UnicodeBoundarySegmenter",
    "DEFAULT_LOCALE",
    # Functions
    "parse_document",
    "find_proper_names",
    "all_proper_names",
    "load_names",
    "get_default_names",
    "warm_up",
    "get_version",
    # Version
    "__version__",
]
