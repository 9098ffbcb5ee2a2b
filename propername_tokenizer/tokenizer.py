"""
Tokenizer module for propername-tokenizer.

DocumentTokenizer splits a text into sentences, then every sentence into
a flat run of word and non-word tokens. ProperNameDocumentTokenizer adds
a dictionary pass: when a word is the first word of a known proper name,
the longest name that matches the text at that point, and ends on a word
boundary, becomes a single PROPER_WORD token.
"""

import logging
import unicodedata
from typing import Iterable, List, Optional, Tuple, Union

from propername_tokenizer.boundaries import (
    DEFAULT_LOCALE,
    BoundaryCursor,
    BoundarySegmenter,
    UnicodeBoundarySegmenter,
)
from propername_tokenizer.dictionary import ProperNameDictionary, get_default_names
from propername_tokenizer.models import Document, Sentence, Token

logger = logging.getLogger(__name__)


def is_letter_or_digit(ch: str) -> bool:
    """True for letters (L*) and decimal digits (Nd); "½", "²" and "Ⅻ" are not."""
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nd"


def classify(segment: str) -> Token:
    """Make a WORD token if segment starts with a letter or digit, else NON_WORD."""
    if is_letter_or_digit(segment[0]):
        return Token.word(segment)
    return Token.non_word(segment)


class DocumentTokenizer:
    """
    Splits text into sentences of word and non-word tokens.
    
    Tokens partition each sentence exactly: nothing is dropped, so
    spaces and punctuation come back as NON_WORD tokens.
    
    Example:
        >>> doc = DocumentTokenizer().parse_document("hello world")
        >>> [t.text for t in doc.sentences[0]]
        ['hello', ' ', 'world']
    """
    
    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        segmenter: Optional[BoundarySegmenter] = None,
    ):
        if segmenter is None:
            segmenter = UnicodeBoundarySegmenter(locale)
        self.segmenter = segmenter
    
    @property
    def locale(self) -> str:
        return self.segmenter.locale
    
    def parse_document(self, text: str) -> Document:
        """
        Parse a text into a Document.
        
        Args:
            text: The whole document text (may be empty)
            
        Returns:
            A Document with one Sentence per sentence of text
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        
        cursor = self.segmenter.sentences(text)
        sentences = [self.parse_sentence(text[start:end]) for start, end in cursor.segments()]
        
        logger.debug("Parsed %d sentences from %d characters", len(sentences), len(text))
        return Document(tuple(sentences))
    
    def parse_sentence(self, source: str) -> Sentence:
        """
        Parse the text of one sentence into a Sentence.
        
        Walks the word boundaries of source with a cursor. Each step reads
        one token starting at the current segment; a token may cover more
        than one segment, in which case the cursor skips ahead to the
        token's end before reading the next one.
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")
        
        tokens: List[Token] = []
        cursor = self.segmenter.words(source)
        
        first_index = cursor.first()
        last_index = cursor.next()
        
        while last_index is not BoundaryCursor.DONE:
            token, end = self.read_token(source, cursor, first_index, last_index)
            tokens.append(token)
            
            # end is always a boundary, so this lands exactly on it
            first_index = cursor.following(end)
            last_index = cursor.next()
        
        return Sentence(tuple(tokens))
    
    def read_token(
        self,
        source: str,
        cursor: BoundaryCursor,
        first_index: int,
        last_index: int,
    ) -> Tuple[Token, int]:
        """
        Read the token that starts at the segment [first_index, last_index).
        
        Returns:
            The token and the offset where it ends
        """
        return classify(source[first_index:last_index]), last_index


class ProperNameDocumentTokenizer(DocumentTokenizer):
    """
    DocumentTokenizer that recognizes multi-word proper names.
    
    "Gavrilo Princip" becomes one PROPER_WORD token when it is in the
    dictionary, while "Gavrilo Principe" stays two words because the
    name would end in the middle of "Principe".
    
    Args:
        names: Proper names (an iterable of strings or a prebuilt
            ProperNameDictionary). Uses the bundled default if None.
        locale: Locale for boundary analysis
        segmenter: Boundary segmenter to use instead of the Unicode default
    """
    
    def __init__(
        self,
        names: Union[Iterable[str], ProperNameDictionary, None] = None,
        locale: str = DEFAULT_LOCALE,
        segmenter: Optional[BoundarySegmenter] = None,
    ):
        super().__init__(locale, segmenter)
        
        if names is None:
            names = get_default_names()
        if not isinstance(names, ProperNameDictionary):
            names = ProperNameDictionary(names)
        self.dictionary = names
    
    def match_proper_name(
        self,
        word: str,
        source: str,
        cursor: BoundaryCursor,
        first_index: int,
    ) -> Optional[str]:
        """
        Find the longest proper name keyed by word that matches at first_index.
        
        A candidate matches when source continues with the whole name and
        the name ends exactly on a word boundary.
        
        Returns:
            The matched name, or None
        """
        for name in self.dictionary.candidates_for_key(word):
            if source.startswith(name, first_index) and cursor.is_boundary(first_index + len(name)):
                return name
        return None
    
    def read_token(
        self,
        source: str,
        cursor: BoundaryCursor,
        first_index: int,
        last_index: int,
    ) -> Tuple[Token, int]:
        word = source[first_index:last_index]
        
        # only word segments can start a proper name
        if is_letter_or_digit(word[0]) and self.dictionary.has_key(word):
            name = self.match_proper_name(word, source, cursor, first_index)
            if name is not None:
                return Token.proper_word(name), first_index + len(name)
        
        return super().read_token(source, cursor, first_index, last_index)


def all_proper_names(document: Document) -> List[str]:
    """
    Collect the distinct proper names of a parsed document.
    
    Returns:
        Sorted list of PROPER_WORD texts, without duplicates
    """
    return sorted({t.text for t in document.all_words() if t.is_proper_word})
