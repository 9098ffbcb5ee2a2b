"""
Token model for propername-tokenizer.

A parsed text is a Document made of Sentences, and every Sentence is a
flat, ordered run of Tokens. Tokens partition the sentence text exactly:
joining their texts in order gives back the sentence source.

Token variants:
- WORD: a segment starting with a letter or digit
- PROPER_WORD: a dictionary proper name, possibly spanning several segments
- NON_WORD: anything else (single spaces, punctuation, symbols)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple


class TokenKind(Enum):
    """The closed set of token variants."""
    WORD = "word"
    PROPER_WORD = "proper_word"
    NON_WORD = "non_word"


# Kinds that count as words (a proper word is a kind of word)
WORD_KINDS = frozenset([TokenKind.WORD, TokenKind.PROPER_WORD])


@dataclass(frozen=True, slots=True)
class Token:
    """
    A classified piece of sentence text.
    
    Attributes:
        kind: The token variant
        text: The exact source substring this token covers
    """
    kind: TokenKind
    text: str
    
    @classmethod
    def word(cls, text: str) -> "Token":
        return cls(TokenKind.WORD, text)
    
    @classmethod
    def proper_word(cls, text: str) -> "Token":
        return cls(TokenKind.PROPER_WORD, text)
    
    @classmethod
    def non_word(cls, text: str) -> "Token":
        return cls(TokenKind.NON_WORD, text)
    
    @property
    def is_word(self) -> bool:
        """True for WORD and PROPER_WORD tokens."""
        return self.kind in WORD_KINDS
    
    @property
    def is_proper_word(self) -> bool:
        return self.kind is TokenKind.PROPER_WORD
    
    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"


@dataclass(frozen=True, slots=True)
class Sentence:
    """An ordered sequence of tokens covering one sentence."""
    tokens: Tuple[Token, ...] = ()
    
    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)
    
    def __len__(self) -> int:
        return len(self.tokens)
    
    @property
    def text(self) -> str:
        """The sentence source, rebuilt from its tokens."""
        return "".join(t.text for t in self.tokens)
    
    def words(self) -> List[Token]:
        """Word and proper word tokens, in order."""
        return [t for t in self.tokens if t.is_word]


@dataclass(frozen=True, slots=True)
class Document:
    """An ordered sequence of sentences, in source order."""
    sentences: Tuple[Sentence, ...] = ()
    
    def __iter__(self) -> Iterator[Sentence]:
        return iter(self.sentences)
    
    def __len__(self) -> int:
        return len(self.sentences)
    
    @property
    def text(self) -> str:
        return "".join(s.text for s in self.sentences)
    
    def all_words(self) -> List[Token]:
        """
        Flatten every word token of the document.
        
        Returns:
            WORD and PROPER_WORD tokens across all sentences, in document order
        """
        return [t for s in self.sentences for t in s.tokens if t.is_word]
    
    def all_words_as_text(self) -> List[str]:
        """Texts of all_words(), in document order."""
        return [t.text for t in self.all_words()]
