"""
Text boundary segmentation for propername-tokenizer.

Sentence and word boundaries follow a tailoring of the Unicode text
segmentation rules (UAX #29):
- every whitespace character is its own word segment (no WB3d)
- ZWJ emoji sequences and regional indicator pairs are not kept
  together (no WB3c, WB15, WB16)
- sentence suppressions for abbreviations are not applied

The character classes come from the Unicode
Word_Break and Sentence_Break properties as exposed by the `regex`
library, so the boundaries track the installed Unicode database rather
than an ASCII approximation.

Boundaries are character offsets. Consecutive offsets delimit one
segment. Every text starts with boundary 0 and a non-empty text ends
with boundary len(text).

Example:
    >>> cursor = UnicodeBoundarySegmenter().words("hello world")
    >>> cursor.first(), cursor.next(), cursor.next(), cursor.next()
    (0, 5, 6, 11)
"""

from abc import ABC, abstractmethod
from bisect import bisect_left
from typing import Iterable, Iterator, List, Optional, Tuple

import regex

# Locale used when none is given
DEFAULT_LOCALE = "en_US"


# ============================================================================
# Word Break Classes
# ============================================================================
# Character class bodies (no brackets) so they can be combined.
# Written with concatenation because of the braces in \p{...}.

WB_AHLETTER = r"\p{Word_Break=ALetter}\p{Word_Break=Hebrew_Letter}"
WB_NUMERIC = r"\p{Word_Break=Numeric}"
WB_KATAKANA = r"\p{Word_Break=Katakana}"
WB_EXTENDNUMLET = r"\p{Word_Break=ExtendNumLet}"
WB_MIDLETTER = r"\p{Word_Break=MidLetter}\p{Word_Break=MidNumLet}\p{Word_Break=Single_Quote}"
WB_MIDNUM = r"\p{Word_Break=MidNum}\p{Word_Break=MidNumLet}\p{Word_Break=Single_Quote}"
WB_NEWLINE = r"\r\n\x0b\x0c\x85\u2028\u2029"

# WB4: Extend/Format/ZWJ attach to the preceding character
WB_EXTEND = r"[\p{Word_Break=Extend}\p{Word_Break=Format}\p{Word_Break=ZWJ}]*"

_WORD_UNIT = "[" + WB_AHLETTER + WB_NUMERIC + WB_EXTENDNUMLET + "]" + WB_EXTEND

# WB5-WB13b: letters and numbers, joined across a single mid character
# only when the same class continues on both sides ("don't", "3.14")
_LETTER_RUN = (
    "(?:" + _WORD_UNIT + ")"
    + "(?:" + _WORD_UNIT
    + "|(?<=[" + WB_AHLETTER + "]" + WB_EXTEND + ")"
    + "[" + WB_MIDLETTER + "]" + WB_EXTEND + "(?=[" + WB_AHLETTER + "])"
    + "|(?<=[" + WB_NUMERIC + "]" + WB_EXTEND + ")"
    + "[" + WB_MIDNUM + "]" + WB_EXTEND + "(?=[" + WB_NUMERIC + "])"
    + ")*"
)

# WB13: Katakana runs
_KATAKANA_RUN = "(?:[" + WB_KATAKANA + WB_EXTENDNUMLET + "]" + WB_EXTEND + ")+"

# WB3: CR LF stays together, other newlines stand alone,
# everything else is a single-character segment
_WORD_SEGMENT = regex.compile(
    r"(?s)\r\n"
    + "|" + _LETTER_RUN
    + "|" + _KATAKANA_RUN
    + "|[" + WB_NEWLINE + "]"
    + "|." + WB_EXTEND
)


# ============================================================================
# Sentence Break Classes
# ============================================================================

SB_SEP = r"\p{Sentence_Break=Sep}\p{Sentence_Break=CR}\p{Sentence_Break=LF}"
SB_SATERM = r"\p{Sentence_Break=STerm}\p{Sentence_Break=ATerm}"
SB_CLOSE = r"\p{Sentence_Break=Close}"
SB_SP = r"\p{Sentence_Break=Sp}"
SB_EXTEND = r"[\p{Sentence_Break=Extend}\p{Sentence_Break=Format}]*"

# SB4 paragraph separators, SB9-SB11 terminator runs with their
# closing punctuation, spaces and an optional paragraph separator
_SENTENCE_TERMINATOR = regex.compile(
    r"(?P<para>\r\n|[" + SB_SEP + "])"
    + "|(?P<term>(?:[" + SB_SATERM + "]" + SB_EXTEND + ")+)"
    + "(?P<close>(?:[" + SB_CLOSE + "]" + SB_EXTEND + ")*)"
    + "(?P<sp>(?:[" + SB_SP + "]" + SB_EXTEND + ")*)"
    + r"(?P<sep>\r\n|[" + SB_SEP + "])?"
)

_ENDS_WITH_ATERM = regex.compile(r"\p{Sentence_Break=ATerm}" + SB_EXTEND + r"\Z")
_SB_NUMERIC = regex.compile(r"\p{Sentence_Break=Numeric}")
_SB_UPPER = regex.compile(r"\p{Sentence_Break=Upper}")
_SB_UPPER_OR_LOWER = regex.compile(r"[\p{Sentence_Break=Upper}\p{Sentence_Break=Lower}]")
_SB_CONTINUE = regex.compile(r"[\p{Sentence_Break=SContinue}" + SB_SATERM + "]")

# SB8: skip anything that is not a letter, separator or terminator,
# then look for a lowercase letter
_SB_LOWER_AHEAD = regex.compile(
    r"[^\p{Sentence_Break=OLetter}\p{Sentence_Break=Upper}\p{Sentence_Break=Lower}"
    + SB_SEP + SB_SATERM + "]*"
    + r"\p{Sentence_Break=Lower}"
)


def _breaks_after(text: str, match) -> bool:
    """
    Decide whether a terminator run ends a sentence.
    
    Args:
        text: The full text being segmented
        match: A _SENTENCE_TERMINATOR match that does not end the text
        
    Returns:
        True if there is a sentence boundary at match.end()
    """
    if match.group("para") or match.group("sep"):
        return True
    
    following = text[match.end()]
    
    if _ENDS_WITH_ATERM.search(match.group("term")):
        bare = not match.group("close") and not match.group("sp")
        
        # SB6: "3.5"
        if bare and _SB_NUMERIC.match(following):
            return False
        
        # SB7: "U.S.A"
        start = match.start()
        if (bare and start > 0 and _SB_UPPER_OR_LOWER.match(text[start - 1])
                and _SB_UPPER.match(following)):
            return False
        
        # SB8: "e.g. the"
        if _SB_LOWER_AHEAD.match(text, match.end()):
            return False
    
    # SB8a: "etc., and"
    if _SB_CONTINUE.match(following):
        return False
    
    return True


# ============================================================================
# Cursor
# ============================================================================

class BoundaryCursor:
    """
    Forward-only cursor over the boundary offsets of one text.
    
    Offsets are pulled lazily from the underlying generator and kept, so
    look-ahead queries (is_boundary) never move the cursor. A cursor
    belongs to a single parse call; it is not safe to share.
    
    Attributes:
        text: The text the offsets refer to
    """
    
    # Returned once the cursor has moved past the last boundary
    DONE = None
    
    def __init__(self, text: str, offsets: Iterable[int]):
        self.text = text
        self._pending = iter(offsets)
        self._offsets: List[int] = []
        self._exhausted = False
        self._position = 0
        self._pull()
    
    def _pull(self) -> bool:
        """Materialize one more boundary. False when there are none left."""
        if self._exhausted:
            return False
        try:
            self._offsets.append(next(self._pending))
        except StopIteration:
            self._exhausted = True
            return False
        return True
    
    def _fill_to(self, offset: int) -> None:
        """Materialize boundaries until one at or past offset is known."""
        while not self._offsets or self._offsets[-1] < offset:
            if not self._pull():
                break
    
    @property
    def current(self) -> Optional[int]:
        """The boundary the cursor is on, or DONE."""
        if self._position >= len(self._offsets):
            return self.DONE
        return self._offsets[self._position]
    
    def first(self) -> Optional[int]:
        """Move to the first boundary (always 0)."""
        self._position = 0
        return self.current
    
    def next(self) -> Optional[int]:
        """Move to the next boundary, or return DONE when there is none."""
        if self._position >= len(self._offsets) - 1 and not self._pull():
            self._position = len(self._offsets)
            return self.DONE
        self._position += 1
        return self._offsets[self._position]
    
    def following(self, offset: int) -> Optional[int]:
        """
        Move to the first boundary at or after offset.
        
        The cursor never moves backwards: if it already sits at or past
        offset it stays where it is.
        
        Returns:
            The new current boundary, or DONE if none is at or past offset
        """
        current = self.current
        if current is self.DONE or current >= offset:
            return current
        
        self._fill_to(offset)
        index = bisect_left(self._offsets, offset, lo=self._position)
        self._position = index
        return self.current
    
    def is_boundary(self, offset: int) -> bool:
        """Check whether offset is exactly a boundary, without moving."""
        if offset < 0 or offset > len(self.text):
            return False
        self._fill_to(offset)
        index = bisect_left(self._offsets, offset)
        return index < len(self._offsets) and self._offsets[index] == offset
    
    def segments(self) -> Iterator[Tuple[int, int]]:
        """Yield (start, end) for every segment from the current boundary on."""
        start = self.current
        if start is self.DONE:
            return
        end = self.next()
        while end is not self.DONE:
            yield start, end
            start = end
            end = self.next()


# ============================================================================
# Segmenters
# ============================================================================

class BoundarySegmenter(ABC):
    """
    Locale-aware sentence and word boundary analysis.
    
    Implementations only provide the offset generators; cursors are
    created fresh for every text.
    """
    
    def __init__(self, locale: str = DEFAULT_LOCALE):
        if not locale or not locale.strip():
            raise ValueError("locale must be a non-empty string")
        self.locale = locale.strip().replace("-", "_")
    
    @abstractmethod
    def sentence_offsets(self, text: str) -> Iterator[int]:
        """Lazily yield sentence boundary offsets of text."""
    
    @abstractmethod
    def word_offsets(self, text: str) -> Iterator[int]:
        """Lazily yield word/non-word boundary offsets of text."""
    
    def sentences(self, text: str) -> BoundaryCursor:
        return BoundaryCursor(text, self.sentence_offsets(text))
    
    def words(self, text: str) -> BoundaryCursor:
        return BoundaryCursor(text, self.word_offsets(text))
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r})"


class UnicodeBoundarySegmenter(BoundarySegmenter):
    """
    Word and sentence boundaries from the tailored UAX #29 rules above.
    
    Every locale gets the same rules; the locale is kept for callers
    that report or compare it.
    """
    
    def sentence_offsets(self, text: str) -> Iterator[int]:
        yield 0
        size = len(text)
        for match in _SENTENCE_TERMINATOR.finditer(text):
            if match.end() < size and _breaks_after(text, match):
                yield match.end()
        if size:
            yield size
    
    def word_offsets(self, text: str) -> Iterator[int]:
        yield 0
        for match in _WORD_SEGMENT.finditer(text):
            yield match.end()
