"""
Proper name dictionary for propername-tokenizer.

Proper names are indexed by their first word (the key). Under each key
the full names are ranked longest first, so the tokenizer always tries
the longest candidate before shorter ones.

The names themselves are kept in a marisa_trie.Trie, which gives compact
storage and a binary form that can be saved and
memory-mapped back.

A bundled default dictionary (data/NER.txt) is loaded lazily, once per
process, the first time it is asked for.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, TextIO, Tuple, Union

import marisa_trie

logger = logging.getLogger(__name__)


# ============================================================================
# Dictionary Sources
# ============================================================================

def get_default_dictionary_path() -> Path:
    """Get the bundled default dictionary path."""
    return Path(__file__).parent / "data" / "NER.txt"


def read_names(stream: TextIO) -> FrozenSet[str]:
    """
    Read proper names from a line-oriented text stream.
    
    One name per line, surrounding whitespace stripped. Blank lines
    are skipped.
    """
    names = set()
    for line in stream:
        name = line.strip()
        if name:
            names.add(name)
    return frozenset(names)


def load_names(source: Union[str, Path, TextIO], encoding: str = "utf-8") -> FrozenSet[str]:
    """
    Load proper names from a file path or an open text stream.
    
    Args:
        source: Path to a dictionary file, or a readable text stream
        encoding: Encoding used when source is a path
        
    Returns:
        The set of names
        
    Raises:
        OSError: If the file cannot be opened or read
    """
    if isinstance(source, (str, Path)):
        with open(source, encoding=encoding) as f:
            return read_names(f)
    return read_names(source)


# ============================================================================
# Default Dictionary
# ============================================================================

# Module-level singleton
_DEFAULT_NAMES: Optional[FrozenSet[str]] = None
_DEFAULT_LOCK = threading.Lock()


def is_default_loaded() -> bool:
    """Check if the default dictionary has been loaded."""
    return _DEFAULT_NAMES is not None


def get_default_names() -> FrozenSet[str]:
    """
    Get the bundled default proper names.
    
    Loaded on first use and reused afterwards. If the bundled file
    cannot be read the failure is logged and an empty set is used, so
    a tokenizer built on it still works (it just finds no names).
    """
    global _DEFAULT_NAMES
    
    if _DEFAULT_NAMES is not None:
        return _DEFAULT_NAMES
    
    with _DEFAULT_LOCK:
        if _DEFAULT_NAMES is None:
            path = get_default_dictionary_path()
            try:
                _DEFAULT_NAMES = load_names(path)
                logger.debug("Loaded %d default proper names from %s", len(_DEFAULT_NAMES), path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Failed to load default dictionary %s: %s", path, e)
                _DEFAULT_NAMES = frozenset()
    
    return _DEFAULT_NAMES


def reset_default_names():
    """Forget the loaded default dictionary (it reloads on next use)."""
    global _DEFAULT_NAMES
    with _DEFAULT_LOCK:
        _DEFAULT_NAMES = None


# ============================================================================
# Proper Name Dictionary
# ============================================================================

def name_key(name: str) -> str:
    """The key of a proper name: everything up to its first space."""
    idx = name.find(' ')
    if idx == -1:
        return name
    return name[:idx]


class ProperNameDictionary:
    """
    Proper names indexed by first word, longest name first.
    
    Names of equal length under one key are all kept, in the order they
    were given. The index is built once and never changes.
    
    Example:
        >>> d = ProperNameDictionary(["Gavrilo Princip", "Gavrilo"])
        >>> d.candidates_for_key("Gavrilo")
        ('Gavrilo Princip', 'Gavrilo')
    """
    
    def __init__(self, names: Iterable[str]):
        ordered: List[str] = []
        seen = set()
        for name in names:
            if name and name not in seen:
                seen.add(name)
                ordered.append(name)
        
        self._trie = marisa_trie.Trie(ordered)
        self._candidates = self._build_index(ordered)
        logger.debug("Indexed %d proper names under %d keys", len(ordered), len(self._candidates))
    
    @staticmethod
    def _build_index(names: List[str]) -> Dict[str, Tuple[str, ...]]:
        grouped: Dict[str, List[str]] = {}
        for name in names:
            grouped.setdefault(name_key(name), []).append(name)
        # sorted() is stable: equal lengths keep insertion order
        return {
            key: tuple(sorted(group, key=len, reverse=True))
            for key, group in grouped.items()
        }
    
    def __len__(self) -> int:
        return len(self._trie)
    
    def __repr__(self) -> str:
        return f"ProperNameDictionary({len(self)} names, {len(self._candidates)} keys)"
    
    def has_key(self, word: str) -> bool:
        """Check if some proper name starts with this word."""
        return word in self._candidates
    
    def keys(self) -> List[str]:
        return list(self._candidates)
    
    def names(self) -> FrozenSet[str]:
        return frozenset(self._trie.keys())
    
    def candidates_for_key(self, key: str) -> Tuple[str, ...]:
        """
        Get the proper names whose first word is key.
        
        Returns:
            Full names, longest first (empty if key is unknown)
        """
        return self._candidates.get(key, ())
    
    # ------------------------------------------------------------------
    # Compiled form
    # ------------------------------------------------------------------
    
    def save(self, path: Union[str, Path]):
        """Write the names as a binary marisa trie."""
        self._trie.save(str(path))
    
    @classmethod
    def load(cls, path: Union[str, Path]) -> "ProperNameDictionary":
        """
        Load a dictionary saved with save().
        
        The trie is memory-mapped, so this is fast even for large files.
        
        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Compiled dictionary not found at {path}")
        
        trie = marisa_trie.Trie()
        trie.mmap(str(path))
        return cls(trie.keys())
