import io
import logging

import pytest

from propername_tokenizer import dictionary
from propername_tokenizer.dictionary import (
    ProperNameDictionary,
    get_default_names,
    is_default_loaded,
    load_names,
    name_key,
)


def test_name_key():
    assert name_key("Gavrilo Princip") == "Gavrilo"
    assert name_key("Kaiser Wilhelm II") == "Kaiser"
    assert name_key("Sarajevo") == "Sarajevo"


def test_candidates_longest_first():
    d = ProperNameDictionary(["Franz", "Franz Joseph", "Franz Ferdinand"])
    assert d.candidates_for_key("Franz") == ("Franz Ferdinand", "Franz Joseph", "Franz")


def test_same_length_candidates_keep_insertion_order():
    d = ProperNameDictionary(["Anna Dell", "Anna Bell", "Anna"])
    assert d.candidates_for_key("Anna") == ("Anna Dell", "Anna Bell", "Anna")


def test_unknown_key_has_no_candidates():
    d = ProperNameDictionary(["Gavrilo Princip"])
    assert d.candidates_for_key("Princip") == ()
    assert not d.has_key("Princip")
    assert d.has_key("Gavrilo")


def test_duplicates_and_empty_names_collapse():
    d = ProperNameDictionary(["Sarajevo", "Sarajevo", ""])
    assert len(d) == 1
    assert d.keys() == ["Sarajevo"]


def test_names():
    d = ProperNameDictionary(["Franz Joseph", "Franz Ferdinand", "Sophie Chotek"])
    assert d.names() == frozenset(["Franz Joseph", "Franz Ferdinand", "Sophie Chotek"])
    assert d.keys() == ["Franz", "Sophie"]


def test_save_and_load(tmp_path):
    path = tmp_path / "names.dic"
    ProperNameDictionary(["Gavrilo Princip", "Gavrilo", "Sarajevo"]).save(path)
    
    loaded = ProperNameDictionary.load(path)
    assert loaded.names() == frozenset(["Gavrilo Princip", "Gavrilo", "Sarajevo"])
    assert loaded.candidates_for_key("Gavrilo") == ("Gavrilo Princip", "Gavrilo")


def test_load_missing_compiled_dictionary(tmp_path):
    with pytest.raises(FileNotFoundError):
        ProperNameDictionary.load(tmp_path / "missing.dic")


# ============================================================================
# Sources
# ============================================================================

def test_load_names_from_path(names_file):
    assert load_names(names_file) == frozenset(["Gavrilo Princip", "Franz Ferdinand", "Sarajevo"])
    assert load_names(str(names_file)) == load_names(names_file)


def test_load_names_from_stream():
    stream = io.StringIO("Sophie Chotek\r\n\t Franz Joseph\n\n")
    assert load_names(stream) == frozenset(["Sophie Chotek", "Franz Joseph"])


def test_load_names_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_names(tmp_path / "missing.txt")


# ============================================================================
# Default dictionary
# ============================================================================

def test_default_names_loaded_once(fresh_default):
    assert not is_default_loaded()
    first = get_default_names()
    assert is_default_loaded()
    assert get_default_names() is first
    assert "Gavrilo Princip" in first


def test_default_names_fall_back_to_empty(fresh_default, monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(dictionary, "get_default_dictionary_path", lambda: tmp_path / "NER.txt")
    
    with caplog.at_level(logging.WARNING, logger="propername_tokenizer.dictionary"):
        names = get_default_names()
    
    assert names == frozenset()
    assert "Failed to load default dictionary" in caplog.text
    assert get_default_names() is names
