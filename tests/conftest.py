import pytest

from propername_tokenizer import dictionary
from propername_tokenizer.boundaries import UnicodeBoundarySegmenter


@pytest.fixture
def segmenter():
    return UnicodeBoundarySegmenter()


@pytest.fixture
def names_file(tmp_path):
    """A small proper names file, with padding and blank lines."""
    path = tmp_path / "names.txt"
    path.write_text(
        "Gavrilo Princip\n"
        "  Franz Ferdinand  \n"
        "\n"
        "Sarajevo\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def fresh_default():
    """Make the default dictionary load again, and forget it afterwards."""
    dictionary.reset_default_names()
    yield
    dictionary.reset_default_names()
