import pytest

from propername_tokenizer import __version__
from propername_tokenizer.cli import main


@pytest.fixture
def story(tmp_path):
    path = tmp_path / "story.txt"
    path.write_text(
        "Gavrilo Princip shot Franz Ferdinand in Sarajevo. Gavrilo Princip was arrested.\n",
        encoding="utf-8",
    )
    return path


def test_prints_sorted_names_with_dictionary(story, names_file, capsys):
    assert main([str(story), str(names_file)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["Franz Ferdinand", "Gavrilo Princip", "Sarajevo"]


def test_default_dictionary(story, capsys):
    assert main([str(story)]) == 0
    names = capsys.readouterr().out.splitlines()
    assert "Gavrilo Princip" in names
    assert names == sorted(set(names))


def test_xml_output(story, names_file, capsys):
    assert main(["--xml", str(story), str(names_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<document>")
    assert "<properWord>Sarajevo</properWord>" in out


def test_missing_input_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_missing_dictionary_file(story, tmp_path, capsys):
    assert main([str(story), str(tmp_path / "missing.txt")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_input_is_required(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out
