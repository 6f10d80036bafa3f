import pytest

from pixelpets.highscore import Highscore

SAMPLE = (
    "Grey Cat Highscore:\n"
    " 50\n"
    "Pink Cat Highscore:\n"
    " 10\n"
    "Shiba Highscore:\n"
    "100\n"
)


@pytest.fixture
def score_file(tmp_path):
    path = tmp_path / "Highscore.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_constructor_reads_scores(score_file):
    highscore = Highscore(score_file)
    assert highscore.score_text("greyCat") == " 50"
    assert highscore.score_text("pinkCat") == " 10"
    assert highscore.score_text("shibaInu") == "100"


def test_add_highscore(score_file):
    highscore = Highscore(score_file)
    assert highscore.add_highscore(123, "pinkCat") is True
    assert highscore.score_text("pinkCat") == "123"


def test_lower_score_is_ignored(score_file):
    highscore = Highscore(score_file)
    assert highscore.add_highscore(5, "shibaInu") is False
    assert highscore.score_text("shibaInu") == "100"


def test_file_rewritten_and_reloadable(score_file):
    highscore = Highscore(score_file)
    highscore.add_highscore(123, "pinkCat")
    lines = score_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Grey Cat Highscore:"
    assert lines[2] == "Pink Cat Highscore:"
    assert lines[4] == "Shiba Inu Highscore:"
    reloaded = Highscore(score_file)
    assert reloaded.score_text("pinkCat") == "123"
    assert reloaded.score_text("greyCat") == "50"
    assert reloaded.score_text("shibaInu") == "100"


def test_unknown_breed_leaves_scores(score_file):
    highscore = Highscore(score_file)
    assert highscore.add_highscore(10_000, "parrot") is False
    assert Highscore(score_file).score_text("shibaInu") == "100"


def test_unknown_breed_text_raises(score_file):
    with pytest.raises(KeyError):
        Highscore(score_file).score_text("parrot")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Highscore(tmp_path / "absent.txt")


def test_malformed_score_raises(tmp_path):
    path = tmp_path / "Highscore.txt"
    path.write_text("Grey Cat Highscore:\nlots\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Highscore(path)


def test_truncated_file_raises(tmp_path):
    path = tmp_path / "Highscore.txt"
    path.write_text("Grey Cat Highscore:\n50\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Highscore(path)