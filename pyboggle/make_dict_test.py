from pyboggle.lexicon import Lexicon
from pyboggle.make_dict import clean_wordlist, is_boggle_word


def test_is_boggle_word():
    assert is_boggle_word("boggle")
    assert is_boggle_word("quart")
    assert is_boggle_word("quinquennia")
    assert not is_boggle_word("qi")
    assert not is_boggle_word("qat")
    assert not is_boggle_word("iraq")
    assert not is_boggle_word("is")
    assert not is_boggle_word("don't")
    assert not is_boggle_word("café")


def test_clean_wordlist():
    lines = ["Quart\n", "boggle\n", "\n", "qat\n", "is\n", "boggle\n", "apple  \n"]
    words = clean_wordlist(lines)
    assert words == ["apple", "boggle", "quart"]
    assert [*Lexicon(words)] == words
