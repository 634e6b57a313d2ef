from pyboggle.results import SCORES, ResultSet, score_word


def test_score_word():
    assert score_word("") == 0
    assert score_word("go") == 0
    assert score_word("cat") == 1
    assert score_word("cats") == 1
    assert score_word("house") == 2
    assert score_word("houses") == 3
    assert score_word("dotages") == 5
    assert score_word("dotation") == 11
    assert score_word("quadrillionths") == 11
    # "qu" is two letters.
    assert score_word("quid") == 1
    assert score_word("quilt") == 2


def test_scores_monotonic():
    assert all(a <= b for a, b in zip(SCORES, SCORES[1:]))


def test_insert():
    rs = ResultSet()
    assert len(rs) == 0
    assert rs.total_score() == 0
    assert rs.all() == []

    assert rs.insert("house")
    assert rs.insert("cat")
    assert rs.insert("dog")
    assert not rs.insert("cat")
    assert not rs.insert("house")

    assert rs.all() == ["cat", "dog", "house"]
    assert rs.total_score() == 4
    assert len(rs) == 3
    assert "dog" in rs
    assert "do" not in rs
    assert "dogs" not in rs


def test_all_is_a_copy():
    rs = ResultSet()
    rs.insert("cat")
    words = rs.all()
    words.append("zzz")
    assert rs.all() == ["cat"]


def test_sorted_regardless_of_order():
    words = ["toe", "ado", "stags", "cat", "dotages", "coda", "cod", "ados"]
    forward = ResultSet()
    backward = ResultSet()
    for word in words:
        forward.insert(word)
    for word in reversed(words):
        backward.insert(word)
    assert forward.all() == sorted(words)
    assert backward.all() == forward.all()
    assert forward.total_score() == backward.total_score() == 1 + 1 + 2 + 1 + 5 + 1 + 1 + 1


def test_by_length():
    rs = ResultSet()
    for word in ["toe", "ado", "stags", "cat", "coda", "cod", "ados"]:
        rs.insert(word)
    assert rs.by_length() == {
        3: ["ado", "cat", "cod", "toe"],
        4: ["ados", "coda"],
        5: ["stags"],
    }
