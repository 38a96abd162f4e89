"""
Testing pure game logic.
"""

import pytest

from codebreaker.engine import Feedback, evaluate, is_win

def test_evaluate_no_matches():
    assert evaluate([4, 5, 4, 5], [0, 1, 2, 3]) == Feedback(exact=0, color_only=0)

def test_evaluate_reversed_code_is_all_color_only():
    # every color present in both, no position matches
    assert evaluate([3, 2, 1, 0], [0, 1, 2, 3]) == Feedback(exact=0, color_only=4)

def test_evaluate_with_duplicates():
    # position 0 matches; remaining secret {0,1,2}, remaining guess {1,0,3}
    assert evaluate([0, 1, 0, 3], [0, 0, 1, 2]) == Feedback(exact=1, color_only=2)

def test_evaluate_each_secret_peg_counts_once():
    # only one 5 in the secret, so three extra 5s earn nothing
    assert evaluate([5, 5, 5, 5], [5, 0, 1, 2]) == Feedback(exact=1, color_only=0)
    assert evaluate([1, 5, 5, 5], [5, 0, 0, 0]) == Feedback(exact=0, color_only=1)

def test_evaluate_self_match_is_perfect():
    for code in ([0, 0, 0, 0], [5, 4, 3, 2], [1, 1, 2, 2]):
        assert evaluate(code, code) == Feedback(exact=4, color_only=0)

def test_evaluate_never_exceeds_peg_count():
    secret = [2, 2, 5, 5]
    for guess in ([2, 5, 2, 5], [5, 5, 2, 2], [2, 2, 2, 2], [0, 2, 5, 1]):
        feedback = evaluate(guess, secret)
        assert feedback.exact + feedback.color_only <= 4

def test_evaluate_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        evaluate([0, 1, 2], [0, 1, 2, 3])
    with pytest.raises(ValueError):
        evaluate([], [])

def test_evaluate_rejects_out_of_range_colors():
    with pytest.raises(ValueError):
        evaluate([0, 1, 2, 6], [0, 1, 2, 3])
    with pytest.raises(ValueError):
        evaluate([0, 1, 2, 3], [-1, 1, 2, 3])

def test_evaluate_respects_palette_size():
    assert evaluate([7, 0], [0, 7], colors=8) == Feedback(exact=0, color_only=2)

def test_is_win_true_and_false():
    assert is_win([1, 2, 3, 4], [1, 2, 3, 4]) is True
    assert is_win([1, 2, 3, 5], [1, 2, 3, 4]) is False
    assert is_win([1, 2, 3], [1, 2, 3, 4]) is False
