"""
Тесты для SentimentScorer и словарей.
"""

import pytest
from text_cloud_analyser import sentiment, tokenize
from text_cloud_analyser.components.sentiment import SentimentScorer
from text_cloud_analyser.components.lexicons import STOP_WORDS, POSITIVE_WORDS, NEGATIVE_WORDS


def test_mixed_tokens():
    assert sentiment(["good", "bad", "good"]) == pytest.approx(1 / 3)


@pytest.mark.parametrize("tokens", [
    [], (), None, "good", 42, 3.14, iter(["good", "bad", "good"]), {"good", "great"},
])
def test_empty_tokens_score_zero(tokens):
    assert sentiment(tokens) == 0.0


def test_tuple_of_tokens_is_scored():
    assert sentiment(("good", "bad", "good")) == pytest.approx(1 / 3)


def test_neutral_words_contribute_nothing():
    assert sentiment(["table", "chair"]) == 0.0
    assert sentiment(["great", "table", "chair", "lamp"]) == pytest.approx(0.25)


def test_bounds():
    assert sentiment(["bad", "awful"]) == -1.0
    assert sentiment(["love", "excellent"]) == 1.0


def test_text_sentiment_uses_filtered_tokens():
    """Стоп-слова не попадают в знаменатель."""
    tokens = tokenize("This is a really good day")
    assert tokens == ["really", "good", "day"]
    assert sentiment(tokens) == pytest.approx(1 / 3)


def test_custom_lexicons():
    scorer = SentimentScorer(positive_words=frozenset(["sunny"]), negative_words=frozenset(["rainy"]))
    assert scorer.score(["sunny", "sunny", "rainy", "good"]) == pytest.approx(0.25)


def test_lexicons_are_disjoint_and_free_of_stop_words():
    assert POSITIVE_WORDS.isdisjoint(NEGATIVE_WORDS)
    assert POSITIVE_WORDS.isdisjoint(STOP_WORDS)
    assert NEGATIVE_WORDS.isdisjoint(STOP_WORDS)
    assert 20 <= len(POSITIVE_WORDS) <= 30
    assert 20 <= len(NEGATIVE_WORDS) <= 30
    assert len(STOP_WORDS) >= 140
