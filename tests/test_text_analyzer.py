"""
Тесты фасада анализа текста.
"""

import math
import pytest
from text_cloud_analyser import (
    analyze,
    TextAnalyzer,
    TextAnalysisResult,
    ReadabilityMetrics,
    WordFrequency,
    Bigram,
    FrequencyOptions,
)
from text_cloud_analyser.interfaces import TokenProcessorInterface, FrequencyAnalyzerInterface


def _numeric_fields(result: TextAnalysisResult):
    yield result.total_words
    yield result.unique_words
    yield result.average_word_length
    yield result.sentiment_score
    yield from result.readability.to_dict().values()
    for word in result.word_frequencies:
        yield word.value
    for bigram in result.top_bigrams:
        yield bigram.value


class TestAnalyze:

    def test_empty_text(self):
        result = analyze("")
        assert result.total_words == 0
        assert result.unique_words == 0
        assert result.sentiment_score == 0
        assert result.readability == ReadabilityMetrics()
        assert result.top_bigrams == []
        assert result.word_frequencies == []

    @pytest.mark.parametrize("text", [None, 42, ["list"], b"bytes", "   ", "...!!!", "\n\n"])
    def test_degenerate_input_never_raises(self, text):
        assert analyze(text) == TextAnalysisResult()

    def test_review_text(self, sample_texts):
        result = analyze(sample_texts["review"])

        assert result.total_words == 14
        assert result.unique_words == 12
        assert result.sentiment_score == pytest.approx(2 / 7)
        assert [w.text for w in result.word_frequencies] == [
            "love", "great", "product", "quality", "good", "price", "bad"
        ]
        assert all(w.value == 1 for w in result.word_frequencies)
        assert result.top_bigrams[0] == Bigram(text="love great", value=1)
        assert len(result.top_bigrams) == 6
        assert result.average_word_length == result.readability.average_word_length
        assert result.readability.average_sentence_length == 7

    def test_unique_words_counts_stop_words_and_short_words(self):
        """Уникальные слова считаются до удаления стоп-слов и фильтра длины."""
        result = analyze("The x the y cat")
        assert result.unique_words == 4
        assert [w.text for w in result.word_frequencies] == ["cat"]

    def test_frequency_sum_not_above_total_words(self, sample_texts):
        for text in sample_texts.values():
            result = analyze(text)
            assert sum(w.value for w in result.word_frequencies) <= result.total_words

    def test_bigrams_capped_at_ten(self):
        text = " ".join(f"token{i}" for i in range(40))
        assert len(analyze(text).top_bigrams) == 10

    def test_top_bigram_scenario(self):
        result = analyze("new york new york city")
        assert result.top_bigrams[0] == Bigram(text="new york", value=2)
        assert result.word_frequencies[:2] == [
            WordFrequency(text="new", value=2),
            WordFrequency(text="york", value=2),
        ]

    def test_idempotent(self, sample_texts):
        for text in sample_texts.values():
            assert analyze(text) == analyze(text)

    def test_all_numbers_finite(self, sample_texts):
        texts = list(sample_texts.values()) + ["a", "I", "!!! word", "x y z", "1 2 3 4"]
        for text in texts:
            result = analyze(text)
            assert all(math.isfinite(v) for v in _numeric_fields(result))
            assert -1 <= result.sentiment_score <= 1

    def test_to_dict(self, sample_texts):
        data = analyze(sample_texts["simple"]).to_dict()
        assert data["total_words"] == 4
        assert data["readability"]["flesch_reading_ease"] == 100.0
        assert data["word_frequencies"] == [
            {"text": "see", "value": 1},
            {"text": "cat", "value": 1},
            {"text": "run", "value": 1},
        ]


class TestTextAnalyzer:

    def test_custom_frequency_options(self):
        analyzer = TextAnalyzer(
            frequency_options=FrequencyOptions(max_results=2, include_percentages=True),
            top_bigrams=1,
        )
        result = analyzer.analyze_text("alpha beta beta gamma gamma gamma")
        assert [(w.text, w.value) for w in result.word_frequencies] == [("gamma", 3), ("beta", 2)]
        assert result.word_frequencies[0].percentage == pytest.approx(50.0)
        assert len(result.top_bigrams) == 1

    def test_case_sensitive_options(self):
        analyzer = TextAnalyzer(frequency_options=FrequencyOptions(case_sensitive=True))
        result = analyzer.analyze_text("Paris paris")
        assert [w.text for w in result.word_frequencies] == ["Paris", "paris"]
        # Тональность и биграммы считаются по токенам в нижнем регистре
        assert result.top_bigrams == [Bigram(text="paris paris", value=1)]

    def test_component_failure_degrades_to_empty_result(self):
        class BrokenScorer:
            def score(self, tokens):
                raise RuntimeError("boom")

        analyzer = TextAnalyzer(sentiment_scorer=BrokenScorer())
        assert analyzer.analyze_text("good text here") == TextAnalysisResult()

    def test_from_config(self, tmp_path):
        from text_cloud_analyser.config import Config

        cfg_path = tmp_path / "config.yaml"
        cfg_path.write_text("text_analysis:\n  max_results: 1\n  top_bigrams: 2\n", encoding="utf-8")
        analyzer = TextAnalyzer.from_config(Config(config_path=str(cfg_path)))

        assert analyzer.frequency_options.max_results == 1
        assert analyzer.top_bigrams == 2
        assert len(analyzer.analyze_text("one two two").word_frequencies) == 1

    def test_components_implementing_interfaces_are_swappable(self):
        """Фасад вызывает только методы, объявленные в интерфейсах."""

        class WhitespaceTokenizer(TokenProcessorInterface):
            def tokenize(self, text, remove_stop_words=True, lowercase=True):
                words = text.split()
                return [w.lower() for w in words] if lowercase else words

            def is_valid_token(self, token, remove_stop_words=True):
                return bool(token)

            def normalize_words(self, text):
                return text.lower().split()

        class PlainFrequencyAnalyzer(FrequencyAnalyzerInterface):
            def build_frequencies(self, tokens, options=None):
                return [WordFrequency(text=t, value=1) for t in tokens]

            def get_bigrams(self, words, n=10):
                return []

        analyzer = TextAnalyzer(
            tokenizer=WhitespaceTokenizer(),
            frequency_analyzer=PlainFrequencyAnalyzer(),
        )
        result = analyzer.analyze_text("Good cat runs fast")

        assert result.total_words == 4
        assert result.unique_words == 4
        assert [w.text for w in result.word_frequencies] == ["good", "cat", "runs", "fast"]
        assert result.sentiment_score == pytest.approx(0.25)

    def test_incomplete_frequency_analyzer_cannot_be_created(self):
        class BigramsOnly(FrequencyAnalyzerInterface):
            def get_bigrams(self, words, n=10):
                return []

        with pytest.raises(TypeError):
            BigramsOnly()
