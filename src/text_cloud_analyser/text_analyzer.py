"""
Модуль для анализа текста

Собирает компоненты в единый конвейер:
- Токенизация и разбиение на предложения
- Частотная таблица слов и частые биграммы
- Словарная тональность
- Метрики читаемости (Flesch / Flesch-Kincaid)

Все функции чистые: одинаковый текст даёт одинаковый результат,
некорректный ввод даёт пустой результат вместо исключения.
"""

import time
import logging
from dataclasses import replace
from typing import Any, List, Optional
from .components.tokenizer import TokenProcessor, SentenceSplitter
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.sentiment import SentimentScorer
from .components.readability import ReadabilityAnalyzer, HeuristicSyllableCounter
from .interfaces.text_processor import (
    TextProcessor,
    TextAnalysisResult,
    ReadabilityMetrics,
    FrequencyOptions,
    WordFrequency,
    Bigram,
    TokenProcessorInterface,
    SentenceSplitterInterface,
    FrequencyAnalyzerInterface,
    SentimentScorerInterface,
    ReadabilityAnalyzerInterface,
)

logger = logging.getLogger(__name__)


class TextAnalyzer(TextProcessor):
    """Фасад анализа текста поверх компонентов."""

    def __init__(self,
                 frequency_options: Optional[FrequencyOptions] = None,
                 top_bigrams: int = 10,
                 tokenizer: Optional[TokenProcessorInterface] = None,
                 sentence_splitter: Optional[SentenceSplitterInterface] = None,
                 frequency_analyzer: Optional[FrequencyAnalyzerInterface] = None,
                 sentiment_scorer: Optional[SentimentScorerInterface] = None,
                 readability_analyzer: Optional[ReadabilityAnalyzerInterface] = None):
        """
        Инициализация анализатора.

        Args:
            frequency_options: Параметры частотной таблицы результата
            top_bigrams: Сколько биграмм включать в результат
            tokenizer, sentence_splitter, frequency_analyzer,
            sentiment_scorer, readability_analyzer: Замена компонентов
        """
        self.frequency_options = frequency_options or FrequencyOptions()
        self.top_bigrams = top_bigrams
        self.tokenizer = tokenizer or TokenProcessor()
        self.sentence_splitter = sentence_splitter or SentenceSplitter()
        self.frequency_analyzer = frequency_analyzer or FrequencyAnalyzer()
        self.sentiment_scorer = sentiment_scorer or SentimentScorer()
        self.readability_analyzer = readability_analyzer or ReadabilityAnalyzer()

    @classmethod
    def from_config(cls, cfg=None) -> "TextAnalyzer":
        """Создаёт анализатор с параметрами из config.yaml."""
        if cfg is None:
            from .config import config as cfg
        return cls(frequency_options=cfg.get_frequency_options(), top_bigrams=cfg.get_top_bigrams())

    def analyze_text(self, text: str) -> TextAnalysisResult:
        """Анализирует текст и возвращает результат."""
        if not isinstance(text, str):
            logger.warning(f"Анализ: ожидалась строка, получено {type(text).__name__}")
            return TextAnalysisResult()
        if not text.strip():
            return TextAnalysisResult()

        start = time.perf_counter()
        try:
            result = self._analyze(text)
        except Exception as e:
            logger.error(f"Ошибка анализа текста, возвращаю пустой результат: {e}")
            return TextAnalysisResult()

        logger.debug(
            f"Анализ завершён за {(time.perf_counter() - start) * 1000:.1f} мс: "
            f"слов {result.total_words}, уникальных {result.unique_words}"
        )
        return result

    def _analyze(self, text: str) -> TextAnalysisResult:
        tokens = self.tokenizer.tokenize(text)
        raw_tokens = self.tokenizer.tokenize(text, remove_stop_words=False)
        sentences = self.sentence_splitter.split(text)

        word_frequencies = self.frequency_analyzer.build_frequencies(
            self._frequency_tokens(text, tokens, self.frequency_options),
            self.frequency_options,
        )
        readability_metrics = self.readability_analyzer.analyze(sentences, raw_tokens)

        return TextAnalysisResult(
            word_frequencies=word_frequencies,
            total_words=len(raw_tokens),
            unique_words=self.count_unique_words(text),
            average_word_length=readability_metrics.average_word_length,
            sentiment_score=self.sentiment_scorer.score(tokens),
            readability=readability_metrics,
            top_bigrams=self.frequency_analyzer.get_bigrams(tokens, self.top_bigrams),
        )

    def _frequency_tokens(self, text: str, tokens: List[str], options: FrequencyOptions) -> List[str]:
        if options.case_sensitive:
            return self.tokenizer.tokenize(text, lowercase=False)
        return tokens

    def count_unique_words(self, text: str) -> int:
        """
        Уникальные слова по мягкой нормализации.

        Стоп-слова и короткие слова учитываются, поэтому значение
        может превышать длину частотной таблицы.
        """
        return len(set(self.tokenizer.normalize_words(text)))

    def get_frequencies(self, text: str, options: Optional[FrequencyOptions] = None) -> List[WordFrequency]:
        """Частотная таблица по тексту."""
        options = options or self.frequency_options
        if not isinstance(text, str):
            return []
        tokens = self.tokenizer.tokenize(text)
        return self.frequency_analyzer.build_frequencies(
            self._frequency_tokens(text, tokens, options), options
        )

    def get_readability(self, text: str) -> ReadabilityMetrics:
        """Метрики читаемости по тексту."""
        if not isinstance(text, str):
            return ReadabilityMetrics()
        return self.readability_analyzer.analyze(
            self.sentence_splitter.split(text),
            self.tokenizer.tokenize(text, remove_stop_words=False),
        )


_default_analyzer = TextAnalyzer()
_default_syllable_counter = HeuristicSyllableCounter()


def tokenize(text: str, remove_stop_words: bool = True, lowercase: bool = True) -> List[str]:
    """Нормализованные токены текста в порядке чтения."""
    return _default_analyzer.tokenizer.tokenize(text, remove_stop_words, lowercase=lowercase)


def normalize_words(text: str) -> List[str]:
    """Слова текста после мягкой нормализации (для подсчёта уникальных)."""
    return _default_analyzer.tokenizer.normalize_words(text)


def split_sentences(text: str) -> List[str]:
    """Непустые предложения текста."""
    return _default_analyzer.sentence_splitter.split(text)


def frequencies(text: str, options: Optional[FrequencyOptions] = None, **overrides: Any) -> List[WordFrequency]:
    """
    Частотная таблица слов текста.

    Args:
        text: Исходный текст
        options: FrequencyOptions (по умолчанию стандартные значения)
        **overrides: Отдельные поля FrequencyOptions, имеют приоритет

    Returns:
        Список WordFrequency длиной не больше max_results
    """
    options = replace(options or FrequencyOptions(), **overrides)
    return _default_analyzer.get_frequencies(text, options)


def bigrams(tokens: List[str], limit: int = 10) -> List[Bigram]:
    """Самые частые пары соседних токенов."""
    return _default_analyzer.frequency_analyzer.get_bigrams(tokens, limit)


def sentiment(tokens: List[str]) -> float:
    """Тональность списка токенов в диапазоне [-1, 1]."""
    return _default_analyzer.sentiment_scorer.score(tokens)


def count_syllables(word: str) -> int:
    """Эвристическое число слогов в английском слове."""
    return _default_syllable_counter.count(word)


def readability(text: str) -> ReadabilityMetrics:
    """Метрики читаемости текста."""
    return _default_analyzer.get_readability(text)


def analyze(text: str) -> TextAnalysisResult:
    """Полный анализ текста."""
    return _default_analyzer.analyze_text(text)
