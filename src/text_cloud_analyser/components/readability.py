"""
Компонент для расчёта читаемости текста.

Содержит эвристический счётчик слогов для английского языка и расчёт
индексов Flesch Reading Ease и Flesch-Kincaid Grade Level. Счётчик слогов
подключается как стратегия и может быть заменён словарной реализацией.
"""

import math
import re
import logging
from typing import List, Optional
from ..interfaces.text_processor import (
    ReadabilityAnalyzerInterface,
    ReadabilityMetrics,
    SyllableCounterInterface,
)

logger = logging.getLogger(__name__)

NON_LETTERS_PATTERN = re.compile(r"[^a-z]")
VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")


class HeuristicSyllableCounter(SyllableCounterInterface):
    """Приблизительный подсчёт слогов по группам гласных."""

    def count(self, word: str) -> int:
        """
        Считает слоги в слове.

        Правила:
          - слова длиной до 3 букв считаются односложными
          - конечная немая "e" отбрасывается
          - каждая серия гласных (a e i o u y) даёт слог
          - "ion" на конце +0.5, "le" на конце +0.5, "ed" на конце -0.5
          - округление половин вверх, минимум 1
        """
        if not isinstance(word, str):
            return 1
        letters = NON_LETTERS_PATTERN.sub('', word.lower())
        if len(letters) <= 3:
            return 1

        stem = letters[:-1] if letters.endswith('e') else letters
        syllables: float = len(VOWEL_GROUP_PATTERN.findall(stem)) or 1

        if letters.endswith('ion'):
            syllables += 0.5
        if letters.endswith('le'):
            syllables += 0.5
        if letters.endswith('ed'):
            syllables -= 0.5

        return max(1, int(math.floor(syllables + 0.5)))


class ReadabilityAnalyzer(ReadabilityAnalyzerInterface):
    """Анализатор читаемости по формулам Флеша."""

    def __init__(self, syllable_counter: Optional[SyllableCounterInterface] = None):
        """
        Args:
            syllable_counter: Стратегия подсчёта слогов (по умолчанию эвристика)
        """
        self.syllable_counter = syllable_counter or HeuristicSyllableCounter()

    def analyze(self, sentences: List[str], words: List[str]) -> ReadabilityMetrics:
        """
        Считает метрики читаемости.

        Args:
            sentences: Предложения текста
            words: Все слова текста (со стоп-словами)

        Returns:
            ReadabilityMetrics; нули, если нет предложений или слов
        """
        sentence_count = len(sentences)
        word_count = len(words)
        if sentence_count == 0 or word_count == 0:
            return ReadabilityMetrics()

        total_characters = sum(len(word) for word in words)
        total_syllables = sum(self.syllable_counter.count(word) for word in words)

        average_sentence_length = word_count / sentence_count
        average_word_length = total_characters / word_count
        average_syllables_per_word = total_syllables / word_count

        reading_ease = 206.835 - 1.015 * average_sentence_length - 84.6 * average_syllables_per_word
        grade_level = 0.39 * average_sentence_length + 11.8 * average_syllables_per_word - 15.59

        metrics = ReadabilityMetrics(
            flesch_reading_ease=min(100.0, max(0.0, reading_ease)),
            flesch_kincaid_grade_level=max(0.0, grade_level),
            average_sentence_length=average_sentence_length,
            average_word_length=average_word_length,
            total_syllables=total_syllables,
            average_syllables_per_word=average_syllables_per_word,
        )
        logger.debug(
            f"Читаемость: предложений {sentence_count}, слов {word_count}, "
            f"слогов {total_syllables}, FRE={metrics.flesch_reading_ease:.2f}"
        )
        return metrics
