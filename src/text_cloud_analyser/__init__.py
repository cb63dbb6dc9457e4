"""
Text Cloud Analyser - описательная статистика текста для облака слов

Этот модуль предоставляет инструменты для:
- Токенизации английского текста
- Подсчёта частоты слов и биграмм
- Словарной оценки тональности
- Расчёта читаемости (Flesch Reading Ease, Flesch-Kincaid Grade Level)
- Экспорта результатов в Excel/CSV/JSON
"""

__version__ = "0.1.0"

from .interfaces.text_processor import (
    WordFrequency,
    Bigram,
    ReadabilityMetrics,
    TextAnalysisResult,
    FrequencyOptions,
)
from .text_analyzer import (
    TextAnalyzer,
    tokenize,
    normalize_words,
    split_sentences,
    frequencies,
    bigrams,
    sentiment,
    count_syllables,
    readability,
    analyze,
)

__all__ = [
    "WordFrequency",
    "Bigram",
    "ReadabilityMetrics",
    "TextAnalysisResult",
    "FrequencyOptions",
    "TextAnalyzer",
    "tokenize",
    "normalize_words",
    "split_sentences",
    "frequencies",
    "bigrams",
    "sentiment",
    "count_syllables",
    "readability",
    "analyze",
]
