"""
Компоненты для анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TokenProcessor - токенизация текста
- SentenceSplitter - разбиение на предложения
- FrequencyAnalyzer - подсчёт частотности и биграмм
- SentimentScorer - словарная тональность
- HeuristicSyllableCounter - подсчёт слогов
- ReadabilityAnalyzer - метрики читаемости
- CloudWordScaler - параметры шрифта для облака слов
- ResultExporter - экспорт результатов
"""

from .tokenizer import TokenProcessor, SentenceSplitter
from .frequency_analyzer import FrequencyAnalyzer
from .sentiment import SentimentScorer
from .readability import HeuristicSyllableCounter, ReadabilityAnalyzer
from .cloud import CloudWord, CloudWordScaler
from .exporter import ResultExporter, format_summary

__all__ = [
    'TokenProcessor',
    'SentenceSplitter',
    'FrequencyAnalyzer',
    'SentimentScorer',
    'HeuristicSyllableCounter',
    'ReadabilityAnalyzer',
    'CloudWord',
    'CloudWordScaler',
    'ResultExporter',
    'format_summary',
]
