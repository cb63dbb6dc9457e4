"""
Интерфейсы для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов и
структуры данных результата, обеспечивая единообразный API.
"""

from .text_processor import (
    WordFrequency,
    Bigram,
    ReadabilityMetrics,
    TextAnalysisResult,
    FrequencyOptions,
    TextProcessor,
    TokenProcessorInterface,
    SentenceSplitterInterface,
    FrequencyAnalyzerInterface,
    SentimentScorerInterface,
    SyllableCounterInterface,
    ReadabilityAnalyzerInterface,
    ResultExporterInterface
)

__all__ = [
    'WordFrequency',
    'Bigram',
    'ReadabilityMetrics',
    'TextAnalysisResult',
    'FrequencyOptions',
    'TextProcessor',
    'TokenProcessorInterface',
    'SentenceSplitterInterface',
    'FrequencyAnalyzerInterface',
    'SentimentScorerInterface',
    'SyllableCounterInterface',
    'ReadabilityAnalyzerInterface',
    'ResultExporterInterface'
]
