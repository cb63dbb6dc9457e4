"""
Абстрактные интерфейсы и структуры данных для компонентов анализа текста.

Определяет контракты, которые должны реализовывать все компоненты,
обеспечивая единообразный API и возможность замены реализаций
(например, эвристический подсчёт слогов можно заменить словарным).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


@dataclass
class WordFrequency:
    """Частота одного нормализованного слова."""
    text: str
    value: int
    percentage: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'text': self.text, 'value': self.value}
        if self.percentage is not None:
            data['percentage'] = self.percentage
        return data


@dataclass
class Bigram:
    """Пара соседних слов ("<слово> <слово>") и число её появлений."""
    text: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ReadabilityMetrics:
    """Метрики читаемости (Flesch Reading Ease / Flesch-Kincaid)."""
    flesch_reading_ease: float = 0.0
    flesch_kincaid_grade_level: float = 0.0
    average_sentence_length: float = 0.0
    average_word_length: float = 0.0
    total_syllables: int = 0
    average_syllables_per_word: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TextAnalysisResult:
    """Результат анализа текста."""
    word_frequencies: List[WordFrequency] = field(default_factory=list)
    total_words: int = 0
    unique_words: int = 0
    average_word_length: float = 0.0
    sentiment_score: float = 0.0
    readability: ReadabilityMetrics = field(default_factory=ReadabilityMetrics)
    top_bigrams: List[Bigram] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word_frequencies': [w.to_dict() for w in self.word_frequencies],
            'total_words': self.total_words,
            'unique_words': self.unique_words,
            'average_word_length': self.average_word_length,
            'sentiment_score': self.sentiment_score,
            'readability': self.readability.to_dict(),
            'top_bigrams': [b.to_dict() for b in self.top_bigrams],
        }


@dataclass
class FrequencyOptions:
    """Параметры построения частотной таблицы."""
    max_results: int = 100
    include_percentages: bool = False
    case_sensitive: bool = False
    min_word_length: int = 2


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str, remove_stop_words: bool = True, lowercase: bool = True) -> List[str]:
        """Разбивает текст на токены."""
        pass

    @abstractmethod
    def is_valid_token(self, token: str, remove_stop_words: bool = True) -> bool:
        """Проверяет валидность токена."""
        pass

    @abstractmethod
    def normalize_words(self, text: str) -> List[str]:
        """Мягкая нормализация слов для подсчёта уникальных."""
        pass


class SentenceSplitterInterface(ABC):
    """Интерфейс для разбиения текста на предложения."""

    @abstractmethod
    def split(self, text: str) -> List[str]:
        """Возвращает список непустых предложений."""
        pass


class FrequencyAnalyzerInterface(ABC):
    """Интерфейс для анализа частотности слов."""

    @abstractmethod
    def build_frequencies(self, tokens: List[str],
                          options: Optional[FrequencyOptions] = None) -> List[WordFrequency]:
        """Строит частотную таблицу по токенам с учётом параметров."""
        pass

    @abstractmethod
    def get_bigrams(self, words: List[str], n: int = 10) -> List[Bigram]:
        """Возвращает n самых частых пар соседних слов."""
        pass


class SentimentScorerInterface(ABC):
    """Интерфейс для оценки тональности."""

    @abstractmethod
    def score(self, tokens: List[str]) -> float:
        """Возвращает тональность в диапазоне [-1, 1]."""
        pass


class SyllableCounterInterface(ABC):
    """Стратегия подсчёта слогов в слове."""

    @abstractmethod
    def count(self, word: str) -> int:
        """Возвращает число слогов (не меньше 1)."""
        pass


class ReadabilityAnalyzerInterface(ABC):
    """Интерфейс для расчёта метрик читаемости."""

    @abstractmethod
    def analyze(self, sentences: List[str], words: List[str]) -> ReadabilityMetrics:
        """Считает метрики по предложениям и словам."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_excel(self, result: TextAnalysisResult, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует результат в Excel формат."""
        pass

    @abstractmethod
    def export_to_csv(self, result: TextAnalysisResult, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует частотную таблицу в CSV формат."""
        pass

    @abstractmethod
    def export_to_json(self, result: TextAnalysisResult, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует результат в JSON формат."""
        pass


class TextProcessor(ABC):
    """Основной интерфейс для обработки текста."""

    @abstractmethod
    def analyze_text(self, text: str) -> TextAnalysisResult:
        """Анализирует текст и возвращает результат."""
        pass
