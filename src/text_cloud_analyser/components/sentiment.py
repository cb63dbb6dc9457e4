"""
Компонент для оценки тональности по словарям.

Считает долю позитивных минус долю негативных слов среди токенов.
"""

import logging
from typing import FrozenSet, List, Optional
from ..interfaces.text_processor import SentimentScorerInterface
from .lexicons import POSITIVE_WORDS, NEGATIVE_WORDS

logger = logging.getLogger(__name__)


class SentimentScorer(SentimentScorerInterface):
    """Словарная оценка тональности."""

    def __init__(self, positive_words: Optional[FrozenSet[str]] = None,
                 negative_words: Optional[FrozenSet[str]] = None):
        self.positive_words = POSITIVE_WORDS if positive_words is None else positive_words
        self.negative_words = NEGATIVE_WORDS if negative_words is None else negative_words

    def score(self, tokens: List[str]) -> float:
        """
        Возвращает тональность в диапазоне [-1, 1].

        Args:
            tokens: Токены (обычно без стоп-слов)

        Returns:
            (позитивные - негативные) / число токенов, 0 для пустого списка
            и для всего, что не является списком или кортежем
        """
        if not isinstance(tokens, (list, tuple)):
            if tokens is not None:
                logger.warning(f"Тональность: ожидался список токенов, получено {type(tokens).__name__}")
            return 0.0
        if not tokens:
            return 0.0

        positive = sum(1 for token in tokens if token in self.positive_words)
        negative = sum(1 for token in tokens if token in self.negative_words)
        return (positive - negative) / len(tokens)
