"""
Подготовка частот для облака слов.

Облако само раскладывает слова; здесь только отбор самых частых слов
и линейное масштабирование размера и насыщенности шрифта по частоте.
"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, List
from ..interfaces.text_processor import WordFrequency


@dataclass
class CloudWord:
    """Слово облака с параметрами шрифта."""
    text: str
    value: int
    font_size: int
    font_weight: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class CloudWordScaler:
    """Масштабирует частоты в размеры и насыщенность шрифта."""

    def __init__(self, max_words: int = 150,
                 min_font_size: int = 30, max_font_size: int = 200,
                 min_font_weight: int = 400, max_font_weight: int = 700):
        self.max_words = max_words
        self.min_font_size = min_font_size
        self.max_font_size = max_font_size
        self.min_font_weight = min_font_weight
        self.max_font_weight = max_font_weight

    def scale(self, words: List[WordFrequency]) -> List[CloudWord]:
        """
        Отбирает до max_words самых частых слов и считает параметры шрифта.

        Args:
            words: Частотная таблица

        Returns:
            Список CloudWord в порядке убывания частоты
        """
        if not words:
            return []

        selected = sorted(words, key=lambda w: w.value, reverse=True)
        if self.max_words > 0:
            selected = selected[:self.max_words]

        values = [w.value for w in selected]
        low, high = min(values), max(values)
        spread = (high - low) or 1

        result = []
        for word in selected:
            normalized = (word.value - low) / spread
            result.append(CloudWord(
                text=word.text,
                value=word.value,
                font_size=self._interpolate(normalized, self.min_font_size, self.max_font_size),
                font_weight=self._interpolate(normalized, self.min_font_weight, self.max_font_weight),
            ))
        return result

    @staticmethod
    def _interpolate(normalized: float, low: int, high: int) -> int:
        return int(math.floor(low + normalized * (high - low) + 0.5))
