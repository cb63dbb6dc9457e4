"""
Компонент для анализа частотности слов.

Отвечает за подсчёт частоты появления слов, ранжирование с устойчивым
порядком при равных частотах, расчёт долей и поиск частых биграмм.
"""

import logging
from typing import Dict, List, Optional, Tuple
from ..interfaces.text_processor import (
    FrequencyAnalyzerInterface,
    FrequencyOptions,
    WordFrequency,
    Bigram,
)

logger = logging.getLogger(__name__)


def _count_with_first_seen(words: List[str]) -> Tuple[Dict[str, int], Dict[str, int]]:
    """Считает вхождения и запоминает позицию первого появления каждого слова."""
    counts: Dict[str, int] = {}
    first_seen: Dict[str, int] = {}
    for index, word in enumerate(words):
        if word in counts:
            counts[word] += 1
        else:
            counts[word] = 1
            first_seen[word] = index
    return counts, first_seen


def _ranked(words: List[str]) -> List[Tuple[str, int]]:
    """Сортирует слова по убыванию частоты, при равенстве по первому появлению."""
    counts, first_seen = _count_with_first_seen(words)
    return sorted(counts.items(), key=lambda item: (-item[1], first_seen[item[0]]))


class FrequencyAnalyzer(FrequencyAnalyzerInterface):
    """Анализатор частотности слов. Не хранит состояния между вызовами."""

    def rank(self, words: List[str], max_results: int = 100,
             include_percentages: bool = False) -> List[WordFrequency]:
        """
        Строит отсортированную частотную таблицу.

        Args:
            words: Поток токенов (уже отфильтрованный)
            max_results: Максимум записей (0 или меньше = без ограничения)
            include_percentages: Добавлять ли долю слова от числа токенов

        Returns:
            Список WordFrequency, не возрастающий по value
        """
        if not words:
            return []

        ranked = _ranked(words)
        if max_results and max_results > 0:
            ranked = ranked[:max_results]

        total = len(words)
        result = []
        for text, value in ranked:
            percentage = None
            if include_percentages:
                percentage = 100.0 * value / total if total else 0.0
            result.append(WordFrequency(text=text, value=value, percentage=percentage))
        return result

    def build_frequencies(self, tokens: List[str],
                          options: Optional[FrequencyOptions] = None) -> List[WordFrequency]:
        """
        Применяет к токенам фильтр длины и регистр, затем ранжирует.

        Доля считается от числа токенов после фильтрации по длине.
        """
        options = options or FrequencyOptions()
        filtered = [t for t in tokens if len(t) >= options.min_word_length]
        if not options.case_sensitive:
            filtered = [t.lower() for t in filtered]

        logger.debug(
            f"Частотная таблица: токенов {len(tokens)}, после фильтра длины {len(filtered)}"
        )
        return self.rank(
            filtered,
            max_results=options.max_results,
            include_percentages=options.include_percentages,
        )

    def get_bigrams(self, words: List[str], n: int = 10) -> List[Bigram]:
        """
        Возвращает n самых частых пар соседних слов.

        Args:
            words: Поток токенов без стоп-слов
            n: Количество биграмм для возврата

        Returns:
            Список Bigram, не возрастающий по value
        """
        if not isinstance(words, (list, tuple)):
            if words is not None:
                logger.warning(f"Биграммы: ожидался список токенов, получено {type(words).__name__}")
            return []
        if len(words) < 2:
            return []

        pairs = [f"{first} {second}" for first, second in zip(words, words[1:])]
        ranked = _ranked(pairs)
        if n and n > 0:
            ranked = ranked[:n]
        return [Bigram(text=text, value=value) for text, value in ranked]
