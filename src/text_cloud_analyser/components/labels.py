"""
Текстовые метки для панели статистики: тональность, читаемость, класс.
"""

import math


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def sentiment_label(score: float) -> str:
    """Трёхуровневая метка тональности."""
    if score > 0.2:
        return 'Positive'
    if score < -0.2:
        return 'Negative'
    return 'Neutral'


def sentiment_gauge_label(score: float) -> str:
    """Пятиуровневая метка тональности для шкалы."""
    if score > 0.5:
        return 'Very Positive'
    if score > 0.2:
        return 'Positive'
    if score > -0.2:
        return 'Neutral'
    if score > -0.5:
        return 'Negative'
    return 'Very Negative'


def sentiment_gauge_position(score: float) -> float:
    """Переводит тональность [-1, 1] в позицию шкалы [0, 100]."""
    return (score + 1) / 2 * 100


def readability_label(reading_ease: float) -> str:
    """Метка по индексу Flesch Reading Ease."""
    if reading_ease > 80:
        return 'Very Easy'
    if reading_ease > 60:
        return 'Easy'
    if reading_ease > 40:
        return 'Average'
    if reading_ease > 20:
        return 'Difficult'
    return 'Very Difficult'


def grade_level_label(grade_level: float) -> str:
    """Метка по индексу Flesch-Kincaid Grade Level."""
    if grade_level <= 1:
        return 'Kindergarten'
    if grade_level <= 12:
        return f"Grade {_round_half_up(grade_level)}"
    if grade_level <= 16:
        return f"College Year {_round_half_up(grade_level - 12)}"
    return 'Graduate Level'


def word_share(value: int, total: int) -> float:
    """Доля слова в процентах от суммы показанных частот (для подсказки)."""
    if total <= 0:
        return 0.0
    return value / total * 100
