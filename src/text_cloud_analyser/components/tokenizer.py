"""
Компонент для токенизации английского текста.

Отвечает за разбивку текста на нормализованные токены, фильтрацию
стоп-слов и разбиение текста на предложения.
"""

import re
import logging
from typing import FrozenSet, List, Optional
from ..interfaces.text_processor import TokenProcessorInterface, SentenceSplitterInterface
from .lexicons import STOP_WORDS

logger = logging.getLogger(__name__)

# Знаки препинания, заменяемые пробелом: . , / # ! $ % ^ & * ; : { } = - _ ` ~ ( )
PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")

# Однобуквенные слова, которые не отбрасываются
SINGLE_LETTER_WORDS = frozenset(['a', 'i'])

# Конец предложения: серия . ! ? перед пробельным символом или концом строки
SENTENCE_BOUNDARY_PATTERN = re.compile(r"[.!?]+(?=\s|$)")


def _split_words(text: str, lowercase: bool = True) -> List[str]:
    """Убирает пунктуацию и разбивает текст по пробельным символам."""
    if lowercase:
        text = text.lower()
    return PUNCTUATION_PATTERN.sub(' ', text).split()


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста."""

    def __init__(self, stop_words: Optional[FrozenSet[str]] = None):
        """
        Инициализирует процессор токенизации.

        Args:
            stop_words: Набор стоп-слов (по умолчанию английский STOP_WORDS)
        """
        self.stop_words = STOP_WORDS if stop_words is None else stop_words

    def tokenize(self, text: str, remove_stop_words: bool = True, lowercase: bool = True) -> List[str]:
        """
        Разбивает текст на токены с сохранением порядка чтения.

        Args:
            text: Исходный текст
            remove_stop_words: Удалять ли стоп-слова
            lowercase: Приводить ли токены к нижнему регистру

        Returns:
            Список токенов
        """
        if not isinstance(text, str):
            if text is not None:
                logger.warning(f"Токенизация: ожидалась строка, получено {type(text).__name__}")
            return []
        if not text.strip():
            return []

        return [
            token for token in _split_words(text, lowercase=lowercase)
            if self.is_valid_token(token, remove_stop_words)
        ]

    def is_valid_token(self, token: str, remove_stop_words: bool = True) -> bool:
        """
        Проверяет валидность токена.

        Args:
            token: Токен для проверки
            remove_stop_words: Считать ли стоп-слова невалидными

        Returns:
            True если токен валиден
        """
        if not token:
            return False

        lowered = token.lower()
        if len(lowered) == 1 and lowered not in SINGLE_LETTER_WORDS:
            return False

        if remove_stop_words and lowered in self.stop_words:
            return False

        return True

    def normalize_words(self, text: str) -> List[str]:
        """
        Мягкая нормализация для подсчёта уникальных слов.

        Только нижний регистр, удаление пунктуации и пустых строк:
        стоп-слова и короткие слова сохраняются.
        """
        if not isinstance(text, str):
            return []
        return _split_words(text)


class SentenceSplitter(SentenceSplitterInterface):
    """Разбивает текст на предложения по завершающим знакам . ! ?"""

    def split(self, text: str) -> List[str]:
        if not isinstance(text, str) or not text.strip():
            return []
        sentences = [part.strip() for part in SENTENCE_BOUNDARY_PATTERN.split(text)]
        return [s for s in sentences if s]
