"""
Модуль для подготовки исходного текста

Содержит функции для:
- Удаления HTML тегов
- Нормализации пробельных символов
- Чтения текстовых и HTML файлов
"""

import re
import logging
from pathlib import Path
from typing import Union
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

HTML_SUFFIXES = {'.html', '.htm'}


class SourceTextProcessor:
    """Класс для очистки исходного текста перед анализом"""

    def remove_html_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            for hidden in soup(["script", "style"]):
                hidden.decompose()
            # Слова соседних тегов не должны слипаться
            return soup.get_text(separator=" ")
        return text

    def normalize_whitespace(self, text: str) -> str:
        """Схлопывает серии пробелов внутри строк, сохраняя переносы строк"""
        lines = [re.sub(r"[ \t\xa0]+", " ", line).strip() for line in text.splitlines()]
        return "\n".join(line for line in lines if line)

    def clean_text(self, text: str, strip_html: bool = True) -> str:
        """
        Полная очистка текста

        Args:
            text: Исходный текст
            strip_html: Удалять ли HTML разметку

        Returns:
            Очищенный текст
        """
        if not text:
            return ""
        cleaned = self.remove_html_tags(text) if strip_html else text
        return self.normalize_whitespace(cleaned)

    def read_text_file(self, path: Union[str, Path]) -> str:
        """
        Читает файл в UTF-8; HTML файлы очищаются от разметки

        Raises:
            OSError: если файл не удалось прочитать
        """
        path = Path(path)
        text = path.read_text(encoding='utf-8', errors='replace')
        logger.info(f"Прочитан файл {path} ({len(text)} символов)")
        if path.suffix.lower() in HTML_SUFFIXES:
            return self.clean_text(text)
        return text
