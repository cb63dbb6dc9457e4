import sys
from pathlib import Path

import pytest

# Пакет лежит в src/, добавляем путь для запуска без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from text_cloud_analyser.text_analyzer import TextAnalyzer  # noqa: E402


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы английских текстов для тестирования."""
    from fixtures.sample_texts import (
        SAMPLE_SIMPLE_TEXT,
        SAMPLE_REVIEW_TEXT,
        SAMPLE_COMPLEX_TEXT,
        SAMPLE_HTML_TEXT,
    )

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "review": SAMPLE_REVIEW_TEXT,
        "complex": SAMPLE_COMPLEX_TEXT,
        "html": SAMPLE_HTML_TEXT,
    }


@pytest.fixture
def analyzer() -> TextAnalyzer:
    """Анализатор с параметрами по умолчанию (без config.yaml)."""
    return TextAnalyzer()


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
