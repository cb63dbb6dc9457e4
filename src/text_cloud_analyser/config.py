"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс TEXT_CLOUD_ANALYSER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import os
import copy
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

from .interfaces.text_processor import FrequencyOptions

logger = logging.getLogger(__name__)

ENV_PREFIX = 'TEXT_CLOUD_ANALYSER_'
ENV_PROFILE = 'TEXT_CLOUD_ANALYSER_ENV'

DEFAULT_CONFIG: Dict[str, Any] = {
    'text_analysis': {
        'min_word_length': 2,
        'max_results': 100,
        'include_percentages': False,
        'case_sensitive': False,
        'top_bigrams': 10,
    },
    'cloud': {
        'max_words': 150,
        'min_font_size': 30,
        'max_font_size': 200,
        'min_font_weight': 400,
        'max_font_weight': 700,
    },
    'files': {
        'results_folder': "data/results",
        'results_filename_prefix': "text_analysis",
    },
    'excel': {
        'frequency_decimal_places': 2,
        'main_sheet_name': "Word Frequencies",
    },
    'logging': {
        'level': "INFO",
        'format': "%(asctime)s - %(levelname)s - %(message)s",
        'log_to_file': False,
        'log_file': "logs/text_cloud_analyser.log",
        'max_log_files': 10,
    },
}


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей и родительских директориях
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"
            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}
        self._log_timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        self._load_env()
        self._load_config()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _resolve_config_path(self) -> Path:
        env = os.getenv(ENV_PROFILE, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                if not isinstance(loaded, dict):
                    raise ValueError("корневой элемент YAML должен быть словарём")
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (TEXT_CLOUD_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Служебные переменные не являются ключами конфига
            if key in (ENV_PROFILE, f'{ENV_PREFIX}DEBUG'):
                continue
            tail = key[len(ENV_PREFIX):]
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(ENV_PROFILE):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE)}")

    def _validate(self) -> None:
        """Проверяет диапазоны числовых параметров."""
        try:
            min_len = int(self.get('text_analysis.min_word_length', 2))
            if min_len < 1:
                logger.warning("min_word_length < 1 — принудительно установлено в 1")
                min_len = 1
            self._set_nested(self.config_data, 'text_analysis.min_word_length', min_len)
        except (TypeError, ValueError):
            self._set_nested(self.config_data, 'text_analysis.min_word_length', 2)

        try:
            max_words = int(self.get('cloud.max_words', 150))
            if max_words < 1:
                logger.warning("cloud.max_words < 1 — принудительно установлено в 150")
                max_words = 150
            self._set_nested(self.config_data, 'cloud.max_words', max_words)
        except (TypeError, ValueError):
            self._set_nested(self.config_data, 'cloud.max_words', 150)

    def configure_logging(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_text_cloud_analyser_configured", False) and not force:
            if (
                getattr(root, "_text_cloud_analyser_console_level", None) == console_level_name and
                getattr(root, "_text_cloud_analyser_file_level", None) == file_level_name and
                getattr(root, "_text_cloud_analyser_format", None) == desired_fmt and
                getattr(root, "_text_cloud_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_text_cloud_analyser_configured", True)
        setattr(root, "_text_cloud_analyser_console_level", console_level_name)
        setattr(root, "_text_cloud_analyser_file_level", file_level_name)
        setattr(root, "_text_cloud_analyser_format", desired_fmt)
        setattr(root, "_text_cloud_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return copy.deepcopy(DEFAULT_CONFIG)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения (с учётом .env)"""
        return os.getenv(key, default)

    def get_text_analysis_config(self) -> Dict[str, Any]:
        """Получает конфигурацию анализа текста"""
        return self.config_data.get('text_analysis', {})

    def get_cloud_config(self) -> Dict[str, Any]:
        """Получает конфигурацию облака слов"""
        return self.config_data.get('cloud', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Получает конфигурацию логирования"""
        return self.config_data.get('logging', {})

    def get_min_word_length(self) -> int:
        """Получает минимальную длину слова для частотной таблицы"""
        return int(self.get('text_analysis.min_word_length', 2))

    def get_max_results(self) -> int:
        """Получает максимальный размер частотной таблицы (0 = без ограничения)"""
        return int(self.get('text_analysis.max_results', 100))

    def is_include_percentages_enabled(self) -> bool:
        return bool(self.get('text_analysis.include_percentages', False))

    def is_case_sensitive(self) -> bool:
        return bool(self.get('text_analysis.case_sensitive', False))

    def get_top_bigrams(self) -> int:
        """Получает количество биграмм в результате"""
        return int(self.get('text_analysis.top_bigrams', 10))

    def get_frequency_options(self) -> FrequencyOptions:
        """Собирает параметры частотной таблицы из конфигурации"""
        return FrequencyOptions(
            max_results=self.get_max_results(),
            include_percentages=self.is_include_percentages_enabled(),
            case_sensitive=self.is_case_sensitive(),
            min_word_length=self.get_min_word_length(),
        )

    def get_cloud_max_words(self) -> int:
        """Получает лимит слов облака"""
        return int(self.get('cloud.max_words', 150))

    def get_font_size_range(self) -> tuple:
        return (int(self.get('cloud.min_font_size', 30)), int(self.get('cloud.max_font_size', 200)))

    def get_font_weight_range(self) -> tuple:
        return (int(self.get('cloud.min_font_weight', 400)), int(self.get('cloud.max_font_weight', 700)))

    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('files.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('files.results_filename_prefix', "text_analysis")

    def get_frequency_decimal_places(self) -> int:
        """Получает количество знаков после запятой для долей"""
        return int(self.get('excel.frequency_decimal_places', 2))

    def get_main_sheet_name(self) -> str:
        """Получает название основного листа Excel"""
        return self.get('excel.main_sheet_name', "Word Frequencies")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # Поддержка формата logging.level
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_level(self) -> str:
        return self.get_console_logging_level()

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов ({timestamp} - время создания Config, одно на экземпляр)"""
        log_file_template = self.get('logging.log_file', "logs/text_cloud_analyser.log")
        if "{timestamp}" in log_file_template:
            return log_file_template.replace("{timestamp}", self._log_timestamp)
        return log_file_template

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get('logging.log_file', "logs/text_cloud_analyser.log")).parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("text_cloud_analyser*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые последними
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
