"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в различные форматы:
Excel, CSV частотной таблицы, JSON и текстовый отчёт.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union
import pandas as pd
from ..interfaces.text_processor import ResultExporterInterface, TextAnalysisResult
from .labels import sentiment_label, readability_label, grade_level_label

logger = logging.getLogger(__name__)


class ResultExporter(ResultExporterInterface):
    """Экспортёр результатов анализа."""

    def __init__(self, output_dir: str = "data/results", main_sheet_name: str = "Word Frequencies",
                 decimal_places: int = 2):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
            main_sheet_name: Название листа с частотной таблицей
            decimal_places: Знаков после запятой для долей и метрик
        """
        self.output_dir = Path(output_dir)
        self.main_sheet_name = main_sheet_name
        self.decimal_places = decimal_places

    @classmethod
    def from_config(cls, cfg=None, output_dir: Optional[str] = None) -> "ResultExporter":
        if cfg is None:
            from ..config import config as cfg
        return cls(
            output_dir=output_dir or cfg.get_results_folder(),
            main_sheet_name=cfg.get_main_sheet_name(),
            decimal_places=cfg.get_frequency_decimal_places(),
        )

    @staticmethod
    def _with_suffix(filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def _frequencies_frame(self, result: TextAnalysisResult) -> pd.DataFrame:
        df = pd.DataFrame([w.to_dict() for w in result.word_frequencies], columns=['text', 'value', 'percentage'])
        total = sum(w.value for w in result.word_frequencies)
        if df['percentage'].isna().all() and total:
            # Доля от суммы показанных частот, как в подсказке облака
            df['percentage'] = df['value'] * 100.0 / total
        df['percentage'] = df['percentage'].astype(float).round(self.decimal_places)
        return df.rename(columns={'text': 'Word', 'value': 'Count', 'percentage': 'Percentage'})

    def _statistics_frame(self, result: TextAnalysisResult) -> pd.DataFrame:
        r = result.readability
        rows = [
            ('Total words', result.total_words),
            ('Unique words', result.unique_words),
            ('Average word length', round(result.average_word_length, self.decimal_places)),
            ('Sentiment score', round(result.sentiment_score, self.decimal_places)),
            ('Sentiment', sentiment_label(result.sentiment_score)),
            ('Flesch Reading Ease', round(r.flesch_reading_ease, self.decimal_places)),
            ('Readability', readability_label(r.flesch_reading_ease)),
            ('Flesch-Kincaid Grade Level', round(r.flesch_kincaid_grade_level, self.decimal_places)),
            ('Grade level', grade_level_label(r.flesch_kincaid_grade_level)),
            ('Average sentence length', round(r.average_sentence_length, self.decimal_places)),
            ('Total syllables', r.total_syllables),
            ('Average syllables per word', round(r.average_syllables_per_word, self.decimal_places)),
            ('Analysis date', datetime.now().strftime('%Y-%m-%d %H:%M:%S')),
        ]
        return pd.DataFrame(rows, columns=['Metric', 'Value'])

    def export_to_excel(self, result: TextAnalysisResult, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует результат в Excel формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к файлу или None, если экспорт не выполнен
        """
        if not result or not result.word_frequencies:
            logger.info("Нет данных для экспорта в Excel")
            return None

        try:
            filepath = self._with_suffix(filepath, '.xlsx')
            bigrams_df = pd.DataFrame([b.to_dict() for b in result.top_bigrams], columns=['text', 'value'])
            bigrams_df = bigrams_df.rename(columns={'text': 'Bigram', 'value': 'Count'})

            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                self._frequencies_frame(result).to_excel(writer, sheet_name=self.main_sheet_name, index=False)
                bigrams_df.to_excel(writer, sheet_name='Bigrams', index=False)
                self._statistics_frame(result).to_excel(writer, sheet_name='Statistics', index=False)

            logger.info(f"Результат экспортирован в Excel: {filepath}")
            return filepath
        except (OSError, ValueError) as e:
            logger.error(f"Ошибка экспорта в Excel: {e}")
            return None

    def export_to_csv(self, result: TextAnalysisResult, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует частотную таблицу в CSV формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла
        """
        if not result or not result.word_frequencies:
            logger.info("Нет данных для экспорта в CSV")
            return None

        try:
            filepath = self._with_suffix(filepath, '.csv')
            with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
                writer = csv.writer(csvfile)
                writer.writerow(['word', 'count', 'percentage'])
                for word in result.word_frequencies:
                    percentage = '' if word.percentage is None else round(word.percentage, self.decimal_places)
                    writer.writerow([word.text, word.value, percentage])

            logger.info(f"Частотная таблица экспортирована в CSV: {filepath} ({len(result.word_frequencies)} слов)")
            return filepath
        except OSError as e:
            logger.error(f"Ошибка экспорта в CSV: {e}")
            return None

    def export_to_json(self, result: TextAnalysisResult, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует результат в JSON формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла
        """
        if not result:
            logger.info("Нет данных для экспорта в JSON")
            return None

        try:
            filepath = self._with_suffix(filepath, '.json')
            json_data = {
                'metadata': {
                    'timestamp': datetime.now().isoformat(),
                    'sentiment_label': sentiment_label(result.sentiment_score),
                    'readability_label': readability_label(result.readability.flesch_reading_ease),
                    'grade_level_label': grade_level_label(result.readability.flesch_kincaid_grade_level),
                },
                'analysis': result.to_dict(),
            }
            with open(filepath, 'w', encoding='utf-8') as jsonfile:
                json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)

            logger.info(f"Результат экспортирован в JSON: {filepath}")
            return filepath
        except OSError as e:
            logger.error(f"Ошибка экспорта в JSON: {e}")
            return None

    def export_summary_report(self, result: TextAnalysisResult, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует краткий текстовый отчёт по результатам.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла
        """
        if not result:
            logger.info("Нет данных для экспорта отчёта")
            return None

        try:
            filepath = self._with_suffix(filepath, '.txt')
            with open(filepath, 'w', encoding='utf-8') as report_file:
                report_file.write(format_summary(result))
            logger.info(f"Краткий отчёт сохранён: {filepath}")
            return filepath
        except OSError as e:
            logger.error(f"Ошибка экспорта отчёта: {e}")
            return None

    def export_all_formats(self, result: TextAnalysisResult, base_filename: str) -> Dict[str, Path]:
        """
        Экспортирует результат во все доступные форматы.

        Args:
            result: Результат анализа
            base_filename: Базовое имя файла без расширения

        Returns:
            Словарь с путями к созданным файлам
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base = self.output_dir / f"{base_filename}_{timestamp}"

        exported = {
            'excel': self.export_to_excel(result, base.with_suffix('.xlsx')),
            'csv': self.export_to_csv(result, base.parent / f"{base.name}_frequencies.csv"),
            'json': self.export_to_json(result, base.with_suffix('.json')),
            'report': self.export_summary_report(result, base.parent / f"{base.name}_report.txt"),
        }
        exported_files = {fmt: path for fmt, path in exported.items() if path is not None}
        logger.info(f"Экспортировано форматов: {len(exported_files)} в папку {self.output_dir}")
        return exported_files


def format_summary(result: TextAnalysisResult, top_n: int = 5) -> str:
    """Формирует текстовую панель статистики."""
    r = result.readability
    lines = [
        "TEXT ANALYSIS REPORT",
        "=" * 50,
        "",
        f"Total words:          {result.total_words}",
        f"Unique words:         {result.unique_words}",
        f"Avg. word length:     {result.average_word_length:.1f} chars",
        f"Sentiment:            {sentiment_label(result.sentiment_score)} ({result.sentiment_score:.2f})",
        f"Readability:          {readability_label(r.flesch_reading_ease)} ({r.flesch_reading_ease:.1f})",
        f"Grade level:          {grade_level_label(r.flesch_kincaid_grade_level)} "
        f"({r.flesch_kincaid_grade_level:.1f})",
        f"Avg. sentence length: {r.average_sentence_length:.1f} words",
        f"Syllables per word:   {r.average_syllables_per_word:.2f}",
        "",
    ]

    if result.word_frequencies:
        lines.append("TOP WORDS:")
        lines.append("-" * 40)
        for i, word in enumerate(result.word_frequencies[:top_n], 1):
            lines.append(f"{i:2d}. {word.text:<20} {word.value}")
        lines.append("")

    if result.top_bigrams:
        lines.append("TOP BIGRAMS:")
        lines.append("-" * 40)
        for i, bigram in enumerate(result.top_bigrams[:top_n], 1):
            lines.append(f"{i:2d}. {bigram.text:<20} {bigram.value}")
        lines.append("")

    return "\n".join(lines)
