#!/usr/bin/env python3
"""
Интерфейс командной строки для Text Cloud Analyser

Читает текст из файла или stdin, печатает панель статистики
(частые слова, биграммы, тональность, читаемость) и при необходимости
экспортирует результат в Excel/CSV/JSON.
"""

import os
import sys
import json
import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from .config import config
from .text_analyzer import TextAnalyzer
from .text_processor import SourceTextProcessor
from .components.cloud import CloudWordScaler
from .components.exporter import ResultExporter, format_summary
from .components.labels import word_share

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-cloud-analyser",
        description="Text Cloud Analyser - частоты слов, тональность и читаемость текста",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m text_cloud_analyser.cli article.txt                 # Панель статистики
  python -m text_cloud_analyser.cli page.html --top 20          # HTML очищается автоматически
  cat notes.txt | python -m text_cloud_analyser.cli --json      # Результат в JSON
  python -m text_cloud_analyser.cli essay.txt --export results   # Экспорт во все форматы
        """
    )
    parser.add_argument('input', nargs='?', default='-',
                        help='Путь к текстовому или HTML файлу ("-" или пусто = stdin)')
    parser.add_argument('--top', type=int, default=10,
                        help='Сколько слов и биграмм показать в панели')
    parser.add_argument('--max-results', type=int, default=None,
                        help='Размер частотной таблицы (0 = без ограничения)')
    parser.add_argument('--min-length', type=int, default=None,
                        help='Минимальная длина слова в частотной таблице')
    parser.add_argument('--percentages', action='store_true',
                        help='Добавить доли слов в частотную таблицу')
    parser.add_argument('--case-sensitive', action='store_true',
                        help='Различать регистр при подсчёте частот')
    parser.add_argument('--cloud', action='store_true',
                        help='Показать размеры и насыщенность шрифта для облака слов')
    parser.add_argument('--json', action='store_true',
                        help='Вывести результат в формате JSON')
    parser.add_argument('--export', metavar='DIR', default=None,
                        help='Экспортировать результат во все форматы в папку DIR')
    return parser


def read_input(source: str) -> str:
    """Читает текст из файла или stdin."""
    if source == '-':
        return sys.stdin.read()
    return SourceTextProcessor().read_text_file(source)


def _print_cloud(result, top: int) -> None:
    low, high = config.get_font_size_range()
    weight_low, weight_high = config.get_font_weight_range()
    scaler = CloudWordScaler(
        max_words=config.get_cloud_max_words(),
        min_font_size=low, max_font_size=high,
        min_font_weight=weight_low, max_font_weight=weight_high,
    )
    cloud_words = scaler.scale(result.word_frequencies)
    total = sum(w.value for w in cloud_words)

    print("\nCLOUD WORDS:")
    print("-" * 40)
    for word in cloud_words[:top]:
        print(f"{word.text:<20} size={word.font_size:<4} weight={word.font_weight:<4} "
              f"{word_share(word.value, total):.1f}%")


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    if os.environ.get('TEXT_CLOUD_ANALYSER_DEBUG') == '1':
        config.config_data.setdefault('logging', {})['level'] = 'DEBUG'
    config.configure_logging(force=True)

    args = build_parser().parse_args(argv)

    try:
        text = read_input(args.input)
    except OSError as e:
        print(f"❌ Не удалось прочитать {args.input}: {e}", file=sys.stderr)
        return 1

    options = config.get_frequency_options()
    if args.max_results is not None:
        options = replace(options, max_results=args.max_results)
    if args.min_length is not None:
        options = replace(options, min_word_length=max(1, args.min_length))
    if args.percentages:
        options = replace(options, include_percentages=True)
    if args.case_sensitive:
        options = replace(options, case_sensitive=True)

    analyzer = TextAnalyzer(frequency_options=options, top_bigrams=config.get_top_bigrams())
    result = analyzer.analyze_text(text)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_summary(result, top_n=args.top))
        if args.cloud:
            _print_cloud(result, args.top)

    if args.export:
        exporter = ResultExporter.from_config(output_dir=args.export)
        exported = exporter.export_all_formats(result, config.get_results_filename_prefix())
        if exported:
            print(f"\n📁 Экспортировано в {args.export}:", file=sys.stderr)
            for fmt, path in exported.items():
                print(f"   {fmt}: {path}", file=sys.stderr)
        else:
            print("⚠️ Нет данных для экспорта", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
