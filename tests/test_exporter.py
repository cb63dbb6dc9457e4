"""
Тесты для ResultExporter.
"""

import csv
import json

import pandas as pd
import pytest

from text_cloud_analyser import analyze, TextAnalysisResult
from text_cloud_analyser.components.exporter import ResultExporter, format_summary


@pytest.fixture
def review_result(sample_texts):
    return analyze(sample_texts["review"])


def test_export_to_json(review_result, temp_directory):
    exporter = ResultExporter(output_dir=str(temp_directory))
    path = exporter.export_to_json(review_result, temp_directory / "analysis")

    assert path == temp_directory / "analysis.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["analysis"]["total_words"] == 14
    assert data["metadata"]["sentiment_label"] == "Positive"
    assert data["analysis"]["top_bigrams"][0] == {"text": "love great", "value": 1}


def test_export_to_csv(review_result, temp_directory):
    exporter = ResultExporter(output_dir=str(temp_directory))
    path = exporter.export_to_csv(review_result, temp_directory / "frequencies.csv")

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["word", "count", "percentage"]
    assert rows[1] == ["love", "1", ""]
    assert len(rows) == 1 + len(review_result.word_frequencies)


def test_export_to_excel(review_result, temp_directory):
    exporter = ResultExporter(output_dir=str(temp_directory), main_sheet_name="Words")
    path = exporter.export_to_excel(review_result, temp_directory / "analysis")

    assert path.suffix == ".xlsx"
    sheets = pd.read_excel(path, sheet_name=None)
    assert set(sheets) == {"Words", "Bigrams", "Statistics"}
    words = sheets["Words"]
    assert list(words.columns) == ["Word", "Count", "Percentage"]
    assert words["Percentage"].sum() == pytest.approx(100.0, abs=0.1)
    stats = dict(zip(sheets["Statistics"]["Metric"], sheets["Statistics"]["Value"]))
    assert int(stats["Total words"]) == 14


def test_export_all_formats(review_result, temp_directory):
    exporter = ResultExporter(output_dir=str(temp_directory / "results"))
    exported = exporter.export_all_formats(review_result, "review")

    assert set(exported) == {"excel", "csv", "json", "report"}
    for path in exported.values():
        assert path.exists()
        assert path.stat().st_size > 0
        assert path.name.startswith("review_")


def test_empty_result_skips_tabular_exports(temp_directory):
    exporter = ResultExporter(output_dir=str(temp_directory))
    empty = TextAnalysisResult()

    assert exporter.export_to_excel(empty, temp_directory / "empty.xlsx") is None
    assert exporter.export_to_csv(empty, temp_directory / "empty.csv") is None
    assert not (temp_directory / "empty.xlsx").exists()
    assert exporter.export_to_json(empty, temp_directory / "empty.json") is not None


def test_format_summary(review_result):
    summary = format_summary(review_result, top_n=3)
    assert "Total words:          14" in summary
    assert "Positive" in summary
    assert "TOP WORDS:" in summary
    assert " 1. love" in summary
    assert " 4. quality" not in summary
    assert "TOP BIGRAMS:" in summary


def test_format_summary_empty():
    summary = format_summary(TextAnalysisResult())
    assert "TOP WORDS:" not in summary
    assert "Kindergarten" in summary
