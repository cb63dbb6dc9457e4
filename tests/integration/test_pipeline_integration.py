import pandas as pd
import pytest

from text_cloud_analyser.text_analyzer import TextAnalyzer
from text_cloud_analyser.text_processor import SourceTextProcessor
from text_cloud_analyser.components.cloud import CloudWordScaler
from text_cloud_analyser.components.exporter import ResultExporter


@pytest.mark.integration
def test_full_pipeline_html_to_excel(sample_texts, temp_directory):
    """Проверяет пайплайн: HTML → текст → анализ → облако → Excel."""
    html_text = sample_texts["html"]

    # 1) Очистка HTML → текст
    clean_text = SourceTextProcessor().clean_text(html_text)
    assert "<" not in clean_text and ">" not in clean_text
    assert "tracking" not in clean_text

    # 2) Анализ
    result = TextAnalyzer().analyze_text(clean_text)
    assert result.total_words == 10
    assert result.top_bigrams[0].text == "new york"
    assert result.top_bigrams[0].value == 2
    assert result.sentiment_score > 0

    # 3) Облако слов
    cloud = CloudWordScaler(max_words=3).scale(result.word_frequencies)
    assert [w.text for w in cloud] == ["new", "york", "great"]
    assert cloud[0].font_size == 200

    # 4) Экспорт в Excel
    output_file = temp_directory / "analysis.xlsx"
    ResultExporter(output_dir=str(temp_directory)).export_to_excel(result, output_file)

    assert output_file.exists()
    sheets = pd.read_excel(output_file, sheet_name=None)
    assert sheets["Bigrams"]["Bigram"].iloc[0] == "new york"
