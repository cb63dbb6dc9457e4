"""Наборы английских текстов для тестирования.

Содержит простые и сложные примеры, отзыв с выраженной тональностью
и HTML-текст для проверки очистки.
"""

SAMPLE_SIMPLE_TEXT = """
See the cat run.
""".strip()


SAMPLE_REVIEW_TEXT = """
I love this great product. The quality is good, but the price is bad.
""".strip()


SAMPLE_COMPLEX_TEXT = """
Comprehensive international negotiations necessitated extraordinary diplomatic considerations.
""".strip()


SAMPLE_HTML_TEXT = """
<div>
  <p>New York is a <strong>great</strong> city.</p>
  <p>New York never sleeps.</p>
  <script>var ignored = "tracking code";</script>
</div>
""".strip()
