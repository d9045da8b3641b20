"""
Local FAQ table and matching.

- database: canned answers per category, category keywords
- matcher: find_similar_faq, detect_category, calculate_similarity
"""

from legal_assistant.faq.database import CATEGORY_KEYWORDS, FAQ_DATABASE, all_faqs, faqs_for_category
from legal_assistant.faq.matcher import calculate_similarity, detect_category, find_similar_faq

__all__ = [
    "FAQ_DATABASE",
    "CATEGORY_KEYWORDS",
    "all_faqs",
    "faqs_for_category",
    "find_similar_faq",
    "detect_category",
    "calculate_similarity",
]
