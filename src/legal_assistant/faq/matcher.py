"""
FAQ matching and keyword heuristics.

Scoring used by find_similar_faq:
    - +2 for every FAQ keyword contained in the question
    - +1 for every question word (longer than 3 characters) that also
      appears in the FAQ's own question
The best-scoring entry wins if it reaches ``min_score``.
"""

import re
from typing import Optional

import structlog

from legal_assistant.faq.database import CATEGORY_KEYWORDS, faqs_for_category
from legal_assistant.models.enums import LegalCategory
from legal_assistant.models.question_models import FAQEntry

logger = structlog.get_logger(__name__)

KEYWORD_SCORE = 2
WORD_SCORE = 1
MIN_WORD_LENGTH = 4
DEFAULT_MIN_SCORE = 2

_WORD_RE = re.compile(r"\w+", re.UNICODE)


def _words(text: str) -> list[str]:
    return _WORD_RE.findall(text.lower())


def score_faq(question: str, faq: FAQEntry) -> int:
    """Relevance score of one FAQ entry for a question."""
    question_lower = question.lower()
    score = sum(KEYWORD_SCORE for keyword in faq.keywords if keyword in question_lower)

    faq_words = set(_words(faq.question))
    score += sum(
        WORD_SCORE
        for word in _words(question)
        if len(word) >= MIN_WORD_LENGTH and word in faq_words
    )
    return score


def find_similar_faq(
    question: str,
    category: LegalCategory,
    min_score: int = DEFAULT_MIN_SCORE,
) -> Optional[FAQEntry]:
    """
    Find the best FAQ entry for a question within one category.

    Args:
        question: Visitor question
        category: Category to search in
        min_score: Minimum score for a match

    Returns:
        The best-scoring FAQEntry, or None when nothing reaches min_score
    """
    best_match: Optional[FAQEntry] = None
    best_score = 0

    for faq in faqs_for_category(category):
        score = score_faq(question, faq)
        # Ties keep the earlier entry
        if score > best_score:
            best_score = score
            best_match = faq

    if best_match is None or best_score < min_score:
        return None

    logger.debug("FAQ match", faq_id=best_match.id, score=best_score, category=category.value)
    return best_match


def detect_category(question: str) -> Optional[LegalCategory]:
    """First category whose keywords appear in the question, or None."""
    question_lower = question.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in question_lower for keyword in keywords):
            return category
    return None


def _edit_distance(s1: str, s2: str) -> int:
    # Levenshtein distance, single row
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current
    return previous[-1]


def calculate_similarity(first: str, second: str) -> float:
    """
    Case-insensitive similarity of two strings as a percentage (0-100).

    Two empty strings are 100% similar.
    """
    s1, s2 = first.lower(), second.lower()
    longer, shorter = (s1, s2) if len(s1) > len(s2) else (s2, s1)
    if not longer:
        return 100.0
    distance = _edit_distance(longer, shorter)
    return (len(longer) - distance) / len(longer) * 100
