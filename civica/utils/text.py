"""
Keyword heuristics for civic news articles.

Responsibility: Category, bill-reference and topic-tag extraction
"""

import re
from typing import List, Optional

from ..models.news import NewsCategory

BILL_REFERENCE = re.compile(r"\b(H\.?R\.?\s*\d+|S\.?\s*\d+)\b", re.IGNORECASE)

TOPIC_TAGS = (
    "healthcare", "education", "environment", "economy", "immigration",
    "defense", "tax", "infrastructure", "climate", "energy", "housing",
)


def _joined(*parts: Optional[str]) -> str:
    return " ".join(part for part in parts if part)


def categorize_article(title: Optional[str], description: Optional[str]) -> NewsCategory:
    """
    Pick a category from keywords in the headline and description.

    Checked in order: breaking, explainer, local; otherwise national.
    """
    text = _joined(title, description).lower()
    if "breaking" in text or "urgent" in text:
        return NewsCategory.BREAKING
    if "explain" in text or "what is" in text or "how does" in text:
        return NewsCategory.EXPLAINER
    if "local" in text or "city" in text or "county" in text:
        return NewsCategory.LOCAL
    return NewsCategory.NATIONAL


def extract_bill_references(*texts: Optional[str]) -> List[str]:
    """
    Bill numbers mentioned in the text, de-duplicated in order of appearance.

    Example: "H.R.  3684 and S. 45" -> ["H.R. 3684", "S. 45"]
    """
    found: List[str] = []
    for match in BILL_REFERENCE.findall(_joined(*texts)):
        reference = re.sub(r"\s+", " ", match).strip()
        if reference not in found:
            found.append(reference)
    return found


def extract_tags(*texts: Optional[str]) -> List[str]:
    text = _joined(*texts).lower()
    return [tag for tag in TOPIC_TAGS if tag in text]
