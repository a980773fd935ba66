from civica.models.news import NewsCategory
from civica.utils.text import categorize_article, extract_bill_references, extract_tags


def test_categorize_article_checks_breaking_first() -> None:
    assert categorize_article("Breaking: city council explains vote", None) == NewsCategory.BREAKING
    assert categorize_article("What is a filibuster?", None) == NewsCategory.EXPLAINER
    assert categorize_article("County approves budget", "") == NewsCategory.LOCAL
    assert categorize_article("Senate debates defense bill", None) == NewsCategory.NATIONAL


def test_extract_bill_references_normalizes_spacing() -> None:
    refs = extract_bill_references("Debate over H.R.  3684 continues", "S. 45 and H.R. 3684 advance")

    assert refs == ["H.R. 3684", "S. 45"]


def test_extract_tags_matches_known_topics() -> None:
    assert extract_tags("Housing and energy costs", "Tax credits proposed") == ["tax", "energy", "housing"]
