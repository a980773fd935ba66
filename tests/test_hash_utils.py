from civica.utils.dedupe import dedupe_by_key
from civica.utils.hash_utils import calculate_hash, canonical_url, url_id


def test_calculate_hash_ignores_key_order() -> None:
    assert calculate_hash({"a": 1, "b": 2}) == calculate_hash({"b": 2, "a": 1})


def test_calculate_hash_detects_content_changes() -> None:
    assert calculate_hash({"title": "Original"}) != calculate_hash({"title": "Updated"})


def test_canonical_url_drops_fragment_and_trailing_slash() -> None:
    assert canonical_url("HTTPS://Example.COM/story/#comments") == "https://example.com/story"


def test_url_id_is_stable_across_url_spellings() -> None:
    first = url_id("https://example.com/story")
    second = url_id("https://EXAMPLE.com/story/")

    assert first == second
    assert first.startswith("news-")
    assert url_id("https://example.com/other") != first


def test_dedupe_by_key_keeps_first_and_counts_duplicates() -> None:
    records = [("a", 1), ("b", 2), ("a", 3), (None, 4)]

    unique, duplicates = dedupe_by_key(records, lambda record: record[0])

    assert duplicates == 1
    assert unique == [("a", 1), ("b", 2)]
