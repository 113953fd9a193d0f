"""
Tests for Codewars challenge parsing.
"""

from kata_heatmap.challenge_parser import parse_completed_challenges
from kata_heatmap.events import CompletionEvent


def test_parses_challenge_fields():
    challenges = [
        {
            "id": "5277c8a221e209d3f6000b56",
            "name": "Valid Braces",
            "slug": "valid-braces",
            "completedAt": "2024-03-05T18:12:01.000Z",
            "completedLanguages": ["python", "javascript"],
        }
    ]

    result = parse_completed_challenges(challenges)

    assert result == [
        CompletionEvent(
            id="5277c8a221e209d3f6000b56",
            name="Valid Braces",
            slug="valid-braces",
            completed_at="2024-03-05T18:12:01.000Z",
            languages=("python", "javascript"),
        )
    ]


def test_languages_deduplicated_in_order():
    challenges = [
        {
            "id": "a",
            "completedAt": "2024-01-01T00:00:00Z",
            "completedLanguages": ["ruby", "python", "ruby"],
        }
    ]

    assert parse_completed_challenges(challenges)[0].languages == ("ruby", "python")


def test_missing_optional_fields_default_to_empty():
    result = parse_completed_challenges([{"id": "a", "completedAt": "2024-01-01T00:00:00Z"}])

    assert result[0].name == ""
    assert result[0].slug == ""
    assert result[0].languages == ()


def test_entries_without_completed_at_are_dropped():
    challenges = [
        {"id": "a", "name": "No date"},
        {"id": "b", "completedAt": ""},
        {"id": "c", "completedAt": "2024-01-01T00:00:00Z"},
    ]

    result = parse_completed_challenges(challenges)

    assert [e.id for e in result] == ["c"]


def test_non_mapping_entries_are_dropped():
    result = parse_completed_challenges(["oops", None, {"id": "a", "completedAt": "x"}])

    assert len(result) == 1


def test_invalid_timestamp_kept_verbatim():
    """Validation is left to the aggregation functions, which count skips."""
    result = parse_completed_challenges([{"id": "a", "completedAt": "not-a-date"}])

    assert result[0].completed_at == "not-a-date"


def test_empty_input():
    assert parse_completed_challenges([]) == []
