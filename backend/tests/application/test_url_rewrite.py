"""
Media URL Rewrite Unit Tests

Tests:
    - Exact query appended to a URL with no query string
    - Existing query strings extended with '&'
    - Trailing '?' / '&' reused, fragments preserved
    - Request modifier closure behaves as the pure function

Usage:
    pytest backend/tests/application/test_url_rewrite.py -v
"""

import pytest

from camstream.application.url_rewrite import (
    append_federated_token,
    federated_request_modifier,
)


class TestAppendFederatedToken:
    """Test the pure str -> str rewrite"""

    def test_url_without_query_gets_exact_suffix(self):
        url = "https://media.test/live/file.mpd"

        result = append_federated_token(url, "abc123")

        assert result == url + "?x-auth-scheme=federated-token&x-auth-ft=abc123"

    def test_url_with_query_is_extended(self):
        url = "https://media.test/live/seg-1.m4s?start=10"

        result = append_federated_token(url, "abc123")

        assert result == (
            "https://media.test/live/seg-1.m4s?start=10"
            "&x-auth-scheme=federated-token&x-auth-ft=abc123"
        )

    def test_trailing_question_mark_is_reused(self):
        result = append_federated_token("https://media.test/a.mpd?", "t")

        assert result == "https://media.test/a.mpd?x-auth-scheme=federated-token&x-auth-ft=t"

    def test_trailing_ampersand_is_reused(self):
        result = append_federated_token("https://media.test/a.mpd?x=1&", "t")

        assert result == "https://media.test/a.mpd?x=1&x-auth-scheme=federated-token&x-auth-ft=t"

    def test_fragment_stays_last(self):
        result = append_federated_token("https://media.test/a.mpd#t=5", "t")

        assert result == "https://media.test/a.mpd?x-auth-scheme=federated-token&x-auth-ft=t#t=5"

    def test_question_mark_inside_fragment_does_not_count_as_query(self):
        result = append_federated_token("https://media.test/a.mpd#x?y", "t")

        assert result.startswith("https://media.test/a.mpd?x-auth-scheme=")
        assert result.endswith("#x?y")

    def test_token_with_reserved_characters_is_encoded(self):
        result = append_federated_token("https://media.test/a.mpd", "a+b/c=")

        assert result.endswith("x-auth-ft=a%2Bb%2Fc%3D")

    def test_input_url_unchanged(self):
        url = "https://media.test/a.mpd"
        append_federated_token(url, "t")
        assert url == "https://media.test/a.mpd"


class TestFederatedRequestModifier:
    """Test the hook handed to the player"""

    def test_modifier_matches_pure_function(self):
        modifier = federated_request_modifier("abc123")
        url = "https://media.test/live/file.mpd"

        assert modifier(url) == append_federated_token(url, "abc123")

    def test_modifier_applies_to_every_call(self):
        modifier = federated_request_modifier("tok")

        urls = [modifier(f"https://media.test/seg-{i}.m4s") for i in range(3)]

        assert all(u.endswith("?x-auth-scheme=federated-token&x-auth-ft=tok") for u in urls)

    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            federated_request_modifier("")
