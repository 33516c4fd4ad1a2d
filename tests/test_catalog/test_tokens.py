"""Tests for cache-busting token generation."""

from __future__ import annotations

from booklist.catalog.tokens import CacheBuster


class TestCacheBuster:
    def test_thirteen_digits(self):
        token = CacheBuster().next_token()
        assert token.isdigit()
        assert len(token) == 13

    def test_same_millisecond_tokens_differ(self):
        buster = CacheBuster(clock=lambda: 1700000000.123)
        first = buster.next_token()
        second = buster.next_token()
        assert first != second
        assert int(second) == int(first) + 1

    def test_increment_added_to_timestamp(self):
        buster = CacheBuster(clock=lambda: 1700000000.0)
        assert buster.next_token() == str(1700000000000 + 2)

    def test_instances_do_not_share_counter(self):
        a = CacheBuster(clock=lambda: 1700000000.0)
        b = CacheBuster(clock=lambda: 1700000000.0)
        a.next_token()
        a.next_token()
        assert b.next_token() == str(1700000000000 + 2)
