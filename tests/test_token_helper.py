import re

import pytest

from helpers.token_helper import TOKEN_PREFIXES, TokenKind, issue_token, issue_unique_token, token_kind
from utils.errors import DuplicateConstraintError


class TestIssueToken:
    @pytest.mark.parametrize("kind, pattern", [
        (TokenKind.attendee, r"^ATT_[0-9a-f]{32}$"),
        (TokenKind.booth, r"^BOOTH_[0-9a-f]{32}$"),
    ])
    def test_format(self, kind, pattern):
        assert re.match(pattern, issue_token(kind))

    def test_accepts_plain_string_kind(self):
        assert issue_token("booth").startswith("BOOTH_")

    def test_tokens_do_not_repeat(self):
        tokens = {issue_token(TokenKind.attendee) for _ in range(2000)}
        tokens |= {issue_token(TokenKind.booth) for _ in range(2000)}
        assert len(tokens) == 4000

    def test_prefixes_do_not_overlap(self):
        att, booth = TOKEN_PREFIXES[TokenKind.attendee], TOKEN_PREFIXES[TokenKind.booth]
        assert not att.startswith(booth) and not booth.startswith(att)


class TestTokenKind:
    def test_round_trips_issued_kind(self):
        assert token_kind(issue_token(TokenKind.attendee)) == TokenKind.attendee
        assert token_kind(issue_token(TokenKind.booth)) == TokenKind.booth

    @pytest.mark.parametrize("token", [None, "", "garbage", "ATT_", "BOOTH_", "att_abc", "XATT_abc"])
    def test_unrecognized(self, token):
        assert token_kind(token) is None


class _CollidingStore:
    """Reports the first `collisions` candidate tokens as taken."""

    def __init__(self, collisions: int):
        self.collisions = collisions
        self.calls = 0

    async def token_exists(self, token: str) -> bool:
        self.calls += 1
        return self.calls <= self.collisions


class TestIssueUniqueToken:
    @pytest.mark.asyncio
    async def test_retries_past_a_collision(self):
        store = _CollidingStore(collisions=2)
        token = await issue_unique_token(TokenKind.booth, store)
        assert token.startswith("BOOTH_")
        assert store.calls == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        store = _CollidingStore(collisions=10)
        with pytest.raises(DuplicateConstraintError):
            await issue_unique_token(TokenKind.attendee, store, max_attempts=3)
        assert store.calls == 3
