import enum
import uuid
from typing import Optional

from utils.errors import DuplicateConstraintError


class TokenKind(str, enum.Enum):
    attendee = "attendee"
    booth    = "booth"


# Prefixes must never overlap: the verifier dispatches on them
TOKEN_PREFIXES = {
    TokenKind.attendee: "ATT_",
    TokenKind.booth:    "BOOTH_",
}


def issue_token(kind: TokenKind) -> str:
    """
    Generate an opaque QR token for an attendee or a booth.

    The body is a uuid4 rendered as 32 lowercase hex characters (122 random
    bits). Persisting it, and enforcing uniqueness, is the caller's job.
    """
    return f"{TOKEN_PREFIXES[TokenKind(kind)]}{uuid.uuid4().hex}"


def token_kind(token: Optional[str]) -> Optional[TokenKind]:
    """Return the kind a token claims to be by its prefix, or None."""
    if not token:
        return None
    for kind, prefix in TOKEN_PREFIXES.items():
        if token.startswith(prefix) and len(token) > len(prefix):
            return kind
    return None


async def issue_unique_token(kind: TokenKind, store, max_attempts: int = 3) -> str:
    """
    Issue a token that is not yet stored for any attendee or booth.

    A collision in a 122-bit space should never happen; the retry loop is the
    first line of defense and the unique column is the last.
    """
    for _ in range(max_attempts):
        token = issue_token(kind)
        if not await store.token_exists(token):
            return token
    raise DuplicateConstraintError("Could not issue a unique QR token")
