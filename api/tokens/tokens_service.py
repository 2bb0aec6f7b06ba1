# api/tokens/tokens_service.py

from dataclasses import dataclass
from typing import Optional, Union

from api.attendees.attendees_model import Attendee
from api.booths.booths_model import Booth
from helpers.token_helper import TokenKind, token_kind
from stores.interfaces import CheckinStore


@dataclass(frozen=True)
class TokenVerification:
    valid: bool
    kind: Optional[TokenKind] = None
    entity: Optional[Union[Attendee, Booth]] = None

    @property
    def attendee(self) -> Optional[Attendee]:
        return self.entity if self.kind == TokenKind.attendee else None

    @property
    def booth(self) -> Optional[Booth]:
        return self.entity if self.kind == TokenKind.booth else None


INVALID = TokenVerification(valid=False)


class TokenService:
    def __init__(self, store: CheckinStore):
        self.store = store

    async def verify_token(self, token: Optional[str]) -> TokenVerification:
        """
        Resolve a scanned token to its attendee or booth.

        The prefix decides which table is searched, so a booth token is never
        looked up among attendees. Unknown codes come back as an invalid
        result rather than an error; mis-scans are routine at a booth.
        """
        token = (token or "").strip()
        kind = token_kind(token)
        if kind is None:
            return INVALID

        if kind == TokenKind.attendee:
            entity = await self.store.find_attendee_by_token(token)
        else:
            entity = await self.store.find_booth_by_token(token)

        if entity is None:
            return INVALID
        return TokenVerification(valid=True, kind=kind, entity=entity)
