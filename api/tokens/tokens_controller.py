# api/tokens/tokens_controller.py

from api.attendees.attendees_schema import AttendeeOut
from api.booths.booths_schema import BoothOut
from api.tokens.tokens_schema import VerifyTokenIn, VerifyTokenOut
from api.tokens.tokens_service import TokenService
from stores.interfaces import CheckinStore


class TokenController:
    @staticmethod
    async def verify_token(payload: VerifyTokenIn, store: CheckinStore) -> VerifyTokenOut:
        result = await TokenService(store).verify_token(payload.token)
        return VerifyTokenOut(
            valid=result.valid,
            kind=result.kind,
            attendee=AttendeeOut.model_validate(result.attendee) if result.attendee else None,
            booth=BoothOut.model_validate(result.booth) if result.booth else None,
        )
