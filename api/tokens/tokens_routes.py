# api/tokens/tokens_routes.py

from fastapi import APIRouter, Depends

from api.tokens.tokens_controller import TokenController
from api.tokens.tokens_schema import VerifyTokenIn, VerifyTokenOut
from stores.interfaces import CheckinStore
from utils.deps import get_store

router = APIRouter(prefix="/tokens", tags=["tokens"])


@router.post(
    "/verify",
    response_model=VerifyTokenOut,
    summary="Resolve a scanned QR token to its attendee or booth",
)
async def verify_token(
    payload: VerifyTokenIn,
    store: CheckinStore = Depends(get_store),
) -> VerifyTokenOut:
    # Unknown codes are a normal answer ({"valid": false}), not an error status
    return await TokenController.verify_token(payload, store)
