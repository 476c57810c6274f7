from fastapi import APIRouter, Depends, HTTPException
from hotelquick.api.deps import get_auth_session, get_current_identity
from hotelquick.core.errors import InvalidCredentialsError
from hotelquick.schemas.auth import LoginRequest, IdentityOut
from hotelquick.services.session_service import AuthSession

router = APIRouter(tags=["auth"])

@router.post("/auth/login", response_model=IdentityOut)
def login(body: LoginRequest, session: AuthSession = Depends(get_auth_session)):
    try:
        return session.login(body.email, body.password, body.role)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))


@router.post("/auth/logout")
def logout(session: AuthSession = Depends(get_auth_session)):
    session.logout()
    return {"ok": True}


@router.get("/auth/me", response_model=IdentityOut)
def me(me: dict = Depends(get_current_identity)):
    """Return the persisted identity, including its role."""
    return me
