from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session
from hotelquick.db.session import get_db
from hotelquick.services.session_service import AuthSession

def get_auth_session(db: Session = Depends(get_db)) -> AuthSession:
    return AuthSession(db).restore()

def get_current_identity(session: AuthSession = Depends(get_auth_session)) -> dict:
    if not session.is_authenticated:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return session.current

def require_roles(*roles: str):
    def _guard(me: dict = Depends(get_current_identity)) -> dict:
        if me.get("role") not in roles:
            raise HTTPException(status_code=403, detail="Forbidden")
        return me
    return _guard
