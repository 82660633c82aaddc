from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
import jwt

from airline_api.core.security import decode_access_token
from airline_api.core.users import UserRegistry
from airline_api.models.enums import Role
from airline_api.schemas.auth import SessionClaims

# auto_error=False: a missing or non-Bearer header reaches get_current_claims as None
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

def get_user_registry(request: Request) -> UserRegistry:
    return request.app.state.user_registry

def get_current_claims(token: Optional[str] = Depends(oauth2_scheme)) -> SessionClaims:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing or invalid Authorization header.")
    try:
        payload = decode_access_token(token)
        return SessionClaims(**payload)
    except (jwt.PyJWTError, ValidationError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token.")

def require_roles(*allowed: Role):
    def checker(claims: SessionClaims = Depends(get_current_claims)) -> SessionClaims:
        if claims.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden for this role.")
        return claims
    return checker
