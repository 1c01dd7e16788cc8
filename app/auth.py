from datetime import datetime, timedelta
from typing import Optional

from fastapi import HTTPException, Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError

from app.config import settings
from app.utils.logging import get_logger

logger = get_logger(__name__)


# Tokens are issued by the identity provider; this service only reads them
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


# ============================================================
# TOKEN CREATION
# ============================================================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.utcnow() + expires_delta

    to_encode.update({"exp": expire})

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_viewer_id(token: str) -> str:
    """
    Returns the ``sub`` claim of a valid token.
    Raises JWTError for bad signatures, expired tokens and missing subjects.
    """
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    user_id = payload.get("sub")
    if not user_id:
        raise JWTError("Token has no subject")
    return str(user_id)


def _request_token(request: Request, bearer: Optional[str]) -> Optional[str]:
    if bearer:
        return bearer
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


# ============================================================
# CURRENT VIEWER
# ============================================================

def get_optional_viewer_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[str]:
    """
    Viewer id for pages that anonymous visitors may open.
    A missing or unusable token means an anonymous viewer.
    """
    token = _request_token(request, token)
    if not token:
        return None

    try:
        return decode_viewer_id(token)
    except JWTError as e:
        logger.warning("Ignoring invalid viewer token: %s", e)
        return None


def get_current_viewer_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
) -> str:
    token = _request_token(request, token)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    try:
        return decode_viewer_id(token)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
