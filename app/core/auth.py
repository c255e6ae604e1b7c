from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.database import get_db
from app.core.security import decode_access_token
from app.crud.user import get_user
from app.db.models import User

logger = logging.getLogger(__name__)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def get_session_token(request: Request, bearer_token: Optional[str] = None) -> Optional[str]:
    """
    The session cookie wins over the Authorization header.
    """
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or bearer_token


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
    bearer_token: Optional[str] = Depends(oauth2_scheme)
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )

    token = get_session_token(request, bearer_token)
    if not token:
        raise credentials_exception

    user_id = decode_access_token(token)
    if user_id is None:
        logger.warning("Rejected invalid or expired session token")
        raise credentials_exception

    db_user = await get_user(db, user_id=user_id)
    if not db_user:
        logger.warning(f"Session token names unknown user: {user_id}")
        raise credentials_exception

    return db_user
