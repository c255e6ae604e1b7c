from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.config import settings
from app.core.database import get_db
from app.core.auth import get_current_user
from app.core.security import create_access_token, verify_password
from app.crud.user import get_user_by_email
from app.db.models import User as DBUser
from app.schemas.user import User, UserLogin, Token

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/login", response_model=Token)
async def login(
    *,
    db: AsyncSession = Depends(get_db),
    credentials: UserLogin,
    response: Response
) -> Any:
    """
    Check email/password credentials and open a cookie session.
    """
    user = await get_user_by_email(db, email=credentials.email)
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Failed login attempt for {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(user.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    logger.info(f"User logged in: {user.id}")
    return {"access_token": access_token, "token_type": "bearer"}

@router.post("/logout")
async def logout(response: Response) -> Any:
    """
    Drop the session cookie.
    """
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"success": True}

@router.get("/me", response_model=User)
async def read_current_user(current_user: DBUser = Depends(get_current_user)) -> Any:
    return current_user
