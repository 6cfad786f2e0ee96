"""
Shared FastAPI dependencies.

get_current_user guards routes that need a logged-in caller:
- no bearer token          -> 401 "Access token required"
- bad/expired/unknown token -> 403 "Invalid or expired token"
"""

from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from assessment_api.database import get_db
from assessment_api.models import User
from assessment_api.services.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Access token required")

    claims = decode_access_token(credentials.credentials)
    if claims is None:
        raise HTTPException(status_code=403, detail="Invalid or expired token")

    try:
        user_id = UUID(str(claims["sub"]))
    except ValueError:
        raise HTTPException(status_code=403, detail="Invalid or expired token")

    user = await db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=403, detail="Invalid or expired token")

    return user
