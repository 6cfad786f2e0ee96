"""
Authentication API endpoints.

1. POST /api/auth/signup — Create an account, returns a token + profile
2. POST /api/auth/login — Exchange email + password for a token + profile
3. GET  /api/auth/me — Profile of the token's owner

Accounts are append-only: there is no update or delete.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from assessment_api.config import settings
from assessment_api.database import get_db
from assessment_api.dependencies import get_current_user
from assessment_api.logging_config import get_logger
from assessment_api.models import User
from assessment_api.schemas.auth import AuthResponse, LoginRequest, SignupRequest, UserProfile
from assessment_api.services.security import create_access_token, hash_password, verify_password

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = get_logger(__name__)


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def signup(
    request: SignupRequest,
    db: AsyncSession = Depends(get_db),
):
    """Register a new user.

    Returns 400 for missing fields or a short password, 409 if the email
    is already registered.
    """
    if not request.email or not request.password or not request.name:
        raise HTTPException(
            status_code=400,
            detail="Email, password, and name are required",
        )

    if len(request.password) < settings.MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters long",
        )

    if await _find_user(db, request.email):
        raise HTTPException(status_code=409, detail="User already exists")

    user = User(
        email=request.email,
        password_hash=hash_password(request.password),
        name=request.name,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        await db.rollback()
        raise HTTPException(status_code=409, detail="User already exists")
    await db.refresh(user)

    logger.info("user_signed_up", user_id=str(user.id))

    return AuthResponse(
        message="User registered successfully",
        token=create_access_token(user),
        user=UserProfile.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Log in with email + password.

    Unknown email and wrong password give the same 401, so the response
    does not reveal which accounts exist.
    """
    if not request.email or not request.password:
        raise HTTPException(status_code=400, detail="Email and password are required")

    user = await _find_user(db, request.email)
    if not user or not verify_password(request.password, user.password_hash):
        logger.info("login_failed")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info("user_logged_in", user_id=str(user.id))

    return AuthResponse(
        message="Login successful",
        token=create_access_token(user),
        user=UserProfile.model_validate(user),
    )


@router.get("/me", response_model=UserProfile)
async def me(current_user: User = Depends(get_current_user)):
    """Profile of the authenticated user."""
    return UserProfile.model_validate(current_user)


async def _find_user(db: AsyncSession, email: str):
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()
