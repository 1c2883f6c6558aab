"""
Authentication Routes

POST /auth/signup - Register new user (returns token)
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from app.db.postgres import get_db_session
from app.core.auth import hash_password, verify_password, create_access_token, get_current_user
from app.schemas.schemas import (
    SignupRequest, SignupResponse, LoginRequest, TokenResponse, UserResponse
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(request: SignupRequest):
    """
    Register a new user account and return an access token.
    """
    email = request.email.lower()

    try:
        with get_db_session() as db:
            # Check email exists
            result = db.execute(
                text("SELECT user_id FROM users WHERE email = :email"),
                {"email": email}
            )
            if result.fetchone():
                raise HTTPException(status_code=400, detail="Email already registered")

            result = db.execute(
                text("""
                    INSERT INTO users (name, email, password_hash, role, branch, year, roll_number)
                    VALUES (:name, :email, :password_hash, :role, :branch, :year, :roll_number)
                    RETURNING user_id, created_at
                """),
                {
                    "name": request.name.strip(),
                    "email": email,
                    "password_hash": hash_password(request.password),
                    "role": request.role.value,
                    "branch": request.branch or "N/A",
                    "year": request.year,
                    "roll_number": request.roll_number
                }
            )
            user_id, created_at = result.fetchone()
    except IntegrityError as e:
        # Unique violation on email or roll_number
        detail = "Roll number already exists" if "roll_number" in str(e.orig) else "Email already registered"
        raise HTTPException(status_code=400, detail=detail)

    token = create_access_token(data={"sub": str(user_id), "role": request.role.value})

    return SignupResponse(
        message="User registered successfully",
        token=token,
        user=UserResponse(
            user_id=user_id, name=request.name.strip(), email=email, role=request.role.value,
            branch=request.branch or "N/A", year=request.year, roll_number=request.roll_number,
            created_at=created_at
        )
    )


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    with get_db_session() as db:
        result = db.execute(
            text("SELECT user_id, password_hash, role, is_active FROM users WHERE email = :email"),
            {"email": request.email.lower()}
        )
        user = result.fetchone()

    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    user_id, password_hash, role, is_active = user

    if not is_active:
        raise HTTPException(status_code=403, detail="Account deactivated")

    if not verify_password(request.password, password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(data={"sub": str(user_id), "role": role})

    return TokenResponse(access_token=token, user_id=user_id, role=role)


@router.get("/me", response_model=UserResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    with get_db_session() as db:
        result = db.execute(
            text("""
                SELECT user_id, name, email, role, branch, year, roll_number, is_active, created_at
                FROM users WHERE user_id = :id
            """),
            {"id": user["user_id"]}
        )
        row = result.fetchone()

    if not row:
        raise HTTPException(status_code=404, detail="User not found")

    return UserResponse(
        user_id=row[0], name=row[1], email=row[2], role=row[3], branch=row[4],
        year=row[5], roll_number=row[6], is_active=row[7], created_at=row[8]
    )
