from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from storefront.database import get_db
from storefront.schemas.user import UserCreate, UserLogin, UserResponse
from storefront.services.auth_service import register_user, authenticate_user

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user"""
    user = register_user(db, user_data)

    return {
        "message": "Registration successful. Please log in.",
        "userId": user.id
    }


@router.post("/login")
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login with email and password; returns the profile, no token"""
    user = authenticate_user(db, email=credentials.email, password=credentials.password)

    return {
        "message": "Login successful.",
        "user": UserResponse.model_validate(user).model_dump()
    }
