from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from photofeed.crud import user as crud
from photofeed.schemas.user import UserCreate, UserOut
from photofeed.schemas.token import Token
from photofeed.core.security import verify_password, create_access_token
from photofeed.db.session import get_db


router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    if crud.username_or_email_taken(db, user_in.username, user_in.email):
        raise HTTPException(status_code=400, detail="Username or email already registered")
    return crud.create_user(db, user_in.username, user_in.email, user_in.password)

@router.post("/login", response_model=Token)
def login(db: Session = Depends(get_db), form_data: OAuth2PasswordRequestForm = Depends()):
    user = crud.get_user_by_login(db, form_data.username)
    if not user or not verify_password(form_data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token({"sub": str(user.id)})
    return Token(access_token=access_token, token_type="bearer", user_id=user.id, username=user.username)
