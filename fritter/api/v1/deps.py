"""
Request checks shared by the routers.

Each check either returns what the route needs (the session user id, the
freet being edited, ...) or raises an ``HTTPException`` that ends the request.
Routes list them as dependencies in the order they must run.
"""
import re
from typing import Optional

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from ... import models
from ...core.config import get_settings
from ...database import get_db
from ...stores import FreetCollection, QuoteCollection, UserCollection

USERNAME_RE = re.compile(r"\w+")
PASSWORD_RE = re.compile(r"\S+")

SESSION_USER_KEY = "userId"


def get_current_user_id(request: Request) -> Optional[int]:
    return request.session.get(SESSION_USER_KEY)


def is_user_logged_in(user_id: Optional[int] = Depends(get_current_user_id)) -> int:
    if user_id is None:
        raise HTTPException(status_code=403, detail="You must be logged in to complete this action.")
    return user_id


def is_user_logged_out(user_id: Optional[int] = Depends(get_current_user_id)) -> None:
    if user_id is not None:
        raise HTTPException(status_code=403, detail="You are already signed in.")


def validate_username(username: Optional[str]) -> str:
    if not username or not USERNAME_RE.fullmatch(username):
        raise HTTPException(status_code=400, detail="Username must be a nonempty alphanumeric string.")
    return username


def validate_password(password: Optional[str]) -> str:
    if not password or not PASSWORD_RE.fullmatch(password):
        raise HTTPException(status_code=400, detail="Password must be a nonempty string.")
    return password


def ensure_username_not_in_use(db: Session, username: str, user_id: Optional[int] = None) -> None:
    """Users may keep their own username, even in a different case."""
    user = UserCollection.find_one_by_username(db, username)
    if user is not None and user.id != user_id:
        raise HTTPException(status_code=409, detail="An account with this username already exists.")


def require_author(db: Session, author: Optional[str]) -> models.User:
    if not author or not author.strip():
        raise HTTPException(status_code=400, detail="Provided author username must be nonempty.")
    user = UserCollection.find_one_by_username(db, author)
    if user is None:
        raise HTTPException(status_code=404, detail=f"A user with username {author} does not exist.")
    return user


def validate_content(content: Optional[str], label: str = "Freet") -> str:
    if not content or not content.strip():
        raise HTTPException(status_code=400, detail=f"{label} content must be at least one character long.")
    limit = get_settings().MAX_CONTENT_LENGTH
    if len(content) > limit:
        raise HTTPException(status_code=413, detail=f"{label} content must be no more than {limit} characters.")
    return content


def is_freet_exists(freet_id: int, db: Session = Depends(get_db)) -> models.Freet:
    freet = FreetCollection.find_one(db, freet_id)
    if freet is None:
        raise HTTPException(status_code=404, detail=f"Freet with freet ID {freet_id} does not exist.")
    return freet


def is_valid_freet_modifier(user_id: int = Depends(is_user_logged_in),
                            freet: models.Freet = Depends(is_freet_exists)) -> models.Freet:
    if freet.author_id != user_id:
        raise HTTPException(status_code=403, detail="Cannot modify other users' freets.")
    return freet


def is_quote_exists(quote_id: int, db: Session = Depends(get_db)) -> models.Quote:
    quote = QuoteCollection.find_one(db, quote_id)
    if quote is None:
        raise HTTPException(status_code=404, detail=f"Quote freet with ID {quote_id} does not exist.")
    return quote


def is_valid_quote_modifier(user_id: int = Depends(is_user_logged_in),
                            quote: models.Quote = Depends(is_quote_exists)) -> models.Quote:
    if quote.author_id != user_id:
        raise HTTPException(status_code=403, detail="Cannot modify other users' quote freets.")
    return quote
