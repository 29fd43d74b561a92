"""
Shapes database rows into the JSON the frontend consumes.

Passwords are dropped, author ids are swapped for usernames and dates are
rendered as readable strings.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from ... import models
from ...stores import UserCollection


class UserResponse(BaseModel):
    id: int
    username: str
    date_joined: str
    following: List[int]
    freets: List[int]
    quotes: List[int]
    highlights: List[int]


class FreetResponse(BaseModel):
    id: int
    author: Optional[str]
    content: str
    date_created: str
    date_modified: str
    highlight: bool


class QuoteResponse(BaseModel):
    id: int
    author: Optional[str]
    ref_id: int
    ref_author: Optional[str]
    ref_content: str
    content: str
    date_created: str
    date_modified: str
    anon: bool


class LikeResponse(BaseModel):
    id: int
    liker: int
    liked: int
    post_type: str


class FritFormResponse(BaseModel):
    id: int
    user_id: int
    fields: List[str]


def format_date(date: datetime) -> str:
    """Formats a date like ``October 17th 2026, 3:04:05 pm``."""
    day = date.day
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    hour = date.hour % 12 or 12
    meridiem = "am" if date.hour < 12 else "pm"
    return f"{date:%B} {day}{suffix} {date.year}, {hour}:{date:%M:%S} {meridiem}"


def _username(db: Session, user_id: int) -> Optional[str]:
    # Authors may have deleted their account since posting
    user = UserCollection.find_one_by_user_id(db, user_id)
    return user.username if user else None


def construct_user_response(user: models.User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        date_joined=format_date(user.date_joined),
        following=list(user.following or []),
        freets=list(user.freets or []),
        quotes=list(user.quotes or []),
        highlights=list(user.highlights or []),
    )


def construct_freet_response(db: Session, freet: models.Freet) -> FreetResponse:
    return FreetResponse(
        id=freet.id,
        author=_username(db, freet.author_id),
        content=freet.content,
        date_created=format_date(freet.date_created),
        date_modified=format_date(freet.date_modified),
        highlight=bool(freet.highlight),
    )


def construct_quote_response(db: Session, quote: models.Quote) -> QuoteResponse:
    return QuoteResponse(
        id=quote.id,
        author=_username(db, quote.author_id),
        ref_id=quote.ref_id,
        ref_author=_username(db, quote.ref_author),
        ref_content=quote.ref_content,
        content=quote.content,
        date_created=format_date(quote.date_created),
        date_modified=format_date(quote.date_modified),
        anon=bool(quote.anon),
    )


def construct_like_response(like: models.Like) -> LikeResponse:
    return LikeResponse(id=like.id, liker=like.liker, liked=like.liked, post_type=like.post_type)


def construct_fritform_response(fritform: models.FritForm) -> FritFormResponse:
    return FritFormResponse(id=fritform.id, user_id=fritform.user_id, fields=list(fritform.fields or []))
