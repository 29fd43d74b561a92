import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...database import get_db
from ...stores import FreetCollection, QuoteCollection, UserCollection
from . import deps, util

logger = logging.getLogger(__name__)

router = APIRouter()

# Request bodies; fields are checked by hand so errors carry readable messages
class Credentials(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class SessionResponse(BaseModel):
    message: str
    user: Optional[util.UserResponse] = None

class MessageResponse(BaseModel):
    message: str

@router.get("/session", response_model=SessionResponse)
def get_session(user_id: Optional[int] = Depends(deps.get_current_user_id),
                db: Session = Depends(get_db)):
    """
    Returns the signed in user, or null when nobody is signed in
    """
    user = UserCollection.find_one_by_user_id(db, user_id)
    return SessionResponse(
        message="Your session info was found successfully.",
        user=util.construct_user_response(user) if user else None,
    )

@router.post("/session", response_model=SessionResponse, status_code=201,
             dependencies=[Depends(deps.is_user_logged_out)])
def sign_in(body: Credentials, request: Request, db: Session = Depends(get_db)):
    """
    Signs a user in
    """
    deps.validate_username(body.username)
    deps.validate_password(body.password)
    user = UserCollection.find_one_by_username_and_password(db, body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid user login credentials provided.")

    request.session[deps.SESSION_USER_KEY] = user.id
    logger.info("User %s signed in", user.id)
    return SessionResponse(
        message="You have logged in successfully",
        user=util.construct_user_response(user),
    )

@router.delete("/session", response_model=MessageResponse,
               dependencies=[Depends(deps.is_user_logged_in)])
def sign_out(request: Request):
    """
    Signs the current user out
    """
    request.session.pop(deps.SESSION_USER_KEY, None)
    return MessageResponse(message="You have been logged out successfully.")

@router.post("", response_model=SessionResponse, status_code=201,
             dependencies=[Depends(deps.is_user_logged_out)])
def create_user(body: Credentials, request: Request, db: Session = Depends(get_db)):
    """
    Creates an account and signs into it
    """
    username = deps.validate_username(body.username)
    deps.ensure_username_not_in_use(db, username)
    password = deps.validate_password(body.password)

    # Passwords are stored exactly as given
    user = UserCollection.add_one(db, username, password)
    request.session[deps.SESSION_USER_KEY] = user.id
    return SessionResponse(
        message=f"Your account was created successfully. You have been logged in as {user.username}",
        user=util.construct_user_response(user),
    )

@router.patch("", response_model=SessionResponse)
def update_user(body: Credentials,
                user_id: int = Depends(deps.is_user_logged_in),
                db: Session = Depends(get_db)):
    """
    Changes the current user's username and/or password
    """
    if body.username is not None:
        deps.validate_username(body.username)
        deps.ensure_username_not_in_use(db, body.username, user_id)
    if body.password is not None:
        deps.validate_password(body.password)

    user = UserCollection.update_one(db, user_id, username=body.username, password=body.password)
    if user is None:
        raise HTTPException(status_code=404, detail="Your account no longer exists.")
    return SessionResponse(
        message="Your profile was updated successfully.",
        user=util.construct_user_response(user),
    )

@router.delete("", response_model=MessageResponse)
def delete_user(request: Request,
                user_id: int = Depends(deps.is_user_logged_in),
                db: Session = Depends(get_db)):
    """
    Deletes the current account along with its freets and quotes.

    Likes made by the user, highlights and likes of their posts, their
    fritform and other users' follows of them are left in place.
    """
    UserCollection.delete_one(db, user_id)
    FreetCollection.delete_many(db, user_id)
    QuoteCollection.delete_many_author(db, user_id)
    request.session.pop(deps.SESSION_USER_KEY, None)
    logger.info("Account %s deleted", user_id)
    return MessageResponse(message="Your account has been deleted successfully.")

@router.get("/highlights", response_model=List[util.FreetResponse])
def get_highlights(author: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """
    Returns the freets the given author highlighted
    """
    user = deps.require_author(db, author)
    highlights = UserCollection.find_highlights(db, user.username)
    return [util.construct_freet_response(db, freet) for freet in highlights]

@router.post("/highlights/{freet_id}", response_model=util.UserResponse)
def create_highlight(freet_id: int,
                     user_id: int = Depends(deps.is_user_logged_in),
                     db: Session = Depends(get_db)):
    """
    Adds a freet to the current user's highlights. The freet is not checked
    """
    user = UserCollection.create_highlight(db, user_id, freet_id)
    if user is None:
        raise HTTPException(status_code=404, detail="Your account no longer exists.")
    return util.construct_user_response(user)

@router.delete("/highlights/{freet_id}", response_model=util.UserResponse)
def delete_highlight(freet_id: int,
                     user_id: int = Depends(deps.is_user_logged_in),
                     db: Session = Depends(get_db)):
    user = UserCollection.delete_highlight(db, user_id, freet_id)
    if user is None:
        raise HTTPException(status_code=404, detail="Your account no longer exists.")
    return util.construct_user_response(user)

def _find_user_to_follow(db: Session, username: str):
    to_follow = UserCollection.find_one_by_username(db, username)
    if to_follow is None:
        raise HTTPException(status_code=404, detail=f"A user with username {username} does not exist.")
    return to_follow

@router.get("/follow", response_model=util.UserResponse)
def get_following(user_id: int = Depends(deps.is_user_logged_in),
                  db: Session = Depends(get_db)):
    """
    Returns the current user, whose following list holds the followed ids
    """
    user = UserCollection.find_one_by_user_id(db, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="Your account no longer exists.")
    return util.construct_user_response(user)

@router.post("/follow/{username}", response_model=util.UserResponse)
def follow(username: str,
           user_id: int = Depends(deps.is_user_logged_in),
           db: Session = Depends(get_db)):
    to_follow = _find_user_to_follow(db, username)
    user = UserCollection.add_follow(db, user_id, to_follow.id)
    if user is None:
        raise HTTPException(status_code=404, detail="Your account no longer exists.")
    return util.construct_user_response(user)

@router.delete("/follow/{username}", response_model=util.UserResponse)
def unfollow(username: str,
             user_id: int = Depends(deps.is_user_logged_in),
             db: Session = Depends(get_db)):
    to_unfollow = _find_user_to_follow(db, username)
    user = UserCollection.delete_follow(db, user_id, to_unfollow.id)
    if user is None:
        raise HTTPException(status_code=404, detail="Your account no longer exists.")
    return util.construct_user_response(user)
