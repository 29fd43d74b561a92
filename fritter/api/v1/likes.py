from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...database import get_db
from ...stores import POST_TYPES, FreetCollection, LikeCollection, QuoteCollection
from . import deps, util

router = APIRouter()

class LikeEnvelope(BaseModel):
    message: str
    like: util.LikeResponse

class MessageResponse(BaseModel):
    message: str

def is_valid_post(post_type: str, post_id: int, db: Session = Depends(get_db)) -> None:
    """Checks the liked freet or quote exists"""
    if post_type not in POST_TYPES:
        raise HTTPException(status_code=400, detail=f"Post type {post_type} does not exist.")
    collection = QuoteCollection if post_type == "Quote" else FreetCollection
    if collection.find_one(db, post_id) is None:
        raise HTTPException(status_code=404, detail=f"{post_type} with ID {post_id} does not exist.")

@router.post("/{post_type}/{post_id}", response_model=LikeEnvelope, status_code=201)
def like_post(post_type: str, post_id: int,
              user_id: int = Depends(deps.is_user_logged_in),
              _: None = Depends(is_valid_post),
              db: Session = Depends(get_db)):
    if LikeCollection.find_one_by_liked_post(db, post_id, post_type, user_id):
        raise HTTPException(status_code=409, detail="You have already liked this post.")
    like = LikeCollection.add_one(db, user_id, post_id, post_type)
    return LikeEnvelope(
        message="Your like was created successfully.",
        like=util.construct_like_response(like),
    )

@router.delete("/{post_type}/{post_id}", response_model=MessageResponse)
def unlike_post(post_type: str, post_id: int,
                user_id: int = Depends(deps.is_user_logged_in),
                _: None = Depends(is_valid_post),
                db: Session = Depends(get_db)):
    like = LikeCollection.find_one_by_liked_post(db, post_id, post_type, user_id)
    if like is None:
        raise HTTPException(status_code=403, detail="You have not liked this post yet.")
    LikeCollection.delete_one(db, like.id)
    return MessageResponse(message="Your like was deleted successfully.")
