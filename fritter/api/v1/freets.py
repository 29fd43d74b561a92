from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ... import models
from ...database import get_db
from ...stores import FreetCollection
from . import deps, util

router = APIRouter()

class FreetBody(BaseModel):
    content: Optional[str] = None

class FreetEnvelope(BaseModel):
    message: str
    freet: util.FreetResponse

class MessageResponse(BaseModel):
    message: str

@router.get("", response_model=List[util.FreetResponse])
def get_freets(author: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """
    Returns all freets, most recently edited first, or only those of
    ``author`` when given
    """
    if author is None:
        freets = FreetCollection.find_all(db)
    else:
        user = deps.require_author(db, author)
        freets = FreetCollection.find_all_by_username(db, user.username)
    return [util.construct_freet_response(db, freet) for freet in freets]

@router.post("", response_model=FreetEnvelope, status_code=201)
def create_freet(body: FreetBody,
                 user_id: int = Depends(deps.is_user_logged_in),
                 db: Session = Depends(get_db)):
    content = deps.validate_content(body.content)
    freet = FreetCollection.add_one(db, user_id, content)
    return FreetEnvelope(
        message="Your freet was created successfully.",
        freet=util.construct_freet_response(db, freet),
    )

@router.put("/{freet_id}", response_model=FreetEnvelope)
def update_freet(body: FreetBody,
                 freet: models.Freet = Depends(deps.is_valid_freet_modifier),
                 db: Session = Depends(get_db)):
    content = deps.validate_content(body.content)
    freet = FreetCollection.update_one(db, freet.id, content=content)
    return FreetEnvelope(
        message="Your freet was updated successfully.",
        freet=util.construct_freet_response(db, freet),
    )

@router.delete("/{freet_id}", response_model=MessageResponse)
def delete_freet(freet: models.Freet = Depends(deps.is_valid_freet_modifier),
                 db: Session = Depends(get_db)):
    """
    Deletes a freet. Quotes of it keep their copy of its content
    """
    FreetCollection.delete_one(db, freet.id)
    return MessageResponse(message="Your freet was deleted successfully.")
