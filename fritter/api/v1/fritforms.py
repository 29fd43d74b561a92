from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...database import get_db
from ...stores import FritFormCollection, split_fields
from . import deps, util

router = APIRouter()

class FritFormBody(BaseModel):
    # Comma separated, e.g. "name,pronouns,website"
    fields: Optional[str] = None

class FritFormEnvelope(BaseModel):
    message: str
    fritform: util.FritFormResponse

class MessageResponse(BaseModel):
    message: str

def _find_own_fritform(db: Session, user_id: int):
    fritform = FritFormCollection.find_one_by_user_id(db, user_id)
    if fritform is None:
        raise HTTPException(status_code=404, detail="You have not set up a FritForm yet.")
    return fritform

@router.get("", response_model=util.FritFormResponse)
def get_fritform(user_id: int = Depends(deps.is_user_logged_in),
                 db: Session = Depends(get_db)):
    return util.construct_fritform_response(_find_own_fritform(db, user_id))

@router.post("", response_model=FritFormEnvelope, status_code=201)
def create_fritform(body: FritFormBody,
                    user_id: int = Depends(deps.is_user_logged_in),
                    db: Session = Depends(get_db)):
    if FritFormCollection.find_one_by_user_id(db, user_id) is not None:
        raise HTTPException(status_code=409, detail="You already have a FritForm.")
    fields = split_fields(body.fields or "")
    if not fields:
        raise HTTPException(status_code=400, detail="A FritForm needs at least one field.")
    fritform = FritFormCollection.add_one(db, user_id, fields)
    return FritFormEnvelope(
        message="Your FritForm was created successfully.",
        fritform=util.construct_fritform_response(fritform),
    )

@router.put("", response_model=FritFormEnvelope)
def update_fritform(body: FritFormBody,
                    user_id: int = Depends(deps.is_user_logged_in),
                    db: Session = Depends(get_db)):
    fritform = _find_own_fritform(db, user_id)
    fritform = FritFormCollection.update_one(db, fritform.id, fields=body.fields)
    return FritFormEnvelope(
        message="Your fritform was updated successfully.",
        fritform=util.construct_fritform_response(fritform),
    )

@router.delete("", response_model=MessageResponse)
def delete_fritform(user_id: int = Depends(deps.is_user_logged_in),
                    db: Session = Depends(get_db)):
    fritform = _find_own_fritform(db, user_id)
    FritFormCollection.delete_one(db, fritform.id)
    return MessageResponse(message="Your fritform has been deleted successfully.")
