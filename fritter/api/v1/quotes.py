from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ... import models
from ...database import get_db
from ...stores import FreetCollection, QuoteCollection
from . import deps, util

router = APIRouter()

class QuoteCreate(BaseModel):
    ref_id: int
    content: Optional[str] = None
    anon: bool

class QuoteUpdate(BaseModel):
    content: Optional[str] = None
    anon: Optional[bool] = None

class QuoteEnvelope(BaseModel):
    message: str
    quote: util.QuoteResponse

class MessageResponse(BaseModel):
    message: str

@router.get("", response_model=List[util.QuoteResponse])
def get_quotes(author: Optional[str] = Query(None),
               freet_id: Optional[int] = Query(None, alias="freetId"),
               anon: Optional[bool] = Query(None),
               db: Session = Depends(get_db)):
    """
    Returns quotes, most recently edited first.

    - ``author``: only quotes written by this user
    - ``freetId``: quotes of this freet, leaving out anonymized ones
    - ``anon``: only quotes with this anon flag
    """
    if author is not None:
        user = deps.require_author(db, author)
        quotes = QuoteCollection.find_all_by_username(db, user.username)
    elif freet_id is not None:
        if FreetCollection.find_one(db, freet_id) is None:
            raise HTTPException(status_code=404, detail=f"Freet with freet ID {freet_id} does not exist.")
        quotes = QuoteCollection.find_all_by_ref(db, freet_id)
    elif anon is not None:
        quotes = QuoteCollection.find_all_by_anon(db, anon)
    else:
        quotes = QuoteCollection.find_all(db)
    return [util.construct_quote_response(db, quote) for quote in quotes]

@router.post("", response_model=QuoteEnvelope, status_code=201)
def create_quote(body: QuoteCreate,
                 user_id: int = Depends(deps.is_user_logged_in),
                 db: Session = Depends(get_db)):
    content = deps.validate_content(body.content, "Quote freet")
    quote = QuoteCollection.add_one(db, user_id, body.ref_id, content, body.anon)
    if quote is None:
        raise HTTPException(status_code=404, detail=f"Freet with freet ID {body.ref_id} does not exist.")
    return QuoteEnvelope(
        message="Your quote was created successfully.",
        quote=util.construct_quote_response(db, quote),
    )

@router.put("/{quote_id}", response_model=QuoteEnvelope)
def update_quote(body: QuoteUpdate,
                 quote: models.Quote = Depends(deps.is_valid_quote_modifier),
                 db: Session = Depends(get_db)):
    """
    Changes a quote's content and/or anon flag. The quoted content stays as it was
    """
    if body.content is not None:
        deps.validate_content(body.content, "Quote freet")
    quote = QuoteCollection.update_one(db, quote.id, content=body.content, anon=body.anon)
    return QuoteEnvelope(
        message="Your quote was updated successfully.",
        quote=util.construct_quote_response(db, quote),
    )

@router.delete("/{quote_id}", response_model=MessageResponse)
def delete_quote(quote: models.Quote = Depends(deps.is_valid_quote_modifier),
                 db: Session = Depends(get_db)):
    QuoteCollection.delete_one(db, quote.id)
    return MessageResponse(message="Your quote was deleted successfully.")
