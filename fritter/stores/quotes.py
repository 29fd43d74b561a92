import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models
from .freets import FreetCollection
from .users import UserCollection

logger = logging.getLogger(__name__)


class QuoteCollection:
    """
    Adding, finding, updating and deleting quote freets.

    A quote keeps a copy of the quoted freet's content taken when the quote
    is made. Later edits or deletion of that freet leave the copy untouched.
    """

    @staticmethod
    def add_one(db: Session, author_id: int, ref_id: int, content: str,
                anon: bool) -> Optional[models.Quote]:
        freet = FreetCollection.find_one(db, ref_id)
        if freet is None:
            logger.warning("Cannot quote missing freet %s", ref_id)
            return None

        date = datetime.now()
        quote = models.Quote(
            author_id=author_id,
            ref_id=freet.id,
            ref_author=freet.author_id,
            ref_content=freet.content,
            content=content,
            date_created=date,
            date_modified=date,
            anon=anon,
        )
        db.add(quote)
        db.commit()
        db.refresh(quote)
        logger.info("Created quote %s of freet %s by user %s", quote.id, ref_id, author_id)

        UserCollection.add_quote(db, author_id, quote.id)
        return quote

    @staticmethod
    def find_one(db: Session, quote_id: int) -> Optional[models.Quote]:
        return db.query(models.Quote).filter(models.Quote.id == quote_id).first()

    @staticmethod
    def find_all(db: Session) -> List[models.Quote]:
        return db.query(models.Quote)\
            .order_by(models.Quote.date_modified.desc(), models.Quote.id.desc())\
            .all()

    @staticmethod
    def find_all_by_username(db: Session, username: str) -> List[models.Quote]:
        author = UserCollection.find_one_by_username(db, username)
        if author is None:
            return []
        return db.query(models.Quote)\
            .filter(models.Quote.author_id == author.id)\
            .order_by(models.Quote.date_modified.desc(), models.Quote.id.desc())\
            .all()

    @staticmethod
    def find_all_by_ref(db: Session, freet_id: int) -> List[models.Quote]:
        # Anonymized quotes never show up when looking from the quoted freet
        return db.query(models.Quote)\
            .filter(models.Quote.ref_id == freet_id)\
            .filter(models.Quote.anon == False)\
            .order_by(models.Quote.date_modified.desc(), models.Quote.id.desc())\
            .all()

    @staticmethod
    def find_all_by_anon(db: Session, anon: bool) -> List[models.Quote]:
        return db.query(models.Quote)\
            .filter(models.Quote.anon == anon)\
            .order_by(models.Quote.date_modified.desc(), models.Quote.id.desc())\
            .all()

    @staticmethod
    def update_one(db: Session, quote_id: int, content: Optional[str] = None,
                   anon: Optional[bool] = None) -> Optional[models.Quote]:
        quote = QuoteCollection.find_one(db, quote_id)
        if quote is None:
            return None
        if content:
            quote.content = content
        if anon is not None:
            quote.anon = anon
        quote.date_modified = datetime.now()
        db.commit()
        db.refresh(quote)
        return quote

    @staticmethod
    def delete_one(db: Session, quote_id: int) -> bool:
        quote = QuoteCollection.find_one(db, quote_id)
        if quote is None:
            return False
        UserCollection.delete_quote(db, quote.author_id, quote_id)
        db.query(models.Quote).filter(models.Quote.id == quote_id).delete()
        db.commit()
        logger.info("Deleted quote %s", quote_id)
        return True

    @staticmethod
    def delete_many_author(db: Session, author_id: int) -> None:
        count = db.query(models.Quote).filter(models.Quote.author_id == author_id).delete()
        db.commit()
        UserCollection.delete_many_quote(db, author_id)
        logger.info("Deleted %d quotes by user %s", count, author_id)

    @staticmethod
    def delete_many_ref(db: Session, freet_id: int) -> None:
        """
        Deletes every quote of the freet.

        The quoting users' ``quotes`` sets still list the deleted ids
        afterwards.
        """
        count = db.query(models.Quote).filter(models.Quote.ref_id == freet_id).delete()
        db.commit()
        logger.info("Deleted %d quotes of freet %s", count, freet_id)
