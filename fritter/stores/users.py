import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from .. import models

logger = logging.getLogger(__name__)


def _add_to_set(ids, value) -> list:
    members = set(ids or [])
    members.add(value)
    return list(members)


def _remove_from_set(ids, value) -> list:
    members = set(ids or [])
    members.discard(value)
    return list(members)


class UserCollection:
    """
    Queries and mutations for users, including the id-sets each user carries
    for the freets and quotes they wrote, the users they follow and the freets
    they highlighted.

    The id-sets are kept in sync by hand: nothing in the database ties them to
    the author_id columns of the freets and quotes tables.
    """

    @staticmethod
    def add_one(db: Session, username: str, password: str) -> models.User:
        user = models.User(
            username=username,
            password=password,
            date_joined=datetime.now(),
            following=[],
            freets=[],
            quotes=[],
            highlights=[],
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    @staticmethod
    def find_one_by_user_id(db: Session, user_id: Optional[int]) -> Optional[models.User]:
        if user_id is None:
            return None
        return db.query(models.User).filter(models.User.id == user_id).first()

    @staticmethod
    def find_one_by_username(db: Session, username: Optional[str]) -> Optional[models.User]:
        """Case-insensitive lookup on the trimmed username."""
        if not username or not username.strip():
            return None
        return db.query(models.User)\
            .filter(func.lower(models.User.username) == username.strip().lower())\
            .first()

    @staticmethod
    def find_one_by_username_and_password(db: Session, username: str, password: str) -> Optional[models.User]:
        if not username or not username.strip():
            return None
        return db.query(models.User)\
            .filter(func.lower(models.User.username) == username.strip().lower())\
            .filter(models.User.password == password)\
            .first()

    @staticmethod
    def update_one(db: Session, user_id: int, username: Optional[str] = None,
                   password: Optional[str] = None) -> Optional[models.User]:
        user = UserCollection.find_one_by_user_id(db, user_id)
        if user is None:
            return None
        if password:
            user.password = password
        if username:
            user.username = username
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def delete_one(db: Session, user_id: int) -> bool:
        """Removes the user row only. Callers cascade to posts themselves."""
        deleted = db.query(models.User).filter(models.User.id == user_id).delete()
        db.commit()
        logger.info("Deleted user %s", user_id)
        return deleted > 0

    @staticmethod
    def find_highlights(db: Session, username: str) -> List[models.Freet]:
        """
        Returns the freets the user highlighted, newest edit first.

        Only freets written by the user themselves are considered: the
        highlight set is checked against the full list of the user's freets.
        """
        from .freets import FreetCollection

        user = UserCollection.find_one_by_username(db, username)
        if user is None:
            return []
        highlighted = set(user.highlights or [])
        freets = FreetCollection.find_all_by_username(db, user.username)
        return [freet for freet in freets if freet.id in highlighted]

    @staticmethod
    def _update_set(db: Session, user_id: int, field: str, update) -> Optional[models.User]:
        user = UserCollection.find_one_by_user_id(db, user_id)
        if user is None:
            logger.warning("User %s not found while updating %s", user_id, field)
            return None
        # Assigning a new list marks the JSON column as modified
        setattr(user, field, update(getattr(user, field)))
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def create_highlight(db: Session, user_id: int, freet_id: int) -> Optional[models.User]:
        logger.debug("User %s highlights freet %s", user_id, freet_id)
        return UserCollection._update_set(
            db, user_id, "highlights", lambda ids: _add_to_set(ids, freet_id))

    @staticmethod
    def delete_highlight(db: Session, user_id: int, freet_id: int) -> Optional[models.User]:
        logger.debug("User %s removes highlight %s", user_id, freet_id)
        return UserCollection._update_set(
            db, user_id, "highlights", lambda ids: _remove_from_set(ids, freet_id))

    @staticmethod
    def add_freet(db: Session, user_id: int, freet_id: int) -> Optional[models.User]:
        logger.debug("Indexing freet %s under user %s", freet_id, user_id)
        return UserCollection._update_set(
            db, user_id, "freets", lambda ids: _add_to_set(ids, freet_id))

    @staticmethod
    def add_quote(db: Session, user_id: int, quote_id: int) -> Optional[models.User]:
        logger.debug("Indexing quote %s under user %s", quote_id, user_id)
        return UserCollection._update_set(
            db, user_id, "quotes", lambda ids: _add_to_set(ids, quote_id))

    @staticmethod
    def delete_freet(db: Session, user_id: int, freet_id: int) -> Optional[models.User]:
        logger.debug("Unindexing freet %s from user %s", freet_id, user_id)
        return UserCollection._update_set(
            db, user_id, "freets", lambda ids: _remove_from_set(ids, freet_id))

    @staticmethod
    def delete_quote(db: Session, user_id: int, quote_id: int) -> Optional[models.User]:
        logger.debug("Unindexing quote %s from user %s", quote_id, user_id)
        return UserCollection._update_set(
            db, user_id, "quotes", lambda ids: _remove_from_set(ids, quote_id))

    @staticmethod
    def delete_many_freet(db: Session, user_id: int) -> Optional[models.User]:
        user = UserCollection.find_one_by_user_id(db, user_id)
        if user is not None:
            user.freets = []
            db.commit()
            db.refresh(user)
        return user

    @staticmethod
    def delete_many_quote(db: Session, user_id: int) -> Optional[models.User]:
        user = UserCollection.find_one_by_user_id(db, user_id)
        if user is not None:
            user.quotes = []
            db.commit()
            db.refresh(user)
        return user

    @staticmethod
    def add_follow(db: Session, user_id: int, to_follow_id: int) -> Optional[models.User]:
        logger.debug("User %s follows %s", user_id, to_follow_id)
        return UserCollection._update_set(
            db, user_id, "following", lambda ids: _add_to_set(ids, to_follow_id))

    @staticmethod
    def delete_follow(db: Session, user_id: int, to_unfollow_id: int) -> Optional[models.User]:
        logger.debug("User %s unfollows %s", user_id, to_unfollow_id)
        return UserCollection._update_set(
            db, user_id, "following", lambda ids: _remove_from_set(ids, to_unfollow_id))
