import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models

logger = logging.getLogger(__name__)

POST_TYPES = ("Freet", "Quote")


class LikeCollection:
    """
    Likes of freets and quotes.

    Nothing here stops the same user liking the same post twice; callers
    check ``find_one_by_liked_post`` first.
    """

    @staticmethod
    def add_one(db: Session, user_id: int, post_id: int, post_type: str) -> models.Like:
        like = models.Like(liker=user_id, liked=post_id, post_type=post_type)
        db.add(like)
        db.commit()
        db.refresh(like)
        logger.info("User %s liked %s %s", user_id, post_type, post_id)
        return like

    @staticmethod
    def find_one_by_like_id(db: Session, like_id: int) -> Optional[models.Like]:
        return db.query(models.Like).filter(models.Like.id == like_id).first()

    @staticmethod
    def find_one_by_liked_post(db: Session, post_id: int, post_type: str,
                               user_id: int) -> Optional[models.Like]:
        return db.query(models.Like)\
            .filter(models.Like.liked == post_id,
                    models.Like.post_type == post_type,
                    models.Like.liker == user_id)\
            .first()

    @staticmethod
    def find_all_by_liker(db: Session, user_id: int) -> List[models.Like]:
        return db.query(models.Like).filter(models.Like.liker == user_id).all()

    @staticmethod
    def delete_one(db: Session, like_id: int) -> bool:
        deleted = db.query(models.Like).filter(models.Like.id == like_id).delete()
        db.commit()
        return deleted > 0
