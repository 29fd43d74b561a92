"""
Fills the database with demo users and freets.

Usage:
    python -m fritter.seed --users 20 --freets 5
"""
import argparse
import logging
import random
import re
from typing import List, Optional

from faker import Faker
from sqlalchemy.orm import Session

from . import models, database
from .stores import FreetCollection, UserCollection

logger = logging.getLogger(__name__)

def seed_demo_data(db: Session, num_users: int = 10, freets_per_user: int = 5,
                   seed: Optional[int] = None) -> List[models.User]:
    """
    Creates ``num_users`` users with ``freets_per_user`` freets each.

    Everything goes through the collections, so each user's freets set lists
    the freets created for them. Passwords are the usernames.
    """
    fake = Faker()
    if seed is not None:
        Faker.seed(seed)
        random.seed(seed)

    users = []
    for i in range(num_users):
        username = re.sub(r"\W", "_", f"user_{i}_{fake.user_name()}")
        user = UserCollection.add_one(db, username, username)
        for _ in range(freets_per_user):
            FreetCollection.add_one(db, user.id, fake.text(max_nb_chars=140))
        users.append(user)

    # Follow a few of the other demo users
    for user in users:
        others = [other for other in users if other.id != user.id]
        for other in random.sample(others, k=min(3, len(others))):
            UserCollection.add_follow(db, user.id, other.id)

    logger.info("Seeded %d users with %d freets each", num_users, freets_per_user)
    return [UserCollection.find_one_by_user_id(db, user.id) for user in users]

def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed the Fritter database with demo data")
    parser.add_argument("--users", type=int, default=10, help="number of users to create")
    parser.add_argument("--freets", type=int, default=5, help="freets per user")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    models.Base.metadata.create_all(bind=database.engine)
    db = database.SessionLocal()
    try:
        seed_demo_data(db, args.users, args.freets, args.seed)
    finally:
        db.close()

if __name__ == "__main__":
    main()
