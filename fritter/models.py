from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# References between records are plain id columns: nothing here enforces
# referential integrity, the collections in fritter.stores keep them in sync.

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), index=True, nullable=False)
    password = Column(String(100), nullable=False)
    date_joined = Column(DateTime, default=func.now(), nullable=False)

    # Id-sets stored as JSON lists; treat as unordered
    following = Column(JSON, default=list, nullable=False)
    freets = Column(JSON, default=list, nullable=False)
    quotes = Column(JSON, default=list, nullable=False)
    highlights = Column(JSON, default=list, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"

class Freet(Base):
    __tablename__ = "freets"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, index=True, nullable=False)
    content = Column(Text, nullable=False)
    date_created = Column(DateTime, nullable=False)
    date_modified = Column(DateTime, nullable=False)
    # Legacy flag, superseded by User.highlights
    highlight = Column(Boolean, default=False, nullable=False)

class Quote(Base):
    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, index=True, nullable=False)
    ref_id = Column(Integer, index=True, nullable=False)
    ref_author = Column(Integer, nullable=False)
    # Content of the quoted freet when the quote was made; never updated
    ref_content = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    date_created = Column(DateTime, nullable=False)
    date_modified = Column(DateTime, nullable=False)
    anon = Column(Boolean, default=False, nullable=False)

class Like(Base):
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True)
    liker = Column(Integer, index=True, nullable=False)
    liked = Column(Integer, index=True, nullable=False)
    post_type = Column(String(10), nullable=False)

class FritForm(Base):
    __tablename__ = "fritforms"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, index=True, nullable=False)
    fields = Column(JSON, default=list, nullable=False)
