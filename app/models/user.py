from datetime import datetime

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from app.database import Base


class User(Base):
    __tablename__ = "users"

    # Identity provider's user id
    id = Column(String, primary_key=True, index=True)

    username = Column(String, unique=True, index=True, nullable=False)

    name = Column(String, nullable=True)
    surname = Column(String, nullable=True)

    avatar = Column(String, nullable=True)
    cover = Column(String, nullable=True)

    # -------------------------------------------------------
    # INFO CARD
    # -------------------------------------------------------
    description = Column(String, nullable=True)
    city = Column(String, nullable=True)
    school = Column(String, nullable=True)
    work = Column(String, nullable=True)
    website = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # -------------------------------------------------------
    # RELATIONSHIPS
    # -------------------------------------------------------
    posts = relationship(
        "Post",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    # Rows where someone follows this user
    followers = relationship(
        "Follower",
        foreign_keys="Follower.following_id",
        back_populates="following",
        cascade="all, delete-orphan",
    )

    # Rows where this user follows someone
    followings = relationship(
        "Follower",
        foreign_keys="Follower.follower_id",
        back_populates="follower",
        cascade="all, delete-orphan",
    )
