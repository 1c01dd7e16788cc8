from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    CheckConstraint,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.database import Base


class Follower(Base):
    __tablename__ = "followers"

    id = Column(Integer, primary_key=True, index=True)

    # follower_id follows following_id
    follower_id = Column(
        String,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    following_id = Column(
        String,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    follower = relationship(
        "User",
        foreign_keys=[follower_id],
        back_populates="followings",
    )
    following = relationship(
        "User",
        foreign_keys=[following_id],
        back_populates="followers",
    )

    __table_args__ = (
        CheckConstraint(
            "follower_id != following_id",
            name="ck_followers_not_self",
        ),
        UniqueConstraint(
            "follower_id",
            "following_id",
            name="uq_followers_pair",
        ),
    )
