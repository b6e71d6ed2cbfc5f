from sqlalchemy import Column, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from models.base import Base, prefixed

class Session(Base):
    __tablename__ = prefixed("session")

    session_token = Column("sessionToken", String(255), primary_key=True)
    user_id = Column("userId", String(255), ForeignKey(f"{prefixed('user')}.id"), nullable=False)
    expires = Column(DateTime(timezone=True), nullable=False)

    user = relationship("User", back_populates="sessions")

Index("session_userId_idx", Session.user_id)
