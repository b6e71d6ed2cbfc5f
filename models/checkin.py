from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from models.base import Base, prefixed

class CheckIn(Base):
    """Attendance of a user at one event. Append-only; repeat check-ins are kept."""
    __tablename__ = prefixed("checkin")

    id = Column(Integer, primary_key=True, autoincrement=True)
    time = Column(DateTime(timezone=True), server_default=func.now(), default=func.now())
    user_id = Column("userId", String(255), ForeignKey(f"{prefixed('user')}.id"), nullable=False)
    event_id = Column("eventId", Integer, ForeignKey(f"{prefixed('event')}.id"), nullable=False)

    user = relationship("User", back_populates="check_ins")
    event = relationship("Event", back_populates="check_ins")

Index("checkin_eventId_idx", CheckIn.event_id)
Index("checkin_userId_idx", CheckIn.user_id)
