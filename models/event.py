from sqlalchemy import Column, Integer, String, Date, ForeignKey, Table
from sqlalchemy.orm import relationship
from models.base import Base, prefixed
from models.enums import EventType, enum_column_type

event_sponsor = Table(
    prefixed("event_sponsor"),
    Base.metadata,
    Column("eventId", Integer, ForeignKey(f"{prefixed('event')}.id", ondelete="CASCADE"), primary_key=True),
    Column("sponsorId", Integer, ForeignKey(f"{prefixed('sponsor')}.id", ondelete="CASCADE"), primary_key=True),
)

class Event(Base):
    """Events during the hackathon."""
    __tablename__ = prefixed("event")

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    desc = Column(String(511), nullable=False)
    href = Column(String(255), nullable=True)
    image = Column(String(255), nullable=True)
    hosts = Column(String(511), nullable=True)
    location = Column(String(255), nullable=True)
    start_date = Column("startDate", Date, nullable=False)
    end_date = Column("endDate", Date, nullable=False)
    event_type = Column(
        "eventType",
        enum_column_type(EventType, "eventType"),
        default=EventType.GENERAL,
        server_default=EventType.GENERAL.value,
        nullable=False,
    )

    sponsors = relationship("Organization", secondary=event_sponsor, back_populates="events")
    # Let the foreign key refuse deletes of events that have check-ins
    check_ins = relationship("CheckIn", back_populates="event", passive_deletes="all")
