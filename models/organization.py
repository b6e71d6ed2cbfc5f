from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from models.base import Base, prefixed
from models.enums import SponsorshipLevel, enum_column_type
from models.event import event_sponsor

class Organization(Base):
    """Sponsors and other hosts of the hackathon."""
    __tablename__ = prefixed("sponsor")

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    desc = Column(String(511), nullable=True)
    href = Column(String(255), nullable=True)
    image = Column(String(255), nullable=True)
    level = Column(
        "sponsorshipLevel",
        enum_column_type(SponsorshipLevel, "sponsorshipLevel"),
        default=SponsorshipLevel.NOT_SPECIFIED,
        server_default=SponsorshipLevel.NOT_SPECIFIED.value,
        nullable=False,
    )

    events = relationship("Event", secondary=event_sponsor, back_populates="sponsors")
