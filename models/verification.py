from sqlalchemy import Column, String, DateTime, PrimaryKeyConstraint
from models.base import Base, prefixed

class VerificationToken(Base):
    __tablename__ = prefixed("verificationToken")

    identifier = Column(String(255), nullable=False)
    token = Column(String(255), nullable=False)
    expires = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("identifier", "token"),
    )
