from sqlalchemy import Column, String, Integer, Text, ForeignKey, Index, PrimaryKeyConstraint
from sqlalchemy.orm import relationship
from models.base import Base, prefixed

class Account(Base):
    """Link between a user and one identity at an auth provider."""
    __tablename__ = prefixed("account")

    user_id = Column("userId", String(255), ForeignKey(f"{prefixed('user')}.id"), nullable=False)
    type = Column(String(255), nullable=False)
    provider = Column(String(255), nullable=False)
    provider_account_id = Column("providerAccountId", String(255), nullable=False)
    refresh_token = Column(Text, nullable=True)
    access_token = Column(Text, nullable=True)
    expires_at = Column(Integer, nullable=True)
    token_type = Column(String(255), nullable=True)
    scope = Column(String(255), nullable=True)
    id_token = Column(Text, nullable=True)
    session_state = Column(String(255), nullable=True)

    user = relationship("User", back_populates="accounts")

    __table_args__ = (
        PrimaryKeyConstraint("provider", "providerAccountId"),
    )

Index("account_userId_idx", Account.user_id)
