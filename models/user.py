import uuid
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from models.base import Base, prefixed
from models.enums import UserRole, UserGroup, enum_column_type

class User(Base):
    __tablename__ = prefixed("user")

    id = Column(String(255), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False)
    email_verified = Column("emailVerified", DateTime(timezone=True), nullable=True)
    image = Column(String(255), nullable=True)
    # Answers shaped like registration.shape.StatefulRegistration
    registration = Column(JSON, nullable=True)
    registration_time = Column(
        "registrationTime",
        DateTime(timezone=True),
        server_default=func.now(),
        default=func.now(),
        nullable=False,
    )
    role = Column(
        enum_column_type(UserRole, "userRole"),
        default=UserRole.NONE,
        server_default=UserRole.NONE.value,
        nullable=False,
    )
    group = Column(
        enum_column_type(UserGroup, "userGroup"),
        default=UserGroup.NONE,
        server_default=UserGroup.NONE.value,
        nullable=False,
    )

    accounts = relationship("Account", back_populates="user")
    sessions = relationship("Session", back_populates="user")
    check_ins = relationship("CheckIn", back_populates="user", passive_deletes="all")
