"""ORM model for application users (auth and the two-role model)."""

from sqlalchemy import Column, Integer, String

from wastetrack.models.base import Base


class User(Base):
    """
    User account for JWT authentication.

    role: 'admin' or 'operator'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="operator")
    full_name = Column(String(255), nullable=False, default="")
