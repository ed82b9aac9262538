# models/user_details.py
from sqlalchemy import Boolean, Column, Integer, LargeBinary, String, Text

from models.base import Base

class UserDetails(Base):
    __tablename__ = "user_details"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=True, index=True)
    email = Column(String(255), nullable=True)
    cv = Column(LargeBinary, nullable=True)
    exp = Column(Text, nullable=True)

    approved = Column(Boolean, nullable=False, default=False)
