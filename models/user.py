# models/user.py
from sqlalchemy import Column, Integer, String

from models.base import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(200), nullable=False, index=True)
    # looked up on signup only, uniqueness is not enforced here
    email = Column(String(255), nullable=False, index=True)

    # plaintext, compared as-is on login
    password = Column(String(255), nullable=False)
    confirm_password = Column("confirmPassword", String(255), nullable=False)
