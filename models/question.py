# models/question.py
from sqlalchemy import JSON, Column, Integer, Text

from models.base import Base

class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=True)
    # answer text or option index, stored as given
    answer = Column(JSON, nullable=True)
