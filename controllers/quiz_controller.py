# controllers/quiz_controller.py
from typing import Any, List, Optional

from pydantic import BaseModel, Field, TypeAdapter
from sqlalchemy import func

from db.database import SessionLocal
from models.question import Question

SAMPLE_SIZE = 20


class QuestionSchema(BaseModel):
    question: str = Field(..., min_length=1)
    options: Optional[List[Any]] = None
    answer: Any = None


QuestionBank = TypeAdapter(List[QuestionSchema])


def question_to_dict(q: Question) -> dict:
    # answer key included, clients receive it as-is
    return {
        "id": q.id,
        "question": q.question,
        "options": q.options,
        "answer": q.answer,
    }


def sample_questions(size: int = SAMPLE_SIZE) -> list:
    """Random subset of the bank, or the whole bank when it holds fewer than `size`."""
    session = SessionLocal()
    try:
        rows = session.query(Question).order_by(func.random()).limit(size).all()
        return [question_to_dict(q) for q in rows]
    finally:
        session.close()


def seed_questions(items: list) -> int:
    """
    Validate every item first, then insert them in one transaction.
    May raise pydantic.ValidationError, in which case nothing is written.
    """
    validated = QuestionBank.validate_python(items)

    session = SessionLocal()
    try:
        session.add_all(
            Question(question=v.question, options=v.options, answer=v.answer)
            for v in validated
        )
        session.commit()
        return len(validated)
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
