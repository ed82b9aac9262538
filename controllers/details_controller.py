# controllers/details_controller.py
import base64
import json
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from db.database import SessionLocal
from models.user_details import UserDetails
from utils.errors import RecordNotFound


# ---- Pydantic models ----
class DetailsSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=1, max_length=255)
    exp: Optional[Union[str, int, float]] = None

    @field_validator("exp")
    @classmethod
    def exp_as_text(cls, value):
        # experience arrives either as free text or as a number of years
        if value is None:
            return None
        return str(value)


def parse_details(data_field: str) -> DetailsSchema:
    """Parse the JSON-encoded `data` form field of a details submission."""
    return DetailsSchema(**json.loads(data_field))


def details_to_dict(details: UserDetails) -> dict:
    cv = details.cv
    return {
        "id": details.id,
        "name": details.name,
        "email": details.email,
        "exp": details.exp,
        "cv": base64.b64encode(cv).decode("ascii") if cv is not None else None,
    }


# ---- DB helpers ----
def record_id(user_id) -> int:
    """Coerce a path id to a primary key; raises ValueError on malformed ids."""
    return int(user_id)


def save_details(validated: DetailsSchema, cv: bytes) -> int:
    session = SessionLocal()
    try:
        details = UserDetails(
            name=validated.name,
            email=validated.email,
            exp=validated.exp,
            cv=cv,
            approved=False,
        )
        session.add(details)
        session.commit()
        return details.id
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def approval_by_name(name: str) -> bool:
    session = SessionLocal()
    try:
        details = session.query(UserDetails).filter(UserDetails.name == name).first()
        return bool(details and details.approved)
    finally:
        session.close()


def approval_by_id(user_id) -> bool:
    session = SessionLocal()
    try:
        details = session.get(UserDetails, record_id(user_id))
        return bool(details and details.approved)
    finally:
        session.close()


def approve(user_id) -> int:
    """
    Set approved=True on the record. A miss updates nothing and creates nothing.
    Returns the number of rows matched.
    """
    session = SessionLocal()
    try:
        matched = (
            session.query(UserDetails)
            .filter(UserDetails.id == record_id(user_id))
            .update({UserDetails.approved: True}, synchronize_session=False)
        )
        session.commit()
        return matched
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def list_details() -> list:
    session = SessionLocal()
    try:
        rows = session.query(UserDetails).order_by(UserDetails.id).all()
        return [details_to_dict(d) for d in rows]
    finally:
        session.close()


def get_cv(user_id):
    """Return (filename, cv bytes) for a record, or raise RecordNotFound."""
    session = SessionLocal()
    try:
        details = session.get(UserDetails, record_id(user_id))
        if details is None:
            raise RecordNotFound("UserDetails", user_id)
        return f"{details.name}_CV.pdf", details.cv or b""
    finally:
        session.close()
