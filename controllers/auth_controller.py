# controllers/auth_controller.py
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from db.database import SessionLocal
from models.user import User
from utils.errors import ConflictError, InvalidCredentials


# ---- Pydantic models ----
class SignupSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)
    confirm_password: str = Field(..., alias="confirmPassword", min_length=1, max_length=255)


# Built-in accounts, checked in order before any stored user.
# NOTE: plaintext literals, not fit for production use.
SPECIAL_PRINCIPALS = (
    {"username": "admin", "password": "admin1234", "user_type": "admin"},
    {"username": "researcher", "password": "researcher", "user_type": "researcher"},
    {"username": "researcher1", "password": "researcher1", "user_type": "researcher1"},
    {"username": "researcher2", "password": "researcher2", "user_type": "researcher2"},
)


def password_mismatch_errors(payload: dict) -> Optional[Dict[str, str]]:
    if payload.get("password") != payload.get("confirmPassword"):
        return {"confirmPassword": "Passwords do not match."}
    return None


def validation_error_map(exc) -> Dict[str, str]:
    """Flatten a pydantic ValidationError into {field: message}."""
    errors = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "__root__"
        errors.setdefault(field, err["msg"])
    return errors


# ---- DB helpers ----
def find_user_by_email(session, email: str):
    return session.query(User).filter(User.email == email).first()


def save_user(validated: SignupSchema):
    """
    Persist a new user. Raises ConflictError if the email is taken.
    The lookup and insert are separate statements, so concurrent signups can race.
    """
    session = SessionLocal()
    try:
        if find_user_by_email(session, validated.email):
            raise ConflictError("Email is already registered")

        user = User(
            username=validated.username,
            email=validated.email,
            password=validated.password,
            confirm_password=validated.confirm_password,
        )
        session.add(user)
        session.commit()
        return user.id
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


# ---- Main controller ----
def process_signup(payload: dict):
    """
    Validates payload and stores the user verbatim.
    May raise pydantic.ValidationError or ConflictError.
    """
    validated = SignupSchema(**payload)
    return save_user(validated)


def match_special_principal(username, password) -> Optional[str]:
    for principal in SPECIAL_PRINCIPALS:
        if username == principal["username"] and password == principal["password"]:
            return principal["user_type"]
    return None


def process_login(username, password) -> dict:
    """
    Resolve credentials: special principals first, then stored users.
    Raises InvalidCredentials when nothing matches.
    """
    user_type = match_special_principal(username, password)
    if user_type is not None:
        return {"userType": user_type}

    session = SessionLocal()
    try:
        user = session.query(User).filter(User.username == username).first()
        if user and user.password == password:
            return {"userType": "user", "userId": user.id, "userName": user.username}
    finally:
        session.close()

    raise InvalidCredentials("Invalid username or password.")
