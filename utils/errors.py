# utils/errors.py
"""Domain errors raised by controllers and mapped to responses by routes."""


class ConflictError(Exception):
    """A record with the same key already exists."""


class InvalidCredentials(Exception):
    """Username/password pair matched no principal."""


class RecordNotFound(Exception):
    def __init__(self, model, key):
        super().__init__(f"{model} {key!r} not found")
        self.model = model
        self.key = key
