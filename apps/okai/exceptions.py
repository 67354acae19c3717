"""
Error taxonomy for the OKAIgpt stores.

Services raise these; ``main.py`` turns them into JSON error responses and the
Python client turns the responses back into the same classes.
"""
from typing import Dict, Type


class OkaiError(Exception):
    """Base class for every store error"""

    status_code: int = 500
    code: str = "okai_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(OkaiError):
    """The operation targets an id that does not exist"""

    status_code = 404
    code = "not_found"


class SessionNotFound(NotFound):
    """A message references a chat session that does not exist"""

    code = "session_not_found"


class DuplicateKey(OkaiError):
    """A chat session with the requested id already exists"""

    status_code = 409
    code = "duplicate_key"


class StoreFailure(OkaiError):
    """Any underlying persistence error"""

    status_code = 500
    code = "store_failure"


ERRORS_BY_CODE: Dict[str, Type[OkaiError]] = {
    cls.code: cls for cls in (NotFound, SessionNotFound, DuplicateKey, StoreFailure)
}


def error_from_code(code: str, message: str) -> OkaiError:
    """Rebuild an error from its wire code, falling back to StoreFailure"""
    return ERRORS_BY_CODE.get(code, StoreFailure)(message)
