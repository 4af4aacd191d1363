"""Error types raised by services and their JSON rendering."""
from __future__ import annotations

import logging
from http import HTTPStatus

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class SplitbookError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SplitbookError):
    """Raised when required fields are missing or invalid."""

    status_code = 400


class ConflictError(SplitbookError):
    """Raised on a duplicate unique key or when a record is still referenced."""

    status_code = 409


class AuthError(SplitbookError):
    """Raised when login credentials do not match."""

    status_code = 401


def _error_body(status_code: int, message: str):
    # Same shape flask-smorest uses for abort() and argument parsing errors
    body = {
        "code": status_code,
        "status": HTTPStatus(status_code).phrase,
        "message": message,
    }
    response = jsonify(body)
    response.status_code = status_code
    return response


def handle_splitbook_error(exc: SplitbookError):
    return _error_body(exc.status_code, exc.message)


def handle_store_error(exc: SQLAlchemyError):
    from . import db

    logger.exception("Store failure while handling request")
    db.session.rollback()
    return _error_body(500, "Internal store error")


# PUBLIC_INTERFACE
def register_error_handlers(app) -> None:
    """Attach JSON error handlers for domain and store errors to the app."""
    app.register_error_handler(SplitbookError, handle_splitbook_error)
    app.register_error_handler(SQLAlchemyError, handle_store_error)
