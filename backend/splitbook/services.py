"""Application operations over the store, with the integrity checks the store does not enforce."""
from __future__ import annotations

import logging
from typing import Iterable, Mapping

from sqlalchemy.exc import IntegrityError

from .errors import AuthError, ConflictError, ValidationError
from .models import Expense, Member, User
from .store import Store

logger = logging.getLogger(__name__)


def register_user(store: Store, name: str, email: str, password: str) -> User:
    if store.find_user_by_email(email) is not None:
        raise ConflictError("User already exists")

    try:
        workspace = store.add_workspace(f"{name}'s workspace")
        user = store.add_user(name, email, password, workspace.id)
        store.commit()
    except IntegrityError as exc:
        # Lost a race with another registration for the same email
        store.rollback()
        raise ConflictError("User already exists") from exc
    logger.info("Registered user %s with workspace %s", user.id, workspace.id)
    return user


def login_user(store: Store, email: str, password: str) -> User:
    user = store.find_user_by_credentials(email, password)
    if user is None:
        logger.info("Rejected login for %s", email)
        raise AuthError("Invalid login")
    return user


def create_member(store: Store, name: str, workspace_id: int) -> Member:
    member = store.add_member(name, workspace_id)
    store.commit()
    logger.info("Created member %s in workspace %s", member.id, workspace_id)
    return member


def delete_member(store: Store, member_id: int) -> None:
    """Delete a member unless an expense share still references it."""
    if store.member_in_use(member_id):
        raise ConflictError("Member is used in expenses. Cannot delete.")
    store.delete_member(member_id)
    store.commit()
    logger.info("Deleted member %s", member_id)


def create_expense(
    store: Store,
    title: str,
    amount: float,
    payer_member_id: int,
    workspace_id: int,
    shares: Iterable[Mapping],
) -> Expense:
    """Insert an expense and its shares as one unit of work."""
    try:
        expense = store.add_expense(title, amount, payer_member_id, workspace_id)
        for share in shares:
            if not isinstance(share, Mapping) or "member_id" not in share or "share_amount" not in share:
                raise ValidationError("Each share needs member_id and share_amount")
            store.add_share(expense.id, share["member_id"], share["share_amount"])
        store.commit()
    except Exception:
        store.rollback()
        raise
    logger.info("Created expense %s in workspace %s", expense.id, workspace_id)
    return expense


def delete_expense(store: Store, expense_id: int) -> None:
    """Delete an expense together with its shares."""
    try:
        store.delete_shares_for_expense(expense_id)
        store.delete_expense(expense_id)
        store.commit()
    except Exception:
        store.rollback()
        raise
    logger.info("Deleted expense %s", expense_id)
