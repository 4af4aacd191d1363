"""Persistence collaborators consumed by the services and the settlement engine.

Reads return empty lists when nothing matches, deletes of unknown ids are
no-ops, and no cross-entity referential integrity is enforced here. Callers
group writes into one unit of work and finish it with ``commit()`` or
``rollback()``.
"""
from __future__ import annotations

import itertools
from typing import Dict, List, Optional

from flask import current_app

from .models import Expense, ExpenseShare, Member, User, Workspace


class Store:
    """Interface of the persistence layer."""

    def list_members(self, workspace_id: int) -> List[Member]:
        raise NotImplementedError

    def list_expenses(self, workspace_id: int) -> List[Expense]:
        raise NotImplementedError

    def list_shares_for_expense(self, expense_id: int) -> List[ExpenseShare]:
        raise NotImplementedError

    def list_users(self) -> List[User]:
        raise NotImplementedError

    def find_user_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def find_user_by_credentials(self, email: str, password: str) -> Optional[User]:
        raise NotImplementedError

    def add_workspace(self, name: str) -> Workspace:
        raise NotImplementedError

    def add_user(self, name: str, email: str, password: str, workspace_id: int) -> User:
        raise NotImplementedError

    def add_member(self, name: str, workspace_id: int) -> Member:
        raise NotImplementedError

    def add_expense(self, title: str, amount: float, payer_member_id: int, workspace_id: int) -> Expense:
        raise NotImplementedError

    def add_share(self, expense_id: int, member_id: int, share_amount: float) -> ExpenseShare:
        raise NotImplementedError

    def member_in_use(self, member_id: int) -> bool:
        raise NotImplementedError

    def delete_member(self, member_id: int) -> None:
        raise NotImplementedError

    def delete_expense(self, expense_id: int) -> None:
        raise NotImplementedError

    def delete_shares_for_expense(self, expense_id: int) -> None:
        raise NotImplementedError

    def commit(self) -> None:
        raise NotImplementedError

    def rollback(self) -> None:
        raise NotImplementedError


class SQLAlchemyStore(Store):
    """Store backed by the Flask-SQLAlchemy scoped session."""

    def __init__(self, db) -> None:
        self.db = db

    @property
    def session(self):
        return self.db.session

    def _add(self, obj):
        self.session.add(obj)
        self.session.flush()  # to get obj.id
        return obj

    def list_members(self, workspace_id: int) -> List[Member]:
        return Member.query.filter_by(workspace_id=workspace_id).order_by(Member.id).all()

    def list_expenses(self, workspace_id: int) -> List[Expense]:
        return Expense.query.filter_by(workspace_id=workspace_id).order_by(Expense.id).all()

    def list_shares_for_expense(self, expense_id: int) -> List[ExpenseShare]:
        return ExpenseShare.query.filter_by(expense_id=expense_id).order_by(ExpenseShare.id).all()

    def list_users(self) -> List[User]:
        return User.query.order_by(User.id).all()

    def find_user_by_email(self, email: str) -> Optional[User]:
        return User.query.filter_by(email=email).first()

    def find_user_by_credentials(self, email: str, password: str) -> Optional[User]:
        return User.query.filter_by(email=email, password=password).first()

    def add_workspace(self, name: str) -> Workspace:
        return self._add(Workspace(name=name))

    def add_user(self, name: str, email: str, password: str, workspace_id: int) -> User:
        return self._add(User(name=name, email=email, password=password, workspace_id=workspace_id))

    def add_member(self, name: str, workspace_id: int) -> Member:
        return self._add(Member(name=name, workspace_id=workspace_id))

    def add_expense(self, title: str, amount: float, payer_member_id: int, workspace_id: int) -> Expense:
        return self._add(
            Expense(
                title=title,
                amount=amount,
                payer_member_id=payer_member_id,
                workspace_id=workspace_id,
            )
        )

    def add_share(self, expense_id: int, member_id: int, share_amount: float) -> ExpenseShare:
        return self._add(ExpenseShare(expense_id=expense_id, member_id=member_id, share_amount=share_amount))

    def member_in_use(self, member_id: int) -> bool:
        return ExpenseShare.query.filter_by(member_id=member_id).first() is not None

    def delete_member(self, member_id: int) -> None:
        Member.query.filter_by(id=member_id).delete(synchronize_session=False)

    def delete_expense(self, expense_id: int) -> None:
        Expense.query.filter_by(id=expense_id).delete(synchronize_session=False)

    def delete_shares_for_expense(self, expense_id: int) -> None:
        ExpenseShare.query.filter_by(expense_id=expense_id).delete(synchronize_session=False)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class MemoryStore(Store):
    """In-process store holding transient model instances.

    Records are never mutated after insertion, so ``rollback()`` restores the
    lists captured at the last ``commit()``. Not safe for concurrent use.
    """

    _TABLES = ("workspaces", "users", "members", "expenses", "shares")

    def __init__(self) -> None:
        self._ids: Dict[str, itertools.count] = {name: itertools.count(1) for name in self._TABLES}
        self._rows: Dict[str, list] = {name: [] for name in self._TABLES}
        self._committed: Dict[str, list] = {name: [] for name in self._TABLES}

    def _insert(self, table: str, obj):
        obj.id = next(self._ids[table])
        self._rows[table].append(obj)
        return obj

    def _remove(self, table: str, predicate) -> None:
        self._rows[table] = [row for row in self._rows[table] if not predicate(row)]

    def list_members(self, workspace_id: int) -> List[Member]:
        return [m for m in self._rows["members"] if m.workspace_id == workspace_id]

    def list_expenses(self, workspace_id: int) -> List[Expense]:
        return [e for e in self._rows["expenses"] if e.workspace_id == workspace_id]

    def list_shares_for_expense(self, expense_id: int) -> List[ExpenseShare]:
        return [s for s in self._rows["shares"] if s.expense_id == expense_id]

    def list_users(self) -> List[User]:
        return list(self._rows["users"])

    def find_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._rows["users"] if u.email == email), None)

    def find_user_by_credentials(self, email: str, password: str) -> Optional[User]:
        return next(
            (u for u in self._rows["users"] if u.email == email and u.password == password),
            None,
        )

    def add_workspace(self, name: str) -> Workspace:
        return self._insert("workspaces", Workspace(name=name))

    def add_user(self, name: str, email: str, password: str, workspace_id: int) -> User:
        return self._insert(
            "users",
            User(name=name, email=email, password=password, workspace_id=workspace_id),
        )

    def add_member(self, name: str, workspace_id: int) -> Member:
        return self._insert("members", Member(name=name, workspace_id=workspace_id))

    def add_expense(self, title: str, amount: float, payer_member_id: int, workspace_id: int) -> Expense:
        return self._insert(
            "expenses",
            Expense(
                title=title,
                amount=amount,
                payer_member_id=payer_member_id,
                workspace_id=workspace_id,
            ),
        )

    def add_share(self, expense_id: int, member_id: int, share_amount: float) -> ExpenseShare:
        return self._insert(
            "shares",
            ExpenseShare(expense_id=expense_id, member_id=member_id, share_amount=share_amount),
        )

    def member_in_use(self, member_id: int) -> bool:
        return any(s.member_id == member_id for s in self._rows["shares"])

    def delete_member(self, member_id: int) -> None:
        self._remove("members", lambda m: m.id == member_id)

    def delete_expense(self, expense_id: int) -> None:
        self._remove("expenses", lambda e: e.id == expense_id)

    def delete_shares_for_expense(self, expense_id: int) -> None:
        self._remove("shares", lambda s: s.expense_id == expense_id)

    def commit(self) -> None:
        self._committed = {name: list(rows) for name, rows in self._rows.items()}

    def rollback(self) -> None:
        self._rows = {name: list(rows) for name, rows in self._committed.items()}


# PUBLIC_INTERFACE
def build_store(kind: str, db) -> Store:
    """Create the store selected by the SPLITBOOK_STORE setting."""
    if kind == "sqlalchemy":
        return SQLAlchemyStore(db)
    if kind == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown store backend: {kind!r}")


# PUBLIC_INTERFACE
def get_store() -> Store:
    """Return the store attached to the current application."""
    return current_app.extensions["splitbook_store"]
