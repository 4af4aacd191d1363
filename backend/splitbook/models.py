from __future__ import annotations

from typing import Optional

from . import db


class Workspace(db.Model):
    """Container scoping all members and expenses of one registered user."""
    __tablename__ = "workspaces"
    # Allow legacy annotations without SQLAlchemy 2.0 Mapped[] wrappers
    __allow_unmapped__ = True

    id: int = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name: Optional[str] = db.Column(db.Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Workspace id={self.id} name={self.name!r}>"


class User(db.Model):
    """A registered account; owns exactly one workspace."""
    __tablename__ = "users"
    __allow_unmapped__ = True

    id: int = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name: Optional[str] = db.Column(db.Text, nullable=True)
    email: Optional[str] = db.Column(db.Text, unique=True, nullable=True)
    # Stored and compared as given
    password: Optional[str] = db.Column(db.Text, nullable=True)
    workspace_id: Optional[int] = db.Column(db.Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


class Member(db.Model):
    """A participant in a workspace who can pay for or owe part of an expense."""
    __tablename__ = "members"
    __allow_unmapped__ = True

    id: int = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name: Optional[str] = db.Column(db.Text, nullable=True)
    workspace_id: Optional[int] = db.Column(db.Integer, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Member id={self.id} name={self.name!r}>"


class Expense(db.Model):
    """A single outlay fronted by one member of a workspace."""
    __tablename__ = "expenses"
    __allow_unmapped__ = True

    id: int = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title: Optional[str] = db.Column(db.Text, nullable=True)
    amount: Optional[float] = db.Column(db.Float, nullable=True)
    payer_member_id: Optional[int] = db.Column(db.Integer, nullable=True)
    workspace_id: Optional[int] = db.Column(db.Integer, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Expense id={self.id} amount={self.amount} title={self.title!r}>"


class ExpenseShare(db.Model):
    """Part of an expense's amount allocated to one member."""
    __tablename__ = "expense_shares"
    __allow_unmapped__ = True

    # Surrogate key; shares are addressed through expense_id
    id: Optional[int] = db.Column(db.Integer, primary_key=True, autoincrement=True)
    expense_id: Optional[int] = db.Column(db.Integer, nullable=True, index=True)
    member_id: Optional[int] = db.Column(db.Integer, nullable=True, index=True)
    share_amount: Optional[float] = db.Column(db.Float, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<ExpenseShare expense_id={self.expense_id} member_id={self.member_id} "
            f"share_amount={self.share_amount}>"
        )
