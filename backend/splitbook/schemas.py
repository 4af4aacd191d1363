from marshmallow import fields
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from . import db
from .models import Expense, Member, User


class UserSchema(SQLAlchemyAutoSchema):
    """Public view of a User; the password is never dumped."""

    class Meta:
        model = User
        sqla_session = db.session
        load_instance = True
        include_fk = True
        include_relationships = False
        exclude = ("email", "password")

    id = fields.Int(dump_only=True)


class MemberSchema(SQLAlchemyAutoSchema):
    """Schema for serializing Member instances."""

    class Meta:
        model = Member
        sqla_session = db.session
        load_instance = True
        include_fk = True
        include_relationships = False

    id = fields.Int(dump_only=True)


class MemberCreatedSchema(MemberSchema):
    """Body returned after creating a member."""

    class Meta(MemberSchema.Meta):
        exclude = ("workspace_id",)


class ExpenseSchema(SQLAlchemyAutoSchema):
    """Schema for serializing Expense instances."""

    class Meta:
        model = Expense
        sqla_session = db.session
        load_instance = True
        include_fk = True
        include_relationships = False

    id = fields.Int(dump_only=True)
    amount = fields.Float()
