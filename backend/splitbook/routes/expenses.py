from flask.views import MethodView
from flask_smorest import Blueprint
from marshmallow import EXCLUDE, Schema, fields, validate

from .. import services
from ..schemas import ExpenseSchema
from ..store import get_store
from .members import WorkspaceQuerySchema


class ShareInputSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    member_id = fields.Integer(required=True)
    share_amount = fields.Float(required=True)


class ExpenseCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(min=1))
    amount = fields.Float(required=True)
    payer_member_id = fields.Integer(required=True)
    workspace_id = fields.Integer(required=True)
    shares = fields.List(fields.Nested(ShareInputSchema), required=True)


blp = Blueprint(
    "Expenses",
    __name__,
    url_prefix="/expenses",
    description="Manage expenses of a workspace together with their shares.",
)


@blp.route("")
class ExpensesCollection(MethodView):
    """List and create expenses of a workspace."""

    # PUBLIC_INTERFACE
    @blp.arguments(WorkspaceQuerySchema, location="query", error_status_code=400)
    @blp.response(200, ExpenseSchema(many=True))
    @blp.doc(summary="List expenses", description="List all expenses of the given workspace.", tags=["Expenses"])
    def get(self, args):
        """List expenses for a workspace."""
        return get_store().list_expenses(args["workspace_id"])

    # PUBLIC_INTERFACE
    @blp.arguments(ExpenseCreateSchema, error_status_code=400)
    @blp.response(200)
    @blp.doc(
        summary="Create expense",
        description="Create an expense and one share per entry of `shares`. Shares are stored as given.",
        tags=["Expenses"],
    )
    def post(self, data):
        """Create an expense with its shares."""
        services.create_expense(
            get_store(),
            data["title"].strip(),
            data["amount"],
            data["payer_member_id"],
            data["workspace_id"],
            data["shares"],
        )
        return {"ok": True}


@blp.route("/<int:expense_id>")
class ExpenseItem(MethodView):
    """Delete a single expense."""

    # PUBLIC_INTERFACE
    @blp.response(200)
    @blp.doc(summary="Delete expense", description="Delete an expense and its shares.", tags=["Expenses"])
    def delete(self, expense_id: int):
        """Delete an expense."""
        services.delete_expense(get_store(), expense_id)
        return {"ok": True}
