from flask.views import MethodView
from flask_smorest import Blueprint
from marshmallow import EXCLUDE, Schema, fields, validate

from .. import services
from ..schemas import MemberCreatedSchema, MemberSchema
from ..store import get_store


class WorkspaceQuerySchema(Schema):
    workspace_id = fields.Integer(required=True)


class MemberCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1))
    workspace_id = fields.Integer(required=True)


blp = Blueprint(
    "Members",
    __name__,
    url_prefix="/members",
    description="Manage the members of a workspace.",
)


@blp.route("")
class MembersCollection(MethodView):
    """List and add members of a workspace."""

    # PUBLIC_INTERFACE
    @blp.arguments(WorkspaceQuerySchema, location="query", error_status_code=400)
    @blp.response(200, MemberSchema(many=True))
    @blp.doc(summary="List members", description="List all members of the given workspace.", tags=["Members"])
    def get(self, args):
        """Return all members for the workspace."""
        return get_store().list_members(args["workspace_id"])

    # PUBLIC_INTERFACE
    @blp.arguments(MemberCreateSchema, error_status_code=400)
    @blp.response(200, MemberCreatedSchema)
    @blp.doc(summary="Add member", description="Add a member to a workspace.", tags=["Members"])
    def post(self, data):
        """Create a member in the workspace."""
        return services.create_member(get_store(), data["name"], data["workspace_id"])


@blp.route("/<int:member_id>")
class MemberItem(MethodView):
    """Remove a specific member."""

    # PUBLIC_INTERFACE
    @blp.response(200)
    @blp.doc(
        summary="Remove member",
        description="Delete a member. Fails with 409 while any expense share references it.",
        tags=["Members"],
    )
    def delete(self, member_id: int):
        """Delete a member that no expense share references."""
        services.delete_member(get_store(), member_id)
        return {"ok": True}
