from flask.views import MethodView
from flask_smorest import Blueprint

from ..settlement import settle_workspace
from ..store import get_store
from .members import WorkspaceQuerySchema


blp = Blueprint(
    "Settlement",
    __name__,
    url_prefix="/settle",
    description="Compute net balances within a workspace.",
)


@blp.route("")
class WorkspaceSettlement(MethodView):
    """Net balance per member of a workspace."""

    # PUBLIC_INTERFACE
    @blp.arguments(WorkspaceQuerySchema, location="query", error_status_code=400)
    @blp.response(200)
    @blp.doc(
        summary="Get net balances",
        description="Map every member id of the workspace to its net balance. Positive balance means the member is owed money; negative means they owe money.",
        tags=["Settlement"],
    )
    def get(self, args):
        """Return balances per member for the workspace."""
        return settle_workspace(get_store(), args["workspace_id"])
