from flask import current_app
from flask.views import MethodView
from flask_smorest import Blueprint

blp = Blueprint("Health", __name__, url_prefix="/health", description="Liveness check")


@blp.route("")
class HealthCheck(MethodView):
    """Report that the API is up and which store backs it."""

    # PUBLIC_INTERFACE
    @blp.response(200)
    @blp.doc(summary="Health check", tags=["Health"])
    def get(self):
        return {"message": "Healthy", "store": current_app.config["SPLITBOOK_STORE"]}
