from flask.views import MethodView
from flask_smorest import Blueprint
from marshmallow import EXCLUDE, Schema, fields, validate

from .. import services
from ..schemas import UserSchema
from ..store import get_store


class RegisterSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1))
    email = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, validate=validate.Length(min=1), load_only=True)


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, validate=validate.Length(min=1), load_only=True)


blp = Blueprint(
    "Auth",
    __name__,
    url_prefix="",
    description="Register users into their own workspace and log them in.",
)


@blp.route("/register")
class Register(MethodView):
    """Create a user together with the workspace it owns."""

    # PUBLIC_INTERFACE
    @blp.arguments(RegisterSchema, error_status_code=400)
    @blp.response(200, UserSchema)
    @blp.doc(
        summary="Register",
        description="Create a user and its workspace. Fails with 409 if the email is already registered.",
        tags=["Auth"],
    )
    def post(self, data):
        """Register a new user and create its workspace."""
        return services.register_user(get_store(), data["name"], data["email"], data["password"])


@blp.route("/login")
class Login(MethodView):
    """Authenticate an existing user."""

    # PUBLIC_INTERFACE
    @blp.arguments(LoginSchema, error_status_code=400)
    @blp.response(200, UserSchema)
    @blp.doc(summary="Login", description="Fails with 401 when the credentials do not match.", tags=["Auth"])
    def post(self, data):
        """Return the user matching the given credentials."""
        return services.login_user(get_store(), data["email"], data["password"])
