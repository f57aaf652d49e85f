"""Customers API namespace.

Routes delegate to the ``CustomerService`` built at startup and stored on
``app.extensions``. Controllers are kept thin
(parse → validate → call service → respond).
"""

import logging

from flask import current_app, request
from flask_restx import Namespace, Resource, fields
from pydantic import ValidationError as PydanticValidationError

from crm.domain.exceptions import AppError, StorageError, ValidationError
from crm.schemas.customer_schema import CustomerCreateSchema
from crm.schemas.response import error_response
from crm.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

ns = Namespace("customers", description="Customer records")

# ---------------------------------------------------------------------------
# Swagger models (for documentation only)
# ---------------------------------------------------------------------------
customer_input_model = ns.model("CustomerInput", {
    "name": fields.String(required=True),
    "email": fields.String(required=True),
    "password": fields.String(required=True),
})

customer_created_model = ns.model("CustomerCreated", {
    "id": fields.Integer,
    "name": fields.String,
    "email": fields.String,
})


def _service() -> CustomerService:
    return current_app.extensions["customer_service"]


def _parse_body() -> CustomerCreateSchema:
    """Decode the JSON body or raise a 400 ``ValidationError``."""
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        raise ValidationError("invalid request body")
    try:
        return CustomerCreateSchema.model_validate(payload)
    except PydanticValidationError as err:
        raise ValidationError(
            "invalid request body", details=err.errors(include_url=False),
        ) from err


def _app_error(err: AppError, public_message: str | None = None):
    """Render ``err``; storage failures use ``public_message`` when given."""
    if isinstance(err, StorageError):
        logger.error("Storage failure: %s", err.message)
        if public_message:
            return error_response(public_message, err.error_code, err.status_code)
    return error_response(
        err.message, err.error_code, err.status_code,
        details=getattr(err, "details", None),
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@ns.route("/customers")
class CustomerCreate(Resource):
    """Create a customer."""

    @ns.doc("create_customer")
    @ns.expect(customer_input_model)
    @ns.response(201, "Customer created", customer_created_model)
    def post(self):
        """Create a new customer."""
        try:
            data = _parse_body()
            created = _service().create_customer(data.name, data.email, data.password)
        except AppError as err:
            return _app_error(err, "could not create customer")
        return {"id": created["id"], "name": created["name"], "email": created["email"]}, 201


@ns.route("/customer")
class CustomerList(Resource):
    """List all customers."""

    @ns.doc("list_customers")
    def get(self):
        """Return every stored customer record, password included."""
        try:
            return _service().get_customers(), 200
        except AppError as err:
            if current_app.config.get("EXPOSE_ERROR_DETAILS"):
                logger.error("Storage failure: %s", err.message)
                return error_response(
                    f"failed to fetch customers: {err.message}", err.error_code, err.status_code,
                )
            return _app_error(err, "failed to fetch customers")


@ns.route("/customers/<int:customer_id>")
@ns.param("customer_id", "The customer ID")
class CustomerDetail(Resource):
    """Fetch or replace a customer by id."""

    @ns.doc("get_customer")
    def get(self, customer_id: int):
        """Fetch a customer by id."""
        try:
            return _service().get_customer_by_id(customer_id), 200
        except AppError as err:
            return _app_error(err, "could not fetch customer")

    @ns.doc("update_customer")
    @ns.expect(customer_input_model)
    def put(self, customer_id: int):
        """Replace a customer's name, email and password."""
        try:
            data = _parse_body()
            result = _service().update_customer(
                customer_id, data.name, data.email, data.password,
            )
        except AppError as err:
            return _app_error(err, "could not update customer")
        return result, 200


@ns.route("/customers/email/<string:email>")
@ns.param("email", "The customer email")
class CustomerByEmail(Resource):
    """Fetch or delete a customer by email."""

    @ns.doc("get_customer_by_email")
    def get(self, email: str):
        """Fetch a customer by email."""
        try:
            return _service().get_customer_by_email(email), 200
        except AppError as err:
            return _app_error(err, "could not fetch customer")

    @ns.doc("delete_customer_by_email")
    def delete(self, email: str):
        """Delete a customer by email."""
        try:
            _service().delete_customer_by_email(email)
        except AppError as err:
            return _app_error(err, "could not delete customer")
        return "", 204
