"""
API routes - User creation and lookup endpoints.

This module defines the HTTP endpoints:
- POST /users - Register a user, joining or founding a company
- GET /users/{user_id} - Fetch a user by id
- GET /users?email= - Fetch a user by email (takes priority)
- GET /users?company= - List a company's users, passwords blanked

Route handlers are plain functions so FastAPI runs the blocking store
and company service calls in its threadpool.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service, get_user_query_service
from src.api.models import (
    CreateUserRequest,
    ErrorEnvelope,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
)
from src.domain.exceptions import (
    CompanyProvisioningFailed,
    InvalidCompanyReference,
    InvalidIdentifier,
    MissingRequiredFields,
    PersistenceError,
    UserAlreadyExists,
    UserNotFound,
)
from src.domain.identifiers import decode_company_reference
from src.domain.queries import UserQueryService
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

_ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope, "description": "Invalid request"},
    500: {"model": ErrorEnvelope, "description": "Company service or database failure"},
}


def _error(status_code: int, message: str, detail: str | None = None) -> JSONResponse:
    """Build an error envelope response."""
    envelope = ErrorEnvelope(
        status=status_code,
        message=message,
        data={"data": detail} if detail is not None else None,
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer unparseable requests with the 400 validation envelope instead of 422."""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.error(f"Error binding request to {request.url.path}: {detail}")
    return _error(status.HTTP_400_BAD_REQUEST, "validation error", detail)


def _user_envelope(user: UserResponse, status_code: int = status.HTTP_200_OK) -> UserEnvelope:
    return UserEnvelope(status=status_code, message="success", data={"user": user})


@router.post(
    "/users",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Create a user",
    description="Register a user. With invitation=false a new company named "
    "`company` is created first; with invitation=true `company` must be an "
    "existing company id.",
)
def create_user(
    request_data: CreateUserRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> UserEnvelope | JSONResponse:
    """
    Create a user.

    - **name**, **email**, **password**, **role**, **company**: required
    - **invitation**: join an existing company instead of creating one
    """
    try:
        user = service.register(request_data.to_domain())
    except MissingRequiredFields as e:
        logger.error(f"Error validating request: {e}")
        return _error(status.HTTP_400_BAD_REQUEST, "validation error", str(e))
    except UserAlreadyExists as e:
        logger.error(str(e))
        return _error(status.HTTP_400_BAD_REQUEST, str(e), str(e))
    except CompanyProvisioningFailed as e:
        logger.error(f"Error creating company: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "company error", str(e))
    except InvalidCompanyReference as e:
        logger.error(f"Error converting company ID: {e}")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "error on companyId as an object", str(e)
        )
    except PersistenceError as e:
        logger.error(f"Error storing a user on database: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "error creating a user", str(e))

    logger.info(f"User created successfully: {user.id}")
    return _user_envelope(UserResponse.from_record(user), status.HTTP_201_CREATED)


@router.get(
    "/users/{user_id}",
    response_model=UserEnvelope,
    responses={500: _ERROR_RESPONSES[500]},
    summary="Get a user by id",
)
def find_user_by_id(
    user_id: str,
    queries: UserQueryService = Depends(get_user_query_service),
) -> UserEnvelope | JSONResponse:
    """Fetch a single user. Unknown ids answer 500 like other lookup failures."""
    try:
        user = queries.find_by_id(user_id)
    except (UserNotFound, PersistenceError) as e:
        logger.error(f"Error getting user {user_id} from database: {e}")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Error getting a user from database", str(e)
        )

    logger.info(f"User {user_id} retrieved successfully")
    return _user_envelope(UserResponse.from_record(user))


@router.get(
    "/users",
    response_model=UserEnvelope | UserListEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Find users by email or company",
    description="`email` takes priority over `company` when both are given.",
)
def find_users(
    email: str | None = None,
    company: str | None = None,
    queries: UserQueryService = Depends(get_user_query_service),
) -> UserEnvelope | UserListEnvelope | JSONResponse:
    """Look up one user by email, or list the users of a company."""
    if email:
        logger.info(f"Looking for user: {email}")
        try:
            user = queries.find_by_email(email)
        except (UserNotFound, PersistenceError) as e:
            logger.error(f"Error getting user {email} from database: {e}")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Error getting a user from database",
                str(e),
            )
        return _user_envelope(UserResponse.from_record(user))

    if not company or company == "undefined":
        logger.error("company query parameter is missing")
        return _error(status.HTTP_400_BAD_REQUEST, "company query parameter is missing")

    try:
        company_ref = decode_company_reference(company)
    except InvalidIdentifier:
        logger.error(f"company query parameter is invalid: {company!r}")
        return _error(status.HTTP_400_BAD_REQUEST, "company query parameter is invalid")

    try:
        users = queries.find_by_company(company_ref)
    except PersistenceError as e:
        logger.error(f"There was a problem trying to find users on database: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to fetch users")

    logger.info(f"Retrieved {len(users)} user(s) for company {company_ref}")
    return UserListEnvelope(
        status=status.HTTP_200_OK,
        message="success",
        data={"users": [UserResponse.from_record(user) for user in users]},
    )
