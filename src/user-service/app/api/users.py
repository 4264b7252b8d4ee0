"""User API endpoints.

Every handler here is block-logged through the ``log`` marker. Annotations
stay unpostponed so FastAPI can resolve them through the wrapped handler.
"""

from fastapi import APIRouter, HTTPException, Query, status

from reqlog import log
from reqlog.observability import get_logger

from ..schemas import UserCreate, UserResponse
from ..store import UserNotFoundError, get_store

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
@log("create user")
async def create_user(payload: UserCreate) -> UserResponse:
    """Register a new user."""
    user = get_store().create(payload)
    logger.info("User created", user_id=user.id)
    return user


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    summary="Get a user",
)
@log("get user")
async def get_user(user_id: int) -> UserResponse:
    """Fetch a user by id."""
    try:
        return get_store().get(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List users",
)
@log("list users")
def list_users(limit: int = Query(default=50, ge=1, le=500)) -> list[UserResponse]:
    """List registered users. Runs in the threadpool."""
    return get_store().list_all()[:limit]
