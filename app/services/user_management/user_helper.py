from fastapi import HTTPException, status
from pymongo.errors import DuplicateKeyError

from app.database.store import EntityStore
from app.models.user.user import User, UserFilters, UserOut, UserPage, UserUpdate
from app.services.auth.auth_utils import hash_password
from app.services.errors import NotFoundError, QueryValidationError
from app.services.query.fields import USER_FIELDS
from app.services.query.query_engine import execute_query, validate_query
from app.utils.logger_utils import logger

DUPLICATE_EMAIL_DETAIL = "User with this email already exists"


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _duplicate_email() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_EMAIL_DETAIL)


# ---------- USER CRUD OPERATIONS ----------
async def create_user_helper(store: EntityStore, payload: User) -> UserOut:
    email = _normalize_email(payload.email)
    logger.info(f"Attempting to create user with email: {email}")

    try:
        existing_user = await store.find_one("email", email)
        if existing_user:
            logger.warning(f"User with email {email} already exists")
            raise _duplicate_email()

        doc = payload.model_dump(mode="json")
        doc["email"] = email
        doc["password"] = hash_password(doc["password"])
        created = await store.create(doc)
        logger.info(f"User created successfully with ID: {created['_id']}")
        return UserOut(**created)

    except HTTPException:
        raise
    except DuplicateKeyError:
        # lost a race with a concurrent insert of the same email
        logger.warning(f"User with email {email} already exists (unique index)")
        raise _duplicate_email()
    except Exception as e:
        logger.error(f"Unexpected error creating user: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )


async def get_users_helper(store: EntityStore, filters: UserFilters) -> UserPage:
    """Filtered, sorted and paginated user listing. Password hashes never leave this layer."""
    try:
        validate_query(filters, USER_FIELDS)
        records = await store.list()
        result = execute_query(records, filters, USER_FIELDS)
        return UserPage(
            users=[UserOut(**doc) for doc in result.items],
            total=result.total,
            page=filters.page,
            limit=filters.limit,
        )
    except QueryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"get_users_helper error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )


async def get_user_helper(store: EntityStore, user_id: str) -> UserOut:
    try:
        doc = await store.get(user_id)
        if not doc:
            raise NotFoundError("User", user_id)
        return UserOut(**doc)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


async def update_user_helper(store: EntityStore, user_id: str, payload: UserUpdate) -> UserOut:
    """Update a user by ID."""
    try:
        existing_user = await store.get(user_id)
        if not existing_user:
            raise NotFoundError("User", user_id)

        update_data = payload.model_dump(mode="json", exclude_none=True)
        if "email" in update_data:
            update_data["email"] = _normalize_email(update_data["email"])
            if update_data["email"] != existing_user["email"]:
                email_exists = await store.find_one("email", update_data["email"])
                if email_exists:
                    raise _duplicate_email()

        if update_data.get("password"):
            update_data["password"] = hash_password(update_data["password"])

        updated_user = await store.update(user_id, update_data)
        if updated_user is None:
            raise NotFoundError("User", user_id)
        logger.info(f"User {user_id} updated fields={sorted(update_data)}")
        return UserOut(**updated_user)

    except HTTPException:
        raise
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateKeyError:
        logger.warning(f"Email update for user {user_id} hit the unique index")
        raise _duplicate_email()
    except Exception as e:
        logger.error(f"Error updating user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )


async def delete_user_helper(store: EntityStore, user_id: str) -> dict:
    """Delete a user by ID."""
    try:
        deleted = await store.delete(user_id)
        if not deleted:
            raise NotFoundError("User", user_id)
        logger.info(f"User {user_id} deleted successfully")
        return {"message": "User deleted successfully"}

    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting user: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )
