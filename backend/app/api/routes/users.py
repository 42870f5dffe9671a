"""User Profiles — reader profiles keyed by the auth provider UID.

Invariants:
    - POST creates a profile with role "reader"; an existing uid → 409,
      including when a concurrent insert wins the race to the primary key
    - PUT updates names only; firstName and lastName both required
    - Subscription fields are never writable here (webhook-owned)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Collection, UserRole
from app.core.documents import build_person_names, validate_person_names
from app.core.errors import ConflictError, ErrorContext
from app.infrastructure.database import get_db
from app.models.user_profile import UserProfile
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.document_store import get_or_404, prepare_fields

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


def _uid_conflict(uid: str) -> ConflictError:
    return ConflictError(
        "User profile already exists",
        context=ErrorContext(collection=Collection.USERS.value, document_id=uid),
    )


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    fields = prepare_fields(
        Collection.USERS, body.model_dump(),
        validate_person_names, build_person_names,
    )
    if await db.get(UserProfile, body.uid) is not None:
        raise _uid_conflict(body.uid)
    user = UserProfile(uid=body.uid, role=UserRole.READER.value, **fields)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise _uid_conflict(body.uid)
    await db.refresh(user)
    logger.info(
        "Created user profile",
        extra={"collection": Collection.USERS.value, "document_id": user.uid},
    )
    return user


@router.get("/{uid}", response_model=UserResponse)
async def get_user(uid: str, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, UserProfile, uid, "User")


@router.put("/{uid}", response_model=UserResponse)
async def update_user(
    uid: str, body: UserUpdate, db: AsyncSession = Depends(get_db),
):
    fields = prepare_fields(
        Collection.USERS, body.model_dump(),
        validate_person_names, build_person_names,
    )
    user = await get_or_404(db, UserProfile, uid, "User")
    for key, value in fields.items():
        setattr(user, key, value)
    await db.commit()
    await db.refresh(user)
    return user
