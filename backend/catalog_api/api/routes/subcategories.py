"""Subcategory Routes: create, list, list by category, read by id-or-name, update by id.

Invariants:
    - /category/{category_id} is declared before /{id_or_name}
    - categoryId is stored as sent; no check that the category exists
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.infrastructure.database import get_db
from catalog_api.schemas.envelope import Envelope, envelope
from catalog_api.schemas.subcategory import (
    SubcategoryCreate, SubcategoryRead, SubcategoryUpdate,
)
from catalog_api.services.subcategory_repository import SubcategoryRepository

router = APIRouter(prefix="/subcategories", tags=["subcategories"])


def get_subcategory_repository(
    db: AsyncSession = Depends(get_db),
) -> SubcategoryRepository:
    return SubcategoryRepository(db)


@router.post(
    "", response_model=Envelope[SubcategoryRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_subcategory(
    body: SubcategoryCreate,
    repo: SubcategoryRepository = Depends(get_subcategory_repository),
):
    subcategory = await repo.create(body.model_dump())
    return envelope(
        status.HTTP_201_CREATED, "Subcategory created successfully",
        SubcategoryRead.model_validate(subcategory),
    )


@router.get(
    "", response_model=Envelope[list[SubcategoryRead]],
    response_model_exclude_none=True,
)
async def list_subcategories(
    repo: SubcategoryRepository = Depends(get_subcategory_repository),
):
    subcategories = await repo.find_all()
    return envelope(
        status.HTTP_200_OK, "Sub-categories found successfully",
        [SubcategoryRead.model_validate(s) for s in subcategories],
    )


@router.get(
    "/category/{category_id}", response_model=Envelope[list[SubcategoryRead]],
    response_model_exclude_none=True,
)
async def list_subcategories_by_category(
    category_id: str,
    repo: SubcategoryRepository = Depends(get_subcategory_repository),
):
    subcategories = await repo.find_by_category(category_id)
    return envelope(
        status.HTTP_200_OK, "Sub-categories found successfully",
        [SubcategoryRead.model_validate(s) for s in subcategories],
    )


@router.get(
    "/{id_or_name}", response_model=Envelope[SubcategoryRead],
    response_model_exclude_none=True,
)
async def get_subcategory(
    id_or_name: str,
    repo: SubcategoryRepository = Depends(get_subcategory_repository),
):
    subcategory = await repo.find_by_id_or_name(id_or_name)
    return envelope(
        status.HTTP_200_OK, "Subcategory found successfully",
        SubcategoryRead.model_validate(subcategory),
    )


@router.put(
    "/{subcategory_id}", response_model=Envelope[SubcategoryRead],
    response_model_exclude_none=True,
)
async def update_subcategory(
    subcategory_id: str,
    body: SubcategoryUpdate,
    repo: SubcategoryRepository = Depends(get_subcategory_repository),
):
    subcategory = await repo.update_by_id(subcategory_id, body.model_dump())
    return envelope(
        status.HTTP_200_OK, "Subcategory updated successfully",
        SubcategoryRead.model_validate(subcategory),
    )
