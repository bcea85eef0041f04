"""Category Routes: create, list, read by id-or-name, update by id."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.infrastructure.database import get_db
from catalog_api.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from catalog_api.schemas.envelope import Envelope, envelope
from catalog_api.services.category_repository import CategoryRepository

router = APIRouter(prefix="/categories", tags=["categories"])


def get_category_repository(
    db: AsyncSession = Depends(get_db),
) -> CategoryRepository:
    return CategoryRepository(db)


@router.post(
    "", response_model=Envelope[CategoryRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate,
    repo: CategoryRepository = Depends(get_category_repository),
):
    category = await repo.create(body.model_dump())
    return envelope(
        status.HTTP_201_CREATED, "Category created successfully",
        CategoryRead.model_validate(category),
    )


@router.get(
    "", response_model=Envelope[list[CategoryRead]],
    response_model_exclude_none=True,
)
async def list_categories(
    repo: CategoryRepository = Depends(get_category_repository),
):
    categories = await repo.find_all()
    return envelope(
        status.HTTP_200_OK, "Categories found successfully",
        [CategoryRead.model_validate(c) for c in categories],
    )


@router.get(
    "/{id_or_name}", response_model=Envelope[CategoryRead],
    response_model_exclude_none=True,
)
async def get_category(
    id_or_name: str,
    repo: CategoryRepository = Depends(get_category_repository),
):
    category = await repo.find_by_id_or_name(id_or_name)
    return envelope(
        status.HTTP_200_OK, "Category found successfully",
        CategoryRead.model_validate(category),
    )


@router.put(
    "/{category_id}", response_model=Envelope[CategoryRead],
    response_model_exclude_none=True,
)
async def update_category(
    category_id: str,
    body: CategoryUpdate,
    repo: CategoryRepository = Depends(get_category_repository),
):
    # every update field is written; omitted ones are cleared
    category = await repo.update_by_id(category_id, body.model_dump())
    return envelope(
        status.HTTP_200_OK, "Category updated successfully",
        CategoryRead.model_validate(category),
    )
