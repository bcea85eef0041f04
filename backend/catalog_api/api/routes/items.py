"""Item Routes: CRUD, listing by owner, name search and parent resolution.

Invariants:
    - Static segments (/search, /category/..., /subcategory/...) are declared
      before /{id_or_name}
    - GET /search returns a bare JSON array (kept for existing clients);
      every other route returns the envelope
    - totalAmount in responses is always server-computed
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.domain_types import ModelRef, OnModel
from catalog_api.infrastructure.database import get_db
from catalog_api.schemas.category import CategoryRead
from catalog_api.schemas.envelope import Envelope, envelope
from catalog_api.schemas.item import ItemCreate, ItemParentRead, ItemRead, ItemUpdate
from catalog_api.schemas.subcategory import SubcategoryRead
from catalog_api.services.item_repository import ItemRepository
from catalog_api.services.reference_resolver import ReferenceResolver

router = APIRouter(prefix="/items", tags=["items"])


def get_item_repository(db: AsyncSession = Depends(get_db)) -> ItemRepository:
    return ItemRepository(db)


def get_reference_resolver(
    db: AsyncSession = Depends(get_db),
) -> ReferenceResolver:
    return ReferenceResolver(db)


def _items_envelope(items) -> dict:
    return envelope(
        status.HTTP_200_OK, "Items found successfully",
        [ItemRead.model_validate(i) for i in items],
    )


@router.post(
    "", response_model=Envelope[ItemRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(
    body: ItemCreate,
    repo: ItemRepository = Depends(get_item_repository),
):
    item = await repo.create(body.model_dump())
    return envelope(
        status.HTTP_201_CREATED, "Item created successfully",
        ItemRead.model_validate(item),
    )


@router.get(
    "", response_model=Envelope[list[ItemRead]],
    response_model_exclude_none=True,
)
async def list_items(repo: ItemRepository = Depends(get_item_repository)):
    return _items_envelope(await repo.find_all())


@router.get(
    "/search", response_model=list[ItemRead],
    response_model_exclude_none=True,
)
async def search_items(
    name: str = Query(""),
    repo: ItemRepository = Depends(get_item_repository),
):
    items = await repo.search_by_name(name)
    return [ItemRead.model_validate(i) for i in items]


@router.get(
    "/category/{category_id}", response_model=Envelope[list[ItemRead]],
    response_model_exclude_none=True,
)
async def list_items_by_category(
    category_id: str,
    repo: ItemRepository = Depends(get_item_repository),
):
    return _items_envelope(await repo.find_by_ref(ModelRef.category(category_id)))


@router.get(
    "/subcategory/{subcategory_id}", response_model=Envelope[list[ItemRead]],
    response_model_exclude_none=True,
)
async def list_items_by_subcategory(
    subcategory_id: str,
    repo: ItemRepository = Depends(get_item_repository),
):
    return _items_envelope(
        await repo.find_by_ref(ModelRef.subcategory(subcategory_id)),
    )


@router.get(
    "/{id_or_name}", response_model=Envelope[ItemRead],
    response_model_exclude_none=True,
)
async def get_item(
    id_or_name: str,
    repo: ItemRepository = Depends(get_item_repository),
):
    item = await repo.find_by_id_or_name(id_or_name)
    return envelope(
        status.HTTP_200_OK, "Item found successfully",
        ItemRead.model_validate(item),
    )


@router.get(
    "/{item_id}/parent", response_model=Envelope[ItemParentRead],
    response_model_exclude_none=True,
)
async def get_item_parent(
    item_id: str,
    repo: ItemRepository = Depends(get_item_repository),
    resolver: ReferenceResolver = Depends(get_reference_resolver),
):
    item = await repo.get_by_id(item_id)
    ref = item.reference
    target = await resolver.resolve(ref)
    if ref.on_model is OnModel.CATEGORY:
        parent = ItemParentRead(
            on_model=ref.on_model, category=CategoryRead.model_validate(target),
        )
    else:
        parent = ItemParentRead(
            on_model=ref.on_model,
            subcategory=SubcategoryRead.model_validate(target),
        )
    return envelope(status.HTTP_200_OK, "Parent found successfully", parent)


@router.put(
    "/{item_id}", response_model=Envelope[ItemRead],
    response_model_exclude_none=True,
)
async def update_item(
    item_id: str,
    body: ItemUpdate,
    repo: ItemRepository = Depends(get_item_repository),
):
    # every update field is written; omitted ones are cleared
    item = await repo.update_by_id(item_id, body.model_dump())
    return envelope(
        status.HTTP_200_OK, "Item updated successfully",
        ItemRead.model_validate(item),
    )
