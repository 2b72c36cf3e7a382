from __future__ import annotations

from app.api.deps import get_current_admin
from app.crud.gallery import (
    create_gallery_item,
    delete_gallery_item,
    update_gallery_item,
)
from app.db.session import get_db
from app.models.gallery_item import GalleryItem
from app.schemas.gallery import GalleryItemIn, GalleryItemOut, GalleryItemPatchIn
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

router = APIRouter(
    prefix="/v1/admin/gallery",
    tags=["admin-gallery"],
    dependencies=[Depends(get_current_admin)],
)


def _get_or_404(db: Session, item_id: int) -> GalleryItem:
    item = db.get(GalleryItem, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Gallery item not found")
    return item


@router.post("", response_model=GalleryItemOut, status_code=201)
def add_item(payload: GalleryItemIn, db: Session = Depends(get_db)):
    return create_gallery_item(
        db,
        title=payload.title,
        description=payload.description,
        category=payload.category.value,
    )


@router.patch("/{item_id}", response_model=GalleryItemOut)
def edit_item(item_id: int, payload: GalleryItemPatchIn, db: Session = Depends(get_db)):
    item = _get_or_404(db, item_id)

    changes: dict[str, str] = {}
    if payload.title is not None:
        changes["title"] = payload.title
    if payload.description is not None:
        changes["description"] = payload.description
    if payload.category is not None:
        changes["category"] = payload.category.value

    return update_gallery_item(db, item=item, changes=changes)


@router.delete("/{item_id}", status_code=204)
def remove_item(item_id: int, db: Session = Depends(get_db)):
    item = _get_or_404(db, item_id)
    delete_gallery_item(db, item=item)
    return None
