from __future__ import annotations

from typing import Any

from app.models.gallery_item import GalleryItem
from sqlalchemy import select
from sqlalchemy.orm import Session


def list_gallery_items(db: Session, *, category: str | None = None) -> list[GalleryItem]:
    stmt = select(GalleryItem)
    if category and category != "all":
        stmt = stmt.where(GalleryItem.category == category)
    return list(db.execute(stmt.order_by(GalleryItem.id.asc())).scalars().all())


def create_gallery_item(
    db: Session, *, title: str, description: str, category: str
) -> GalleryItem:
    item = GalleryItem(title=title, description=description, category=category)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_gallery_item(
    db: Session, *, item: GalleryItem, changes: dict[str, Any]
) -> GalleryItem:
    for key, value in changes.items():
        setattr(item, key, value)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def delete_gallery_item(db: Session, *, item: GalleryItem) -> None:
    db.delete(item)
    db.commit()
