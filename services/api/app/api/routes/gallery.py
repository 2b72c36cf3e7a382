from __future__ import annotations

from app.crud.gallery import list_gallery_items
from app.db.session import get_db
from app.domain.venue import GALLERY_CATEGORY_NAMES
from app.schemas.gallery import GalleryCategoryOut, GalleryItemOut
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

router = APIRouter(prefix="/v1", tags=["gallery"])


@router.get("/gallery", response_model=list[GalleryItemOut])
def get_gallery(
    category: str = Query("all"),
    db: Session = Depends(get_db),
):
    if category not in GALLERY_CATEGORY_NAMES:
        raise HTTPException(status_code=400, detail="Unknown gallery category")
    return list_gallery_items(db, category=category)


@router.get("/gallery/categories", response_model=list[GalleryCategoryOut])
def get_gallery_categories():
    return [GalleryCategoryOut(id=k, name=v) for k, v in GALLERY_CATEGORY_NAMES.items()]
