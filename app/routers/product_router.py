from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.crud import product_crud
from app.routers.category_router import get_category_service
from app.schemas.product_schema import ProductCreate, ProductResponse
from app.services.category_service import CategoryService

# 카테고리 소속 상품 API 라우터
public_router = APIRouter(prefix="/api/public/categories", tags=["Products"])
admin_router = APIRouter(prefix="/api/admin/categories", tags=["Products (admin)"])


# 카테고리별 상품 조회
@public_router.get("/{category_id}/products", response_model=List[ProductResponse])
def read_products(
    category_id: int,
    db: Session = Depends(get_db),
    service: CategoryService = Depends(get_category_service),
):
    # 카테고리 존재 확인 (없으면 404)
    service.get_category(category_id)
    return product_crud.get_products_by_category(db, category_id)


# 카테고리에 상품 등록
@admin_router.post("/{category_id}/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    category_id: int,
    product: ProductCreate,
    db: Session = Depends(get_db),
    service: CategoryService = Depends(get_category_service),
):
    service.get_category(category_id)
    return product_crud.create_product(db, category_id, product)
