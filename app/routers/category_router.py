from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.core.config import settings
from app.core.database import get_db
from app.crud.category_crud import CategoryStore
from app.mappers.category_mapper import CategoryMapper
from app.schemas.category_schema import CategoryDTO, CategoryResponse
from app.services.category_service import CategoryService

# 카테고리 관련 API 라우터 (조회/등록/수정: public, 삭제: admin)
public_router = APIRouter(prefix="/api/public/categories", tags=["Categories"])
admin_router = APIRouter(prefix="/api/admin/categories", tags=["Categories (admin)"])


# 서비스 의존성
def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(CategoryStore(db), CategoryMapper())


# 카테고리 목록 조회 (페이지/정렬)
@public_router.get("", response_model=CategoryResponse)
def get_all_categories(
    page_number: int = Query(settings.DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize"),
    sort_by: str = Query(settings.DEFAULT_SORT_BY, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),  # 미지정 시 내림차순
    service: CategoryService = Depends(get_category_service),
):
    return service.get_all_categories(page_number, page_size, sort_by, sort_order)


# 단일 카테고리 조회
@public_router.get("/{category_id}", response_model=CategoryDTO)
def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    return service.get_category(category_id)


# 카테고리 생성
@public_router.post("", response_model=CategoryDTO, status_code=status.HTTP_201_CREATED)
def create_category(category: CategoryDTO, service: CategoryService = Depends(get_category_service)):
    return service.create_category(category)


# 카테고리 수정 (전체 교체)
@public_router.put("/{category_id}", response_model=CategoryDTO)
def update_category(
    category_id: int,
    category: CategoryDTO,
    service: CategoryService = Depends(get_category_service),
):
    return service.update_category(category, category_id)


# 카테고리 삭제 (소속 상품 함께 삭제)
@admin_router.delete("/{category_id}", response_model=CategoryDTO)
def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    return service.delete_category(category_id)
