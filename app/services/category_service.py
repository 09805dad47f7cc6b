import math
from typing import Optional

from app.core.config import settings
from app.core.exceptions import ConflictError, InvalidArgumentError, NotFoundError, ValidationError
from app.core.logger import setup_logger
from app.crud.category_crud import CategoryStore
from app.mappers.category_mapper import CategoryMapper
from app.models.category_model import Category
from app.schemas.category_schema import CategoryDTO, CategoryResponse

logger = setup_logger("app.services.category")

MIN_NAME_LENGTH = 5
MAX_NAME_LENGTH = 100

# DB OFFSET 최대값 (signed 64-bit)
MAX_OFFSET = 2 ** 63 - 1

# 정렬 가능 필드 (DTO 필드명 → 컬럼)
SORT_FIELDS = {
    "categoryId": Category.category_id,
    "category_id": Category.category_id,
    "categoryName": Category.category_name,
    "category_name": Category.category_name,
}


def validate_category_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise ValidationError("Category name must not be blank", field="categoryName", value=name)
    if len(name.strip()) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Category name must contain atleast {MIN_NAME_LENGTH} characters",
            field="categoryName",
            value=name,
        )
    # 컬럼 폭(String(100)) 초과
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Category name must not exceed {MAX_NAME_LENGTH} characters",
            field="categoryName",
            value=name,
        )
    return name


def build_order_by(sort_by: Optional[str], sort_order: Optional[str]) -> list:
    column = SORT_FIELDS.get(sort_by or settings.DEFAULT_SORT_BY)
    if column is None:
        raise InvalidArgumentError(f"Unsupported sort field: {sort_by}", field="sortBy", value=sort_by)

    # asc 외의 값(None 포함)은 모두 내림차순
    ascending = (sort_order or "").strip().lower() == "asc"
    primary = column.asc() if ascending else column.desc()

    # 동일 값일 때 ID 순으로 고정
    if column is Category.category_id:
        return [primary]
    return [primary, Category.category_id.asc()]


class CategoryService:
    """
    카테고리(Category) 관련 비즈니스 로직을 관리하는 서비스 클래스
    """
    def __init__(self, store: CategoryStore, mapper: CategoryMapper):
        self.store = store
        self.mapper = mapper

    # READ-PAGE 카테고리 목록 조회
    def get_all_categories(self, page_number: Optional[int], page_size: Optional[int],
                           sort_by: Optional[str] = None, sort_order: Optional[str] = None) -> CategoryResponse:
        if page_number is None or page_number < 0:
            raise InvalidArgumentError("Page number must be zero or greater", field="pageNumber", value=page_number)
        if page_size is None or page_size < 1:
            raise InvalidArgumentError("Page size must be at least 1", field="pageSize", value=page_size)
        if page_size > settings.MAX_PAGE_SIZE:
            raise InvalidArgumentError(
                f"Page size must not exceed {settings.MAX_PAGE_SIZE}", field="pageSize", value=page_size
            )
        if page_number * page_size > MAX_OFFSET:
            raise InvalidArgumentError("Page number is out of range", field="pageNumber", value=page_number)

        order_by = build_order_by(sort_by, sort_order)
        categories, total = self.store.find_page(page_number * page_size, page_size, order_by)

        total_pages = math.ceil(total / page_size)
        return CategoryResponse(
            content=[self.mapper.to_dto(c) for c in categories],
            page_number=page_number,
            page_size=page_size,
            total_elements=total,
            total_pages=total_pages,
            last_page=page_number + 1 >= total_pages,
        )

    # READ 단일 카테고리 조회
    def get_category(self, category_id: int) -> CategoryDTO:
        return self.mapper.to_dto(self._get_or_404(category_id))

    # CREATE 카테고리 추가
    def create_category(self, category_dto: CategoryDTO) -> CategoryDTO:
        validate_category_name(category_dto.category_name)
        category = self.mapper.to_entity(category_dto)

        if self.store.find_by_name(category.category_name) is not None:
            logger.warning(f"중복 카테고리 생성 요청: {category.category_name}")
            raise ConflictError(
                f"Category with the name {category.category_name} already exists !!!",
                field="categoryName",
                value=category.category_name,
            )

        saved = self.store.save(category)
        logger.info(f"카테고리 등록: id={saved.category_id}, name={saved.category_name}")
        return self.mapper.to_dto(saved)

    # DELETE 카테고리 삭제 (소속 상품 포함)
    def delete_category(self, category_id: int) -> CategoryDTO:
        category = self._get_or_404(category_id)
        deleted = self.mapper.to_dto(category)

        removed = self.store.delete_with_products(category)
        logger.info(f"카테고리 삭제: id={category_id}, 함께 삭제된 상품 {removed}개")
        return deleted

    # UPDATE 카테고리 전체 수정 (PUT)
    def update_category(self, category_dto: CategoryDTO, category_id: int) -> CategoryDTO:
        category = self._get_or_404(category_id)
        validate_category_name(category_dto.category_name)

        existing = self.store.find_by_name(category_dto.category_name)
        if existing is not None and existing.category_id != category_id:
            logger.warning(f"중복 이름으로 수정 요청: id={category_id}, name={category_dto.category_name}")
            raise ConflictError(
                f"Category with the name {category_dto.category_name} already exists !!!",
                field="categoryName",
                value=category_dto.category_name,
            )

        saved = self.store.save(self.mapper.copy_onto(category_dto, category))
        logger.info(f"카테고리 수정: id={saved.category_id}, name={saved.category_name}")
        return self.mapper.to_dto(saved)

    def _get_or_404(self, category_id: int) -> Category:
        category = self.store.find_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", "categoryId", category_id)
        return category
