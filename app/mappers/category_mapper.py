from app.models.category_model import Category
from app.schemas.category_schema import CategoryDTO


class CategoryMapper:
    """엔티티 ↔ DTO 필드 단위 변환"""

    def to_dto(self, category: Category) -> CategoryDTO:
        return CategoryDTO(
            category_id=category.category_id,
            category_name=category.category_name,
        )

    # 신규 엔티티 생성: DTO의 category_id는 읽지 않음 (ID는 DB가 할당)
    def to_entity(self, dto: CategoryDTO) -> Category:
        return Category(category_name=dto.category_name)

    # 기존 엔티티에 DTO 값 전체 덮어쓰기 (PUT): ID와 상품 관계는 유지
    def copy_onto(self, dto: CategoryDTO, category: Category) -> Category:
        category.category_name = dto.category_name
        return category
