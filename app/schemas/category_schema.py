from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List, Optional


# 카테고리 전송 객체 (입력/출력 공용)
# - 입력: camelCase / snake_case 모두 허용
# - 출력: camelCase (categoryId, categoryName)
class CategoryDTO(BaseModel):
    category_id: Optional[int] = None    # 생성 시 입력값은 무시됨
    category_name: Optional[str] = None  # 필수 여부/길이는 서비스에서 검증

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# 페이지 응답 스키마
class CategoryResponse(BaseModel):
    content: List[CategoryDTO] = []
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    last_page: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True
