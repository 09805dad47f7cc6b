from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# 상품 생성 스키마 (카테고리는 경로에서 지정)
class ProductCreate(BaseModel):
    product_name: str = Field(min_length=1, max_length=100)
    quantity: int = Field(default=0, ge=0)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# 상품 응답 스키마
class ProductResponse(BaseModel):
    product_id: int
    product_name: str
    quantity: int
    category_id: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
