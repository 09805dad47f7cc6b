from sqlalchemy import Column, String, BigInteger, Integer
from sqlalchemy.orm import relationship
from app.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함

# SQLite는 INTEGER PRIMARY KEY만 자동 증가 → 방언별 타입 지정
IdType = BigInteger().with_variant(Integer, "sqlite")


class Category(Base):

    __tablename__ = "categories"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    category_id = Column(IdType, primary_key=True, autoincrement=True)

    # 카테고리 이름
    category_name = Column(String(100), nullable=False, unique=True)  # 필수, 중복 불가

    # 소속 상품 목록 (삭제 시 ORM은 관여하지 않음, CategoryStore에서 함께 삭제)
    products = relationship("Product", back_populates="category", passive_deletes="all")
