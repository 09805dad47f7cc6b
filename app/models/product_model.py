from sqlalchemy import Column, String, Integer, BigInteger, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from app.models.category_model import IdType


class Product(Base):
    __tablename__ = "products"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    product_id = Column(IdType, primary_key=True, autoincrement=True)

    # 상품 이름
    product_name = Column(String(100), nullable=False)  # 필수 입력

    # 수량
    quantity = Column(Integer, nullable=False, default=0)

    # 카테고리 FK (Category.category_id 참조)
    category_id = Column(
        BigInteger,
        ForeignKey("categories.category_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # relationship — 조인 시 사용 (카테고리 객체 접근)
    category = relationship("Category", back_populates="products")
