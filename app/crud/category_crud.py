from contextlib import contextmanager
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, StoreUnavailableError
from app.core.logger import setup_logger
from app.models.category_model import Category
from app.models.product_model import Product

logger = setup_logger("app.crud.category")


class CategoryStore:
    """
    카테고리 저장소 (Session 래퍼)
    - 모든 DB 오류는 롤백 후 서비스 예외로 변환
      save 중 IntegrityError → ConflictError, 그 외 SQLAlchemyError → StoreUnavailableError
    """
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str, conflict_name: Optional[str] = None):
        try:
            yield
        except IntegrityError as e:
            self.db.rollback()
            if conflict_name is None:
                logger.error(f"DB 제약 위반 ({action}): {e}")
                raise StoreUnavailableError(f"Category store integrity failure during {action}") from e
            raise ConflictError(
                f"Category with the name {conflict_name} already exists !!!",
                field="categoryName",
                value=conflict_name,
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"DB 오류 ({action}): {e}")
            raise StoreUnavailableError(f"Category store unavailable during {action}") from e

    # READ-PAGE 정렬/페이지 단위 조회 (목록, 전체 건수)
    def find_page(self, offset: int, limit: int, order_by: list) -> Tuple[List[Category], int]:
        with self._guard("find_page"):
            total = self.db.query(Category).count()
            rows = (
                self.db.query(Category)
                .order_by(*order_by)
                .offset(offset)
                .limit(limit)
                .all()
            )
            return rows, total

    # READ 카테고리 ID로 조회
    def find_by_id(self, category_id: int) -> Optional[Category]:
        with self._guard("find_by_id"):
            return self.db.query(Category).filter(Category.category_id == category_id).first()

    # READ 카테고리 이름으로 조회 (정확히 일치)
    def find_by_name(self, category_name: str) -> Optional[Category]:
        with self._guard("find_by_name"):
            return self.db.query(Category).filter(Category.category_name == category_name).first()

    # CREATE / UPDATE 저장 후 최신 상태로 갱신
    def save(self, category: Category) -> Category:
        with self._guard("save", conflict_name=category.category_name):
            self.db.add(category)
            self.db.commit()
            self.db.refresh(category)
            return category

    # DELETE 소속 상품 삭제 후 카테고리 삭제 (한 트랜잭션)
    def delete_with_products(self, category: Category) -> int:
        with self._guard("delete"):
            removed = (
                self.db.query(Product)
                .filter(Product.category_id == category.category_id)
                .delete(synchronize_session=False)
            )
            self.db.delete(category)
            self.db.commit()
            return removed
