from sqlalchemy.orm import Session
from app.models.product_model import Product
from app.schemas.product_schema import ProductCreate


# CREATE 카테고리에 상품 추가
def create_product(db: Session, category_id: int, product: ProductCreate):
    db_product = Product(
        product_name=product.product_name,
        quantity=product.quantity,
        category_id=category_id,
    )
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product


# READ-ALL 카테고리별 상품 조회
def get_products_by_category(db: Session, category_id: int):
    return (
        db.query(Product)
        .filter(Product.category_id == category_id)
        .order_by(Product.product_id)
        .all()
    )
