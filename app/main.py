# app/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.database import Base, engine
from app.core.exceptions import CatalogError
from app.core.logger import setup_logger
from app.schemas.error_schema import ErrorResponse
from app import models  # noqa: F401  (테이블 메타데이터 등록)

from app.routers.category_router import public_router as category_public_router
from app.routers.category_router import admin_router as category_admin_router
from app.routers.product_router import public_router as product_public_router
from app.routers.product_router import admin_router as product_admin_router

logger = setup_logger("app.main")

app = FastAPI(title="Catalog Category API", debug=settings.DEBUG)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(category_public_router)
app.include_router(category_admin_router)
app.include_router(product_public_router)
app.include_router(product_admin_router)


# --------------------------------
# 예외 처리
# --------------------------------
@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} → {exc.kind}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} → {exc.kind}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # 요청 형식 오류: body → ValidationError, query/path → InvalidArgument
    first = exc.errors()[0] if exc.errors() else {}
    loc = [str(part) for part in first.get("loc", ())]
    kind = "ValidationError" if loc and loc[0] == "body" else "InvalidArgument"
    body = ErrorResponse(
        error=kind,
        message=first.get("msg", "Invalid request"),
        field=loc[-1] if loc else None,
        value=first.get("input"),
    )
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


# --------------------------------
# 서버 이벤트
# --------------------------------
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("DB 테이블 자동 생성 완료")
    logger.info("서버 시작")


@app.on_event("shutdown")
def on_shutdown():
    logger.info("서버 종료 중…")
    engine.dispose()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"포트 {settings.SERVER_PORT}에서 서버 실행")
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.SERVER_PORT, reload=settings.DEBUG)
