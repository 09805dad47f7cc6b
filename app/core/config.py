from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # DB 접속 URL (직접 지정 시 아래 계정/접속 정보보다 우선)
    DATABASE_URL: Optional[str] = None

    # DB 계정
    DB_USER: str = "root"
    DB_PASSWORD: str = ""

    # DB 접속 정보
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_NAME: str = "catalog"

    # 서버 설정
    SERVER_PORT: int = 8000
    DEBUG: bool = True
    CORS_ORIGINS: List[str] = ["*"]

    # 로그 설정 (LOG_DIR 지정 시 파일 로그 활성화)
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # 페이지네이션 기본값
    DEFAULT_PAGE_NUMBER: int = 0
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 1000
    DEFAULT_SORT_BY: str = "categoryId"

    # 환경변수 파일
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST:
            return (
                f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
            )
        return "sqlite:///./catalog.db"


# 전역 설정 인스턴스
settings = Settings()
