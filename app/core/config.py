from typing import Annotated, List
from pydantic_settings import BaseSettings, NoDecode
from pydantic import validator

class Settings(BaseSettings):
    PROJECT_NAME: str = "Caseflow API"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Case management for immigration law practices"
    API_STR: str = "/api"

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:3000",  # Frontend development
    ]

    # Database
    DATABASE_URL: str

    # Database connection pool settings (server databases only)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800  # 30 minutes
    DB_COMMAND_TIMEOUT: int = 60  # 60 seconds
    SQL_ECHO: bool = False  # Set to True to log SQL queries (development only)

    # Security
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 86400
    SESSION_COOKIE_NAME: str = "session_token"
    SESSION_COOKIE_SECURE: bool = False

    # Edge gate for the page routes
    LOGIN_URL: str = "/login"
    PROTECTED_PATH_PREFIXES: Annotated[List[str], NoDecode] = [
        "/dashboard",
        "/cases",
        "/clients",
        "/documents",
        "/templates",
        "/calendar",
        "/reports",
        "/settings",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = ""

    # Performance
    ENABLE_RESPONSE_COMPRESSION: bool = True

    @validator("BACKEND_CORS_ORIGINS", "PROTECTED_PATH_PREFIXES", pre=True)
    def split_comma_separated(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
