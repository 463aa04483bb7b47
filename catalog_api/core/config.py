from typing import List
from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    # API Settings
    PROJECT_NAME: str = "Product Catalog API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api"

    # Database Settings
    SQLALCHEMY_DATABASE_URI: str
    SQL_ECHO: bool = False

    # CORS Settings
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str] | str:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Logging
    LOG_LEVEL: str = "INFO"

    # Listing
    DEFAULT_PER_PAGE: int = 15
    MAX_PER_PAGE: int = 100

    @property
    def DATABASE_URL(self) -> str:
        """Get full database URL."""
        return self.SQLALCHEMY_DATABASE_URI

    @property
    def IS_SQLITE(self) -> bool:
        return self.SQLALCHEMY_DATABASE_URI.startswith("sqlite")

    class Config:
        case_sensitive = True
        env_file = ".env"

settings = Settings()
