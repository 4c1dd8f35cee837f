from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./data/tasks.db"
    # Segredo de reserva: só é usado quando a linha jwt_secret não existe
    JWT_SECRET: Optional[str] = None
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    ENVIRONMENT: str = "development"
    STATIC_DIR: str = "public"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    RATE_LIMIT_ENABLED: bool = False
    AUTH_RATE_LIMIT: str = "10/minute"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
