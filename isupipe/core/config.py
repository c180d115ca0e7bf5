from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "isupipe"
    API_PREFIX: str = "/api"
    DATABASE_URL: str

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 3600

    SECRET_KEY: str = "isupipe-session-secret"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "SESSIONID"
    SESSION_TTL_SECONDS: int = 3600

    # sha256 of the default "no image" icon served to users without an upload
    FALLBACK_IMAGE_HASH: str = "d9f8294e9d895f81ce62e73dc7d5dff862a4fa40bd4e0fecf53f7526a8edcac0"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'

settings = Settings()
