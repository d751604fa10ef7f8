from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Storefront API"
    API_BASE_URL: str = "http://localhost:8080"
    API_PREFIX: str = "/api"

    # Paginación
    CATALOG_PAGE_SIZE: int = 100
    CATEGORY_PAGE_SIZE: int = 20

    # HTTP
    USER_AGENT: str = "StorefrontClient/1.0"
    HTTP2: bool = True
    TIMEOUT_CONNECT: float = 5.0
    TIMEOUT_READ: float = 15.0
    TIMEOUT_WRITE: float = 10.0
    TIMEOUT_POOL: float = 10.0
    MAX_KEEPALIVE: int = 20
    MAX_CONNECTIONS: int = 50
    FOLLOW_REDIRECTS: bool = True

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_")

settings = Settings()
