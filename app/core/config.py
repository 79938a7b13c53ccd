# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Metadatos
    PROJECT_NAME: str = "Conversor BCV"
    PROJECT_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # Servidor (Railway y similares inyectan PORT)
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Rate limiting (requests/minuto por IP)
    RATE_LIMIT: str = "60/minute"
    RATE_LIMIT_ENABLED: bool = True

    # Fuente de la tasa (scraping del BCV)
    RATE_SOURCE_URL: str = "https://www.bcv.org.ve/"
    RATE_SELECTOR: str = "#dolar .centrado strong"
    RATE_FETCH_TIMEOUT: float = 10.0
    RATE_SOURCE_VERIFY_TLS: bool = True
    RATE_USER_AGENT: str = "Mozilla/5.0 (compatible; conversor-bcv/1.0)"

    # Ventana de frescura de la caché
    RATE_CACHE_MINUTES: int = 10

    # Formato de montos
    THOUSANDS_SEPARATOR: str = ","
    DECIMAL_SEPARATOR: str = "."

    # TLS (si usas HTTPS directo)
    SSL_KEYFILE: str | None = "ssl/key.pem"
    SSL_CERTFILE: str | None = "ssl/cert.pem"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
