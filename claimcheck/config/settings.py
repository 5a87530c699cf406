from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "claimcheck"
    db_username: str = "claimcheck"
    db_password: str = "secret"

    validator_image_url: str = "http://localhost:8000/validate-image"
    validator_invoice_url: str = "http://localhost:8000/validate-invoice"
    validator_document_url: str = "http://localhost:8000/validate-document"
    risk_config_url: str = "http://localhost:8000"
    adjudication_url: str = "http://localhost:5678/webhook/adjudication"

    http_timeout_seconds: int = 60
    max_call_attempts: int = 3
    retry_base_delay_seconds: float = 1.0
    inter_call_delay_seconds: float = 1.0

    claim_currency: str = "USD"
    adjudication_source: str = "claimcheck"
