from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Business registration printed on tax invoices
    COMPANY_GSTIN: str = "DUMMY1234567890Z"
    COMPANY_ADDRESS: str = "Business Address"

    class Config:
        env_file = ".env"
        extra = "ignore"


def get_settings() -> Settings:
    """Build settings from the current environment (not cached)."""
    return Settings()
