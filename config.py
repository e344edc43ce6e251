"""
Pickmin Configuration
Centralized settings management with environment variable support
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache

class Settings(BaseSettings):
    """Validation settings, passed explicitly to the validation utility"""

    # ============================================
    # APPLICATION CONFIG
    # ============================================
    APP_NAME: str = "Pickmin"
    ENVIRONMENT: str = "development"  # development, staging, production
    DEBUG: bool = False

    # ============================================
    # SECURITY
    # ============================================
    BCRYPT_ROUNDS: int = 10  # cost factor, bcrypt accepts 4..31

    # Password requirements (lowercase, uppercase, digit, symbol, min 8)
    PASSWORD_CREATE_PATTERN: bool = True

    # ============================================
    # FORMATTING
    # ============================================
    DATE_FORMAT: str = "%d-%m-%Y"

    # ============================================
    # MONITORING
    # ============================================
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def check_bcrypt_rounds(cls, value: int) -> int:
        if not 4 <= value <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return value

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
