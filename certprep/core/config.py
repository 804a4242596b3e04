"""
Configuration management using Pydantic settings.
"""
from typing import List, Literal, Union
import os
from pydantic import AnyHttpUrl, validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
load_dotenv()



class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "CertPrep Practice"
    ENV: str = os.getenv("ENV", "development")
    DEBUG: bool = True

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./certprep.db")

    # JWT Configuration
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Bootstrap admin account
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@example.com")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # Practice Configuration
    DEFAULT_CERTIFICATION: str = os.getenv("DEFAULT_CERTIFICATION", "CAPM")
    WEAK_TOPIC_THRESHOLD: int = 75
    MAX_QUESTION_BATCH: int = 150
    HISTORY_LIMIT: int = 10
    # "answered": score over submitted answers, "planned": over the session's total_questions
    SCORE_BASIS: Literal["answered", "planned"] = "answered"
    QUESTION_BANK_PATH: str = os.getenv("QUESTION_BANK_PATH", "")

    # CORS Configuration
    BACKEND_CORS_ORIGINS: Union[List[AnyHttpUrl], str] = "*"

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v):
        if v == "*" or v == ["*"]:
            return "*"
        if isinstance(v, str):
            return [i.strip() for i in v.split(",")]
        return v

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
