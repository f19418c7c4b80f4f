import os
from typing import List

from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_allow_origins: List[str] = Field(default=["*"], alias="CORS_ALLOW_ORIGINS")
    strict_input_validation: bool = Field(default=True, alias="STRICT_INPUT_VALIDATION")

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls):
        data = {
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
            "CORS_ALLOW_ORIGINS": os.getenv("CORS_ALLOW_ORIGINS", "*"),
            "STRICT_INPUT_VALIDATION": os.getenv("STRICT_INPUT_VALIDATION", "true"),
        }
        return cls.model_validate(data)


settings = Settings.from_env()
