from __future__ import annotations
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", alias="COSMWASM_LOG_LEVEL")

    # Indent used when the CLI pretty-prints JSON
    json_indent: int = Field(default=2, alias="COSMWASM_JSON_INDENT")

    # Base64/hex runs longer than this are shortened in log lines
    log_elide_over: int = Field(default=256, alias="COSMWASM_LOG_ELIDE_OVER")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()  # load at import
