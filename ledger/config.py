from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    suggestion_limit: int = 5
    default_transaction_type: Literal["credit", "debit"] = "debit"
    default_payment_status: Literal["paid", "pending", "advance"] = "pending"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
