import logging

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class SlackConfig(BaseSettings):
    """SLACK_BOT_TOKEN and SLACK_SIGNING_SECRET"""
    model_config = SettingsConfigDict(env_prefix="SLACK_")

    bot_token: str
    signing_secret: str


class AzureOpenAIConfig(BaseSettings):
    """Translation backend, read from AZURE_OPENAI_*"""
    model_config = SettingsConfigDict(env_prefix="AZURE_OPENAI_")

    api_key: str
    endpoint: str
    api_version: str = "2024-02-15-preview"
    deployment: str = "gpt-35-turbo"


class AppConfig(BaseSettings):
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 3000
    # Serverless hosts freeze the process once the HTTP response is sent
    process_before_response: bool = False

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


class Settings:
    def __init__(self):
        self.slack = SlackConfig()
        self.azure_openai = AzureOpenAIConfig()
        self.app = AppConfig()


settings = Settings()
