from pydantic import Field
from pydantic_settings import BaseSettings

from domain.entities import TraktConfig


class Settings(BaseSettings):
    tmdb_api_key: str = Field(default="", validation_alias="TMDB_API_KEY")
    trakt_client_id: str = Field(default="", validation_alias="TRAKT_CLIENT_ID")
    trakt_access_token: str = Field(default="", validation_alias="TRAKT_ACCESS_TOKEN")
    log_dev_mode: bool = Field(default=True, validation_alias="LOG_DEV_MODE")

    class Config:
        env_file = ".env"
        extra = "allow"

    def trakt_config(self) -> TraktConfig:
        return TraktConfig(
            client_id=self.trakt_client_id,
            access_token=self.trakt_access_token,
        )


settings = Settings()
