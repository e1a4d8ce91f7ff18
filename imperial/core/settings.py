from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IMPERIAL_",
        extra="ignore",
    )

    app_name: str = "Imperial Services"
    log_level: str = "INFO"

    builtin_services: str = "github,google"

    @property
    def builtin_service_list(self) -> list[str]:
        return [name.strip() for name in self.builtin_services.split(",") if name.strip()]


settings = Settings()
