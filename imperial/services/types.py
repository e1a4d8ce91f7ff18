from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TOKEN_PREFIX = "Bearer "


class ServiceConfig(BaseModel):
    """Configuration for an OAuth provider, i.e. "google", "github", etc.

    ``token_prefix`` is prepended to an access token in an authorization
    header. ``endpoints`` holds the provider API URIs used once a token has
    been obtained, and can be read or updated with ``config[key]``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, frozen=True)
    token_prefix: str = Field(
        default=DEFAULT_TOKEN_PREFIX, alias="prefix", frozen=True
    )
    endpoints: dict[str, str] = Field(default_factory=dict)

    @field_validator("token_prefix", mode="before")
    @classmethod
    def default_missing_prefix(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_TOKEN_PREFIX
        return value

    def __getitem__(self, key: str) -> str | None:
        return self.endpoints.get(key)

    def __setitem__(self, key: str, value: str | None) -> None:
        if value is None:
            self.endpoints.pop(key, None)
        else:
            self.endpoints[key] = value

    def __delitem__(self, key: str) -> None:
        self.endpoints.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self.endpoints

    def authorization_header(self, access_token: str) -> str:
        return f"{self.token_prefix}{access_token}"
