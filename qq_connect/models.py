"""Data types returned by the QQ Connect client."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .errors import ConfigError


@dataclass(frozen=True)
class ClientConfig:
    """Application credentials registered with QQ Connect."""

    app_id: str
    app_key: str
    redirect_uri: str

    def __post_init__(self):
        missing = [name for name in ("app_id", "app_key", "redirect_uri") if not getattr(self, name)]
        if missing:
            raise ConfigError(f"Missing QQ Connect settings: {', '.join(missing)}")


@dataclass(frozen=True)
class TokenGrant:
    """Result of a token exchange or refresh."""

    access_token: str
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None


@dataclass(frozen=True)
class IdentitySet:
    """
    Identifiers resolved from an access token.

    open_id is unique per application. union_id is shared by all
    applications under the same QQ Connect developer account and is empty
    when the application has no such binding.
    """

    client_id: str
    open_id: str
    union_id: str = ""


class ProfileInfo(BaseModel):
    """
    get_user_info response.

    status == 0 means success; otherwise message holds the provider error.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    status: int = Field(alias="ret")
    message: str = Field(default="", alias="msg")
    nickname: str = ""
    figure_url_type: str = Field(default="", alias="figureurl_type")
    figure_url: str = Field(default="", alias="figureurl")  # 30x30 Qzone
    figure_url_1: str = Field(default="", alias="figureurl_1")  # 50x50 Qzone
    figure_url_2: str = Field(default="", alias="figureurl_2")  # 100x100 Qzone
    figure_url_qq: str = Field(default="", alias="figureurl_qq")  # 640x640
    figure_url_qq_1: str = Field(default="", alias="figureurl_qq_1")  # 40x40
    figure_url_qq_2: str = Field(default="", alias="figureurl_qq_2")  # 100x100, may be empty
    gender: str = ""
    gender_type: int = 0
    province: str = ""
    city: str = ""
    year: str = ""
    constellation: str = ""
    is_yellow_vip: str = ""
    is_yellow_year_vip: str = ""
    yellow_vip_level: str = ""
    vip: str = ""
    level: str = ""
    is_lost: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, value, info: ValidationInfo):
        """QQ sends null for unset fields; treat them as absent."""
        if value is None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.default
        return value

    @property
    def avatar_url(self) -> str:
        """Largest available avatar, QQ avatars before Qzone ones."""
        for url in (
            self.figure_url_qq,
            self.figure_url_qq_2,
            self.figure_url_qq_1,
            self.figure_url_2,
            self.figure_url_1,
            self.figure_url,
        ):
            if url:
                return url
        return ""
