import typing

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://toncenter.com"


class ToncenterConfig(BaseModel):
    model_config: typing.ClassVar[ConfigDict] = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    enable_logging: bool = False
    connect_timeout_ms: int = Field(default=30_000, ge=0)
    read_timeout_ms: int = Field(default=60_000, ge=0)
    api_key: str | None = None

    @property
    def connect_timeout(self) -> float:
        return self.connect_timeout_ms / 1000

    @property
    def read_timeout(self) -> float:
        return self.read_timeout_ms / 1000
