from pathlib import Path
from typing import Literal, Optional
from xdg_base_dirs import xdg_config_home
import tomllib
import logging
from pydantic import BaseModel, StringConstraints, Field, model_validator
from typing_extensions import Annotated

from ytn.content import ContentKind


logger = logging.getLogger(__name__)

APP_NAME = "ytn"

config_path = xdg_config_home() / APP_NAME
config_file = config_path / f"{APP_NAME}.toml"

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ChannelEntry(BaseModel):
    name: Name
    subscribers: list[Name] = Field(default_factory=list)
    releases: list[ContentKind] = Field(default_factory=list)
    leavers: list[Name] = Field(default_factory=list)

    @model_validator(mode="after")
    def leavers_are_subscribers(self) -> "ChannelEntry":
        duplicates = sorted({
            name for name in self.subscribers if self.subscribers.count(name) > 1
        })
        if duplicates:
            raise ValueError(
                f"Subscribers {duplicates} appear more than once in channel '{self.name}'"
            )
        unknown = [name for name in self.leavers if name not in self.subscribers]
        if unknown:
            raise ValueError(
                f"Leavers {unknown} are not subscribers of channel '{self.name}'"
            )
        if len(self.leavers) > len(self.releases):
            # One subscriber leaves after each release
            raise ValueError(
                f"Channel '{self.name}' has {len(self.leavers)} leavers "
                f"but only {len(self.releases)} releases"
            )
        return self


class Settings(BaseModel):
    log_level: LogLevel = "INFO"
    channels: list[ChannelEntry] = Field(default_factory=list)


DEMO_SETTINGS = Settings(
    channels=[
        ChannelEntry(
            name="Imagine Dragons",
            subscribers=["Jacke(hater)", "Bob", "Alexa(hater)", "Jack", "Tim"],
            releases=[ContentKind.VIDEO, ContentKind.VIDEO, ContentKind.PHOTO],
            leavers=["Jacke(hater)", "Alexa(hater)"],
        )
    ]
)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read the TOML config file.

    An explicit path must exist. Without one, the default config file is used
    when present and the built-in demo otherwise.
    """
    if path is None:
        if not config_file.is_file():
            logger.info(f"{config_file=} not found, using the demo settings")
            return DEMO_SETTINGS
        path = config_file
    elif not path.is_file():
        raise FileNotFoundError(f"Config file {path} does not exist")
    logger.info(f'{path=}')
    with path.open("rb") as file:
        config = tomllib.load(file)
    return Settings.model_validate(config)
