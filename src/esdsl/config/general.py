from pathlib import Path
from typing import Annotated, ClassVar, override

from pydantic import AfterValidator, BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from esdsl.types.general import LogLevel, TimeSpec
from esdsl.utils.general import CommentedSettings


class SerializationSettings(BaseModel):
    """Settings for rendering query trees to JSON."""

    sort_keys: Annotated[
        bool,
        Field(description="Sort object keys in emitted JSON documents."),
    ] = False
    datetime_timespec: Annotated[
        TimeSpec,
        Field(
            description="Precision of serialized timestamps. `auto` drops zero microseconds."
        ),
    ] = "auto"


def uppercase(value: str) -> str:
    """Make a string uppercase."""
    return value.upper()


class GeneralConfig(CommentedSettings):
    """General library config."""

    log_level: Annotated[
        LogLevel,
        AfterValidator(uppercase),
    ] = Field(
        default="INFO",
        description="Level of library logs to print/keep.",
    )
    log_file: Annotated[
        Path | None,
        Field(description="Optional file to additionally write logs to."),
    ] = None

    serialization: SerializationSettings = SerializationSettings()

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(  # pyright:ignore[reportIncompatibleVariableOverride] This is the intended pattern
        case_sensitive=False,
        env_prefix="ESDSL_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        yaml_file="config/config.yaml",
        yaml_file_encoding="utf-8",
    )

    @classmethod
    @override
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Ensure proper setting priority order."""
        return (
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            init_settings,
        )


CONFIG = GeneralConfig()
