from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from graphconv.bootstrap.config.loader import get_configfile

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConverterSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GRAPHCONV_",
        extra="ignore"
    )

    secure_mode: Annotated[
        bool,
        Field(
            description=(
                "Archive mode, resolved once at startup.\n"
                "true  → msgpack archives restricted to builtin values and\n"
                "        records registered with @archivable (default).\n"
                "false → legacy pickle archives: any object graph, including\n"
                "        cycles. Only decode archives from trusted sources."
            ),
            default=True
        )
    ]

    log_level: Annotated[
        LogLevel,
        Field(
            description=(
                "Logging verbosity applied by graphconv.bootstrap.boot.init().\n"
                "Choose among: DEBUG, INFO, WARNING, ERROR, CRITICAL."
            ),
            default="INFO"
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Priority: init kwargs > ENV > YAML file
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)

        configfile = get_configfile()
        if configfile is not None:
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=configfile),)

        return sources
