"""Application settings."""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from pydantic import AfterValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def invalid_empty(v: str | None) -> str | None:
    """An empty string is not a valid input.

    Args:
        v (str | None): input string.

    Returns:
        str | None: the input string

    """
    if v == "":
        raise ValueError("Empty string is not a valid value")
    return v


class Settings(BaseSettings):
    """Settings for the application."""

    APP_NAME: Annotated[
        str, Field(default="azure-netspec", description="Application name.")
    ]
    AZURE_RESOURCE_GROUP_NAME: Annotated[
        str,
        Field(
            description="Resource group used by the networks not defining their own."
        ),
        AfterValidator(invalid_empty),
    ]
    NETWORKS_FILE: Annotated[
        Path | None,
        Field(
            default=None,
            description="Path to the YAML file with the networks of the instance. "
            "Used when no file is given on the command line.",
        ),
    ]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    def global_defaults(self) -> dict[str, Any]:
        """Return the defaults shared by all the network specifications.

        Returns:
            dict of {str: Any}: read-only defaults, keyed as in cloud_properties.

        """
        return {"resource_group_name": self.AZURE_RESOURCE_GROUP_NAME}


@lru_cache
def get_settings() -> Settings:
    """Retrieve cached settings.

    Returns:
        Settings: Cached settings value.

    """
    return Settings()
