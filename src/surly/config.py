"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings

from .url import URL


class SurlySettings(BaseSettings):
    """Command line configuration."""

    base_url: URL | None = None
    xml_tag: str = "url"
    xml_attribute: str = "href"

    model_config = {"env_prefix": "SURLY_"}


settings = SurlySettings()
