"""Configuration loading for booklist.

The YAML config file names the library's catalog website and the authors
to search for:

    catalog-url: https://catalog.library.loudoun.gov/
    media-type: Book
    authors:
        - firstname: James
          lastname: Patterson
          media-type: book on cd
        - firstname: Alexander
          lastname: McCall Smith

``media-type`` is optional at both levels and matched case-insensitively
against ``MEDIA_TYPES``.  Some media types are supersets of others, e.g.
'book' includes 'large print'.

Process settings (timeout, log level) come from the environment / .env.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from booklist.catalog.transport import DEFAULT_TIMEOUT_S
from booklist.models import CatalogQuery

DEFAULT_MEDIA_TYPE = "Book"

# Config spelling (lower case) -> catalog facet value.
MEDIA_TYPES: dict[str, str] = {
    "book": "Book",
    "electronic resource": "Electronic Resource",
    "ebook": "eBook",
    "eaudiobook": "eAudioBook",
    "book on cd": "Book on CD",
    "large print": "Large Print",
    "music cd": "Music CD",
    "dvd": "DVD",
    "blu-ray": "Blu-Ray",
}


class ConfigError(Exception):
    """Config file is missing, unreadable or invalid."""


def _convert_media(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    try:
        return MEDIA_TYPES[value.strip().lower()]
    except KeyError:
        allowed = ", ".join(MEDIA_TYPES)
        raise ValueError(
            f"unknown media type '{value}'; allowed types are: {allowed}"
        ) from None


class AuthorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    firstname: str = Field(min_length=1)
    lastname: str = Field(min_length=1)
    media: str | None = Field(default=None, alias="media-type")

    @field_validator("media")
    @classmethod
    def check_media(cls, value: str | None) -> str | None:
        return _convert_media(value)

    @property
    def name(self) -> str:
        return f"{self.lastname}, {self.firstname}"


class BooklistConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    catalog_url: str = Field(alias="catalog-url")
    media: str | None = Field(default=None, alias="media-type")
    authors: list[AuthorConfig] = Field(min_length=1)

    @field_validator("media")
    @classmethod
    def check_media(cls, value: str | None) -> str | None:
        return _convert_media(value)

    @field_validator("catalog_url")
    @classmethod
    def check_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"'{value}' is not an absolute http(s) URL")
        if not value.endswith("/"):
            value += "/"
        return value

    @property
    def default_media(self) -> str:
        return self.media or DEFAULT_MEDIA_TYPE

    def queries(self) -> Iterator[CatalogQuery]:
        """Yield one query per author, in config file order."""
        for author in self.authors:
            yield CatalogQuery(
                catalog_url=self.catalog_url,
                author=author.name,
                media=author.media or self.default_media,
            )

    def __str__(self) -> str:
        lines = [self.catalog_url, self.default_media]
        for author in self.authors:
            line = f"   {author.firstname} {author.lastname}"
            if author.media:
                line += f"; {author.media}"
            lines.append(line)
        return "\n".join(lines)


def read_config(path: str | Path) -> str:
    """Return the contents of the config file at ``path``."""
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise ConfigError(f"{path} does not exist")
    if config_path.is_dir():
        raise ConfigError(f"{path} is a directory; must be a file")
    try:
        return config_path.read_text()
    except OSError as exc:
        raise ConfigError(f"unable to read {path}: {exc}") from exc


def validate_config(text: str) -> BooklistConfig:
    """Parse YAML config text and validate it."""
    if not text or not text.strip():
        raise ConfigError("configuration content is empty")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"unable to parse YAML config file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("YAML config file must contain a mapping")

    try:
        return BooklistConfig.model_validate(data)
    except ValidationError as exc:
        problems = [
            f"- {'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise ConfigError(
            "YAML failed schema validation:\n" + "\n".join(problems)
        ) from exc


def load_config(path: str | Path) -> BooklistConfig:
    """Read and validate the YAML config file at ``path``."""
    return validate_config(read_config(path))


# ---------------------------------------------------------------------------
# Process settings
# ---------------------------------------------------------------------------

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    log_level: LogLevel = "ERROR"


def load_settings(env_path: str | Path | None = None) -> Settings:
    """Load process settings from environment variables (.env file)."""
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    try:
        return Settings(
            timeout_s=os.getenv("BOOKLIST_TIMEOUT_S", str(DEFAULT_TIMEOUT_S)),
            log_level=os.getenv("BOOKLIST_LOG_LEVEL", "ERROR").strip().upper(),
        )
    except ValidationError as exc:
        problems = [
            f"- {err['loc'][0]}: {err['msg']}" for err in exc.errors()
        ]
        raise ConfigError(
            "invalid environment settings:\n" + "\n".join(problems)
        ) from exc
