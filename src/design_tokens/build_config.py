"""Pydantic v2 models for the platform build configuration.

The JSON layout follows the camelCase keys of Style Dictionary configs
(``transformGroup``, ``buildPath``, ``showFileHeader``); snake_case field
names are accepted as well.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from design_tokens.exceptions import ConfigurationError
from design_tokens.registry import VALID_TOKEN


class FileOptions(BaseModel):
    """Per-file options."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    show_file_header: bool = Field(default=True, alias="showFileHeader")


class FileConfig(BaseModel):
    """One output file of a platform.

    ``filter`` narrows the tokens written to the file: a registered filter
    name such as ``validToken``, or a mapping like ``{"type": "color"}``.
    Without one every token is written, except ``modes``-category tokens,
    which the build never emits whatever the filter says.
    """

    model_config = ConfigDict(populate_by_name=True)

    destination: str = Field(..., min_length=1)
    format: str = Field(..., min_length=1)
    filter: str | dict[str, Any] | None = None
    options: FileOptions = Field(default_factory=FileOptions)


class PlatformConfig(BaseModel):
    """A target platform: its transforms, output directory and files."""

    model_config = ConfigDict(populate_by_name=True)

    transform_group: str | None = Field(default=None, alias="transformGroup")
    transforms: list[str] | None = None
    build_path: str = Field(default="", alias="buildPath")
    files: list[FileConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_transforms(self) -> "PlatformConfig":
        if self.transform_group is None and self.transforms is None:
            raise ValueError("platform needs either transformGroup or transforms")
        return self


class BuildConfig(BaseModel):
    """All platforms of a build, in the order they are built."""

    platforms: dict[str, PlatformConfig] = Field(default_factory=dict)


def _web_platform(build_path: str, destination: str, format_name: str, **options: Any) -> PlatformConfig:
    return PlatformConfig(
        transform_group="custom/css",
        build_path=build_path,
        files=[
            FileConfig(
                destination=destination,
                format=format_name,
                filter=VALID_TOKEN,
                options=FileOptions(**options),
            )
        ],
    )


def default_build_config() -> BuildConfig:
    """The web platforms: SCSS, Less, CSS (with RGB companions) and flat JSON."""
    return BuildConfig(
        platforms={
            "scss": _web_platform("build/scss/", "_variables.scss", "scss/variables"),
            "less": _web_platform("build/less/", "_variables.less", "less/variables"),
            "css": _web_platform(
                "build/css/", "_variables.css", "css/variables", show_file_header=False
            ),
            "json-flat": PlatformConfig(
                transform_group="js",
                build_path="build/json/",
                files=[
                    FileConfig(
                        destination="styles.json",
                        format="json/flat",
                        filter=VALID_TOKEN,
                    )
                ],
            ),
        }
    )


def load_build_config(path: Path) -> BuildConfig:
    """Read a JSON build configuration file.

    Raises:
        ConfigurationError: The file is missing or unreadable, is not UTF-8
            JSON, or does not describe valid platforms.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(
            f"Build config not found: {path}", context={"path": str(path)}
        ) from None
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read build config {path}: {e.strerror or e}", context={"path": str(path)}
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            f"Build config is not UTF-8 encoded: {path}", context={"path": str(path)}
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Build config is not valid JSON: {path}: {e}", context={"path": str(path)}
        ) from e

    try:
        return BuildConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid build config {path}: {e.error_count()} error(s)",
            context={"path": str(path), "errors": e.errors(include_url=False)},
        ) from e
