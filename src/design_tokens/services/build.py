"""Build service: turns a token list into the files of each platform.

For every file of a platform the service filters the tokens, resolves
their names, applies the platform's value transforms, checks the resolved
names and renders the format. Tokens in the ``modes`` category are dropped
before any file filter runs, so no output ever contains them. Each platform
works on its own transformed copies; the source token list is never
modified, so one platform's ``4px`` never reaches another platform's
``size/px`` transform.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from design_tokens.build_config import BuildConfig, FileConfig, PlatformConfig
from design_tokens.domain.tokens import Token
from design_tokens.exceptions import (
    EmptyTokenNameError,
    NameCollisionError,
    UnknownPlatformError,
)
from design_tokens.filters import is_mode_token
from design_tokens.formats.headers import file_header
from design_tokens.logging_config import build_context, get_logger, token_paths
from design_tokens.registry import PlatformTransforms, Registry, default_registry
from design_tokens.transforms.value import apply_value_transforms

logger = get_logger(__name__)


@dataclass(frozen=True)
class BuiltFile:
    """A rendered output file, not yet written."""

    platform: str
    build_path: str
    destination: str
    format: str
    content: str
    token_count: int

    @property
    def relative_path(self) -> Path:
        return Path(self.build_path) / self.destination


def check_names(tokens: Sequence[Token], destination: str) -> None:
    """Ensure every resolved name is non-empty and unique within one file.

    Raises:
        EmptyTokenNameError: A token resolved to an empty name.
        NameCollisionError: Two tokens resolved to the same name.
    """
    seen: dict[str, Token] = {}
    for token in tokens:
        if not token.name:
            raise EmptyTokenNameError(token.path, destination)
        if token.name in seen:
            raise NameCollisionError(token.name, seen[token.name].path, token.path, destination)
        seen[token.name] = token


class BuildService:
    """Builds the platforms described by a BuildConfig.

    Args:
        config: Platforms to build.
        registry: Capabilities the config refers to. Defaults to a fresh
            default_registry().
        generated_at: Timestamp for file headers. Defaults to the time
            each file is rendered.
    """

    def __init__(
        self,
        config: BuildConfig,
        registry: Registry | None = None,
        generated_at: datetime | None = None,
    ) -> None:
        self._config = config
        self._registry = registry or default_registry()
        self._generated_at = generated_at

    @property
    def platforms(self) -> list[str]:
        return list(self._config.platforms)

    def _platform_config(self, platform: str) -> PlatformConfig:
        try:
            return self._config.platforms[platform]
        except KeyError:
            raise UnknownPlatformError(platform, self.platforms) from None

    def _platform_transforms(self, platform_config: PlatformConfig) -> PlatformTransforms:
        names: list[str] = []
        if platform_config.transform_group:
            names.extend(self._registry.get_transform_group(platform_config.transform_group))
        if platform_config.transforms:
            names.extend(platform_config.transforms)
        return self._registry.resolve_transforms(names)

    def transform_tokens(
        self, tokens: Iterable[Token], transforms: PlatformTransforms
    ) -> list[Token]:
        """Return transformed copies: resolved name first, then the value."""
        transformed = []
        for token in tokens:
            if transforms.name_transform is not None:
                token = token.with_name(transforms.name_transform(token))
            transformed.append(apply_value_transforms(token, transforms.value_transforms))
        return transformed

    def build_file(
        self,
        tokens: Sequence[Token],
        platform: str,
        platform_config: PlatformConfig,
        file_config: FileConfig,
        transforms: PlatformTransforms,
    ) -> BuiltFile:
        output_format = self._registry.get_format(file_config.format)
        token_filter = self._registry.get_filter(file_config.filter)

        eligible = [t for t in tokens if not is_mode_token(t)]
        selected = [t for t in eligible if token_filter(t)] if token_filter else eligible
        transformed = self.transform_tokens(selected, transforms)
        check_names(transformed, file_config.destination)

        content = output_format(transformed)
        if file_config.options.show_file_header and output_format.comment_style is not None:
            generated_at = self._generated_at or datetime.now(UTC)
            content = file_header(output_format.comment_style, generated_at) + content

        logger.debug(
            "file_rendered",
            format=file_config.format,
            tokens=len(transformed),
            filtered_out=len(tokens) - len(selected),
        )
        return BuiltFile(
            platform=platform,
            build_path=platform_config.build_path,
            destination=file_config.destination,
            format=file_config.format,
            content=content,
            token_count=len(transformed),
        )

    def build_platform(self, tokens: Sequence[Token], platform: str) -> list[BuiltFile]:
        """Render every file of one platform."""
        platform_config = self._platform_config(platform)
        transforms = self._platform_transforms(platform_config)

        built: list[BuiltFile] = []
        with build_context(platform):
            modes = [t for t in tokens if is_mode_token(t)]
            if modes:
                logger.debug("mode_tokens_skipped", paths=token_paths(modes))
            for file_config in platform_config.files:
                with build_context(platform, file_config.destination):
                    built.append(
                        self.build_file(tokens, platform, platform_config, file_config, transforms)
                    )
            logger.info("platform_built", files=len(built))
        return built

    def build_all_platforms(
        self, tokens: Sequence[Token], platforms: Iterable[str] | None = None
    ) -> list[BuiltFile]:
        """Render the given platforms (all of them by default) in config order."""
        selected = list(platforms) if platforms is not None else self.platforms
        for platform in selected:
            self._platform_config(platform)

        built: list[BuiltFile] = []
        for platform in self.platforms:
            if platform in selected:
                built.extend(self.build_platform(tokens, platform))
        return built

    def write(self, built_files: Iterable[BuiltFile], root: Path) -> list[Path]:
        """Write rendered files under root, creating directories as needed."""
        written = []
        for built in built_files:
            target = root / built.relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(built.content, encoding="utf-8")
            with build_context(built.platform, built.destination):
                logger.info("file_written", file=str(target), tokens=built.token_count)
            written.append(target)
        return written
