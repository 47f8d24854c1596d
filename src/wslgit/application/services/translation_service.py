"""Application service assembling translators and the dispatcher.

Where: application/services/translation_service.py
What: Build configured translation collaborators from a ``Config``.
Why: Keep CLI entry points free of construction details.
"""

from __future__ import annotations

from dataclasses import dataclass

from wslgit.config import Config
from wslgit.features.dispatch import (
    Dispatcher,
    ProcessRunner,
    SubcommandAllowList,
    SubprocessRunner,
)
from wslgit.features.translation import (
    DriveMapper,
    EditorTranslator,
    FileSystemPort,
    ForwardTranslator,
    LocalFileSystem,
    PathResolver,
    ReverseTranslator,
    TemplateMountTable,
)


@dataclass(slots=True, frozen=True)
class TranslationServices:
    """Translators sharing one filesystem and mount configuration."""

    forward: ForwardTranslator
    reverse: ReverseTranslator
    resolver: PathResolver
    editor: EditorTranslator


def build_services(
    config: Config,
    filesystem: FileSystemPort | None = None,
) -> TranslationServices:
    """Create translators configured from ``config``."""

    filesystem = filesystem or LocalFileSystem()
    drive_mapper = DriveMapper(TemplateMountTable(config.mount_root))
    forward = ForwardTranslator(filesystem.exists, drive_mapper)
    resolver = PathResolver(filesystem, config.executable_extensions)
    return TranslationServices(
        forward=forward,
        reverse=ReverseTranslator(config.mount_root),
        resolver=resolver,
        editor=EditorTranslator(resolver, forward),
    )


def build_dispatcher(
    config: Config,
    *,
    filesystem: FileSystemPort | None = None,
    runner: ProcessRunner | None = None,
) -> Dispatcher:
    """Create the forwarding dispatcher configured from ``config``."""

    services = build_services(config, filesystem)
    return Dispatcher(
        services.forward,
        services.reverse,
        services.editor,
        runner or SubprocessRunner(),
        translate_output=SubcommandAllowList(config.translated_subcommands),
        launcher=config.wsl_executable,
        target_program=config.target_program,
        editor_variable=config.editor_variable,
    )
