# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable

from nuget_template_packages.adaptors.os import (
    create_dirs,
    parent_dir,
    path_exists,
    remove_file,
    replace_file,
)
from nuget_template_packages.config.engine_settings import EngineEnvironmentSettings
from nuget_template_packages.downloader.errors import (
    DownloadCancelled,
    LocalFileConflict,
)
from nuget_template_packages.downloader.package_info import NuGetPackageInfo
from nuget_template_packages.template_package.abstractions import (
    InvalidArgument,
    is_blank,
)


class PackageDownloader(ABC):
    """Fetches package artifacts into local storage.

    Implementations write to ``temp_path_for(final_path)`` and finish with
    ``commit_download`` so that a cancelled or failed download never leaves
    a file at the final path.
    """

    def __init__(self, settings: EngineEnvironmentSettings) -> None:
        self.settings = settings
        self.logger = settings.create_logger()

    @abstractmethod
    async def download_package(
        self,
        download_path: str,
        identifier: str,
        version: str | None = None,
        additional_sources: Iterable[str] | None = None,
        force: bool = False,
        cancel_event: asyncio.Event | None = None,
    ) -> NuGetPackageInfo:
        """Download a package into download_path.

        Args:
            download_path: Directory the .nupkg file is written to
            identifier: The package identifier
            version: The version to fetch, None resolves the latest one
            additional_sources: Feeds consulted besides the configured ones
            force: Overwrite a file already present at the final path
            cancel_event: Set by the caller to abort the download

        Returns:
            The metadata of the downloaded package

        Raises:
            InvalidArgument: If identifier is blank
            DownloadFailure: If the package cannot be fetched
        """
        raise NotImplementedError

    @staticmethod
    def validate_request(identifier: str) -> None:
        if is_blank(identifier):
            raise InvalidArgument("identifier cannot be None or empty", "identifier")

    def resolve_sources(self, additional_sources: Iterable[str] | None) -> list[str]:
        sources: list[str] = []
        for source in [*self.settings.config.default_sources, *(additional_sources or [])]:
            if is_blank(source) or source in sources:
                continue
            sources.append(source)
        return sources

    @staticmethod
    def check_cancelled(
        identifier: str,
        cancel_event: asyncio.Event | None,
        version: str | None = None,
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise DownloadCancelled(
                f"Download of {identifier} was cancelled", identifier, version
            )

    def temp_path_for(self, final_path: str) -> str:
        return f"{final_path}{self.settings.config.partial_download_suffix}"

    @staticmethod
    def ensure_can_write(
        final_path: str,
        identifier: str,
        version: str | None = None,
        force: bool = False,
    ) -> None:
        if not force and path_exists(final_path):
            raise LocalFileConflict(
                f"File {final_path} already exists, use force to overwrite it",
                identifier,
                version,
                path=final_path,
            )

    def commit_download(
        self,
        temp_path: str,
        final_path: str,
        identifier: str,
        version: str | None = None,
        force: bool = False,
        cancel_event: asyncio.Event | None = None,
    ) -> None:
        """Move a completed temporary download to its final path.

        The conflict check runs again right before the move, after the target
        directory is created. A file created at final_path between that check
        and the move is still overwritten.
        """
        try:
            self.check_cancelled(identifier, cancel_event, version)
            self.ensure_can_write(final_path, identifier, version, force)
            directory = parent_dir(final_path)
            if directory:
                create_dirs(directory)
            self.ensure_can_write(final_path, identifier, version, force)
        except (DownloadCancelled, LocalFileConflict):
            if path_exists(temp_path):
                remove_file(temp_path)
            raise
        replace_file(temp_path, final_path)
        self.logger.debug(f"Stored {identifier} at {final_path}")
