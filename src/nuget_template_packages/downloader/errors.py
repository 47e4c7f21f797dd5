# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.


class DownloadFailure(Exception):
    """Exception raised when a package artifact cannot be fetched."""

    def __init__(
        self,
        message: str,
        package_identifier: str,
        package_version: str | None = None,
    ) -> None:
        super().__init__(message)
        self.package_identifier = package_identifier
        self.package_version = package_version


class PackageNotFound(DownloadFailure):
    """Exception raised when no source knows the package."""

    pass


class VersionNotFound(DownloadFailure):
    """Exception raised when the package exists but not in the requested version."""

    pass


class DownloadNetworkFailure(DownloadFailure):
    """Exception raised when a package source cannot be reached."""

    pass


class PackageTrustFailure(DownloadFailure):
    """Exception raised when the package signature cannot be verified."""

    pass


class LocalFileConflict(DownloadFailure):
    """Exception raised when the target file exists and overwriting was not requested."""

    def __init__(
        self,
        message: str,
        package_identifier: str,
        package_version: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message, package_identifier, package_version)
        self.path = path


class DownloadCancelled(DownloadFailure):
    """Exception raised when the caller cancels a download in progress."""

    pass
