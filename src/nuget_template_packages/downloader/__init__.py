# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from .abstract_downloader import PackageDownloader
from .errors import (
    DownloadCancelled,
    DownloadFailure,
    DownloadNetworkFailure,
    LocalFileConflict,
    PackageNotFound,
    PackageTrustFailure,
    VersionNotFound,
)
from .package_info import NuGetPackageInfo

__all__ = [
    "PackageDownloader",
    "NuGetPackageInfo",
    "DownloadFailure",
    "DownloadCancelled",
    "DownloadNetworkFailure",
    "LocalFileConflict",
    "PackageNotFound",
    "PackageTrustFailure",
    "VersionNotFound",
]
