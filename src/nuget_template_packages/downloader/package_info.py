# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class NuGetPackageInfo:
    """Metadata of a package artifact fetched to the local disk."""

    author: str
    owners: str
    trusted: bool
    full_path: str  # local path of the .nupkg file
    nuget_source: str | None  # feed the package was resolved from
    package_identifier: str
    package_version: str

    def with_full_path(self, new_full_path: str) -> "NuGetPackageInfo":
        return replace(self, full_path=new_full_path)
