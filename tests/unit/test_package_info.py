# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import dataclasses

import pytest

from nuget_template_packages.downloader.package_info import NuGetPackageInfo


def make_info() -> NuGetPackageInfo:
    return NuGetPackageInfo(
        author="Microsoft",
        owners="dotnetframework",
        trusted=True,
        full_path="/tmp/downloads/foo.1.2.3.nupkg",
        nuget_source="https://api.nuget.org/v3/index.json",
        package_identifier="Foo",
        package_version="1.2.3",
    )


def test_with_full_path_only_replaces_the_path() -> None:
    info = make_info()

    moved = info.with_full_path("/packages/foo.1.2.3.nupkg")

    assert moved.full_path == "/packages/foo.1.2.3.nupkg"
    assert moved == dataclasses.replace(info, full_path="/packages/foo.1.2.3.nupkg")
    assert info.full_path == "/tmp/downloads/foo.1.2.3.nupkg"


def test_package_info_is_immutable() -> None:
    info = make_info()

    with pytest.raises(dataclasses.FrozenInstanceError):
        info.trusted = False  # type: ignore[misc]
