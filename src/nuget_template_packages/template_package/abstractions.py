# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from dataclasses import dataclass


class InvalidArgument(ValueError):
    """Exception raised when a required argument is missing or blank."""

    def __init__(self, message: str, param_name: str) -> None:
        super().__init__(message)
        self.param_name = param_name


@dataclass(frozen=True)
class Installer:
    """Identity of the installer that manages a template package."""

    factory_id: str
    name: str


@dataclass(frozen=True)
class ManagedTemplatePackageProvider:
    """Identity of the provider that lists the managed template packages."""

    name: str


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
