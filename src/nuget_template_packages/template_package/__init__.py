# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from .abstractions import Installer, InvalidArgument, ManagedTemplatePackageProvider
from .nuget_managed_template_package import (
    LastChangeTimeResult,
    NuGetManagedTemplatePackage,
)

__all__ = [
    "Installer",
    "InvalidArgument",
    "ManagedTemplatePackageProvider",
    "LastChangeTimeResult",
    "NuGetManagedTemplatePackage",
]
