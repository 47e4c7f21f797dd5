# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from .cli_configs import Config, default_config
from .engine_settings import (
    EngineEnvironmentSettings,
    FileSystem,
    PhysicalFileSystem,
    TemplateEngineHost,
)
from .json_details_parser import JsonDetailsParser

__all__ = [
    "Config",
    "default_config",
    "EngineEnvironmentSettings",
    "FileSystem",
    "PhysicalFileSystem",
    "TemplateEngineHost",
    "JsonDetailsParser",
]
