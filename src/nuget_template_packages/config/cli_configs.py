# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    default_sources: list[str]
    partial_download_suffix: str
    logger_name: str


default_config = Config(
    default_sources=[
        "https://api.nuget.org/v3/index.json",
    ],
    partial_download_suffix=".part",
    logger_name="nuget_template_packages",
)
