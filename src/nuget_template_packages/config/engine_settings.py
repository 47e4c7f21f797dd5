# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from nuget_template_packages.adaptors.datetime import datetime_from_timestamp
from nuget_template_packages.adaptors.os import get_modification_timestamp
from nuget_template_packages.config.cli_configs import Config, default_config


class FileSystem(ABC):
    @abstractmethod
    def get_last_write_time_utc(self, path: str) -> datetime:
        raise NotImplementedError


class PhysicalFileSystem(FileSystem):
    """File system backed by the local disk."""

    def get_last_write_time_utc(self, path: str) -> datetime:
        return datetime_from_timestamp(get_modification_timestamp(path))


@dataclass
class TemplateEngineHost:
    """Services the host application makes available to template packages."""

    file_system: FileSystem = field(default_factory=PhysicalFileSystem)
    logger_factory: Callable[[str], logging.Logger] = logging.getLogger


@dataclass
class EngineEnvironmentSettings:
    host: TemplateEngineHost = field(default_factory=TemplateEngineHost)
    config: Config = field(default_factory=lambda: copy.deepcopy(default_config))

    def create_logger(self) -> logging.Logger:
        return self.host.logger_factory(self.config.logger_name)
