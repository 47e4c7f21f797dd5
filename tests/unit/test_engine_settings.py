# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import logging
from datetime import datetime
from pathlib import Path

import pytest
import pytest_mock
import pytz

from nuget_template_packages.config.cli_configs import default_config
from nuget_template_packages.config.engine_settings import (
    EngineEnvironmentSettings,
    PhysicalFileSystem,
)


def test_default_settings_use_application_logger() -> None:
    settings = EngineEnvironmentSettings()

    logger = settings.create_logger()

    assert isinstance(logger, logging.Logger)
    assert logger.name == "nuget_template_packages"
    assert settings.config == default_config
    assert isinstance(settings.host.file_system, PhysicalFileSystem)


def test_default_config_is_not_shared_between_settings() -> None:
    first = EngineEnvironmentSettings()
    second = EngineEnvironmentSettings()

    first.config.default_sources.append("https://feed.example.com/v3/index.json")

    assert second.config.default_sources == ["https://api.nuget.org/v3/index.json"]
    assert default_config.default_sources == ["https://api.nuget.org/v3/index.json"]


def test_physical_file_system_reports_utc_modification_time(
    mocker: pytest_mock.MockFixture,
) -> None:
    mock_timestamp = mocker.patch(
        "nuget_template_packages.config.engine_settings.get_modification_timestamp",
        return_value=1704067200.0,
    )

    last_write = PhysicalFileSystem().get_last_write_time_utc("/packages/foo.nupkg")

    assert last_write == datetime(2024, 1, 1, tzinfo=pytz.UTC)
    mock_timestamp.assert_called_once_with("/packages/foo.nupkg")


def test_physical_file_system_on_real_file(tmp_path: Path) -> None:
    package_file = tmp_path / "foo.nupkg"
    package_file.write_bytes(b"content")

    last_write = PhysicalFileSystem().get_last_write_time_utc(str(package_file))

    assert last_write.tzinfo is not None
    assert last_write.timestamp() == pytest.approx(package_file.stat().st_mtime)


def test_physical_file_system_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        PhysicalFileSystem().get_last_write_time_utc(str(tmp_path / "missing.nupkg"))
