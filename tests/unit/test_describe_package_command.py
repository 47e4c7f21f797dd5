# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import json
import os
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import typer
from typer.testing import CliRunner

from nuget_template_packages.cli.main_cli import app as cli_app


@pytest.fixture
def runner() -> CliRunner:
    """Create a fresh CLI runner for each test."""
    return CliRunner()


@pytest.fixture
def app() -> typer.Typer:
    return cli_app


def write_details(directory: Path, details: dict[str, object]) -> str:
    details_file = directory / "details.json"
    details_file.write_text(json.dumps(details), encoding="utf-8")
    return str(details_file)


def test_no_command_prints_help(app: typer.Typer, runner: CliRunner) -> None:
    result = runner.invoke(app, [], color=False)

    assert result.exit_code == 2
    assert "describe" in result.output


def test_describe_prints_package_information(
    app: typer.Typer, runner: CliRunner, tmp_path: Path
) -> None:
    package_file = tmp_path / "Foo.1.2.3.nupkg"
    package_file.write_bytes(b"content")
    os.utime(package_file, (1704067200, 1704067200))
    details_file = write_details(
        tmp_path,
        {
            "PackageId": "Foo",
            "Version": "1.2.3",
            "Author": "Jane",
            "Trusted": "true",
            "NuGetSource": "https://api.nuget.org/v3/index.json",
        },
    )

    result = runner.invoke(
        app,
        ["describe", details_file, "--mount-point", str(package_file)],
        color=False,
    )

    assert result.exit_code == 0
    assert "Package: Foo::1.2.3" in result.stdout
    assert "Author: Jane" in result.stdout
    assert "Owners: (empty)" in result.stdout
    assert "Trusted: true" in result.stdout
    assert "Source: https://api.nuget.org/v3/index.json" in result.stdout
    assert "Local package: no" in result.stdout
    assert "Last changed: 2024-01-01T00:00:00+00:00" in result.stdout


def test_describe_missing_mount_point_content(
    app: typer.Typer, runner: CliRunner, tmp_path: Path
) -> None:
    details_file = write_details(tmp_path, {"PackageId": "Foo", "LocalPackage": "true"})

    result = runner.invoke(
        app,
        ["describe", details_file, "-m", str(tmp_path / "missing.nupkg")],
        color=False,
    )

    assert result.exit_code == 0
    assert "Package: Foo" in result.stdout
    assert "Version: (latest)" in result.stdout
    assert "Trusted: false" in result.stdout
    assert "Local package: yes" in result.stdout
    assert "Last changed: (unknown)" in result.stdout


def test_describe_export_prints_persisted_details(
    app: typer.Typer, runner: CliRunner, tmp_path: Path
) -> None:
    details_file = write_details(
        tmp_path,
        {
            "PackageId": "Foo",
            "Version": "1.2.3",
            "Owners": "jane",
            "LocalPackage": "true",
        },
    )

    result = runner.invoke(
        app,
        ["describe", details_file, "-m", "/packages/foo.nupkg", "--export"],
        color=False,
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"Owners": "jane"}


def test_describe_file_not_found(app: typer.Typer, runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["describe", "nonexistent.json", "-m", "/packages/foo.nupkg"], color=False
    )

    assert result.exit_code == 1
    assert "Error: File 'nonexistent.json' not found." in result.stderr


def test_describe_requires_mount_point(app: typer.Typer, runner: CliRunner) -> None:
    result = runner.invoke(app, ["describe", "details.json"], color=False)

    assert result.exit_code == 2


def test_describe_missing_package_id(
    app: typer.Typer, runner: CliRunner, tmp_path: Path
) -> None:
    details_file = write_details(tmp_path, {"Version": "1.0.0"})

    result = runner.invoke(
        app, ["describe", details_file, "-m", "/packages/foo.nupkg"], color=False
    )

    assert result.exit_code == 1
    assert "Error: details should contain key PackageId" in result.stderr


def test_describe_invalid_details_document(
    app: typer.Typer, runner: CliRunner, tmp_path: Path
) -> None:
    details_file = write_details(tmp_path, {"PackageId": "Foo", "Trusted": True})

    result = runner.invoke(
        app, ["describe", details_file, "-m", "/packages/foo.nupkg"], color=False
    )

    assert result.exit_code == 1
    assert "Error: Invalid value for details key Trusted" in result.stderr


@patch("nuget_template_packages.cli.describe_package_command.setup_logging")
def test_describe_verbose_enables_debug_logging(
    mock_setup_logging: Mock, app: typer.Typer, runner: CliRunner, tmp_path: Path
) -> None:
    details_file = write_details(tmp_path, {"PackageId": "Foo"})

    result = runner.invoke(
        app,
        ["describe", details_file, "-m", "/packages/foo.nupkg", "--verbose"],
        color=False,
    )

    assert result.exit_code == 0
    mock_setup_logging.assert_called_once_with(10, "nuget_template_packages")
