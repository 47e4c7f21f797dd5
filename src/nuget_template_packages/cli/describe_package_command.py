# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

# Command for inspecting a persisted template package record

import json
import logging
from typing import Annotated

import typer

from nuget_template_packages.config.engine_settings import EngineEnvironmentSettings
from nuget_template_packages.config.json_details_parser import JsonDetailsParser
from nuget_template_packages.template_package.abstractions import (
    Installer,
    ManagedTemplatePackageProvider,
)
from nuget_template_packages.template_package.nuget_managed_template_package import (
    NuGetManagedTemplatePackage,
)
from nuget_template_packages.utils.logging import setup_logging

nuget_installer = Installer(factory_id="nuget", name="NuGet")
global_settings_provider = ManagedTemplatePackageProvider(name="Global Settings")


def describe(
    details_file: Annotated[
        str,
        typer.Argument(
            help="Path to the JSON file holding the persisted package details."
        ),
    ],
    mount_point: Annotated[
        str,
        typer.Option(
            "--mount-point",
            "-m",
            help="Location where the package content is mounted.",
        ),
    ],
    export: Annotated[
        bool,
        typer.Option(
            "--export",
            help="Only print the details persisted for the package, as JSON.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """
    Describe a template package installed from NuGet.

    Rebuilds the package record from its persisted details file and prints its
    identity, provenance and trust information.
    """
    settings = EngineEnvironmentSettings()
    setup_logging(
        logging.DEBUG if verbose else logging.WARNING, settings.config.logger_name
    )

    try:
        details = JsonDetailsParser.load_details(details_file)
        package = NuGetManagedTemplatePackage.deserialize(
            settings,
            nuget_installer,
            global_settings_provider,
            mount_point,
            details,
        )
    except FileNotFoundError:
        typer.echo(f"Error: File '{details_file}' not found.", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if export:
        typer.echo(json.dumps(package.get_details(), indent=2))
        return

    last_change = package.read_last_change_time()
    typer.echo(f"Package: {package.display_name}")
    typer.echo(f"Identifier: {package.identifier}")
    typer.echo(f"Version: {package.version or '(latest)'}")
    typer.echo(f"Author: {package.author or '(empty)'}")
    typer.echo(f"Owners: {package.owners or '(empty)'}")
    typer.echo(f"Trusted: {package.trusted}")
    typer.echo(f"Source: {package.nuget_source or '(empty)'}")
    typer.echo(f"Local package: {'yes' if package.is_local_package else 'no'}")
    typer.echo(f"Mount point: {package.mount_point_uri}")
    if last_change.succeeded:
        typer.echo(f"Last changed: {last_change.timestamp.isoformat()}")
    else:
        typer.echo("Last changed: (unknown)")
