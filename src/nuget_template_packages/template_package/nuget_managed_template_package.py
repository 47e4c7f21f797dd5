# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from nuget_template_packages.adaptors.datetime import ZERO_DATETIME
from nuget_template_packages.config.engine_settings import EngineEnvironmentSettings
from nuget_template_packages.downloader.package_info import NuGetPackageInfo
from nuget_template_packages.template_package.abstractions import (
    Installer,
    InvalidArgument,
    ManagedTemplatePackageProvider,
    is_blank,
)

AUTHOR_KEY = "Author"
LOCAL_PACKAGE_KEY = "LocalPackage"
OWNERS_KEY = "Owners"
TRUSTED_KEY = "Trusted"
NUGET_SOURCE_KEY = "NuGetSource"
PACKAGE_ID_KEY = "PackageId"
PACKAGE_VERSION_KEY = "Version"

DEFAULT_TRUSTED = "false"


@dataclass(frozen=True)
class LastChangeTimeResult:
    timestamp: datetime = ZERO_DATETIME
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def _parse_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() == "true"


def _none_if_blank(value: str | None) -> str | None:
    return None if is_blank(value) else value


class NuGetManagedTemplatePackage:
    """A template package installed from a NuGet feed or a local .nupkg file.

    Identity (identifier and mount point) is fixed at construction, the rest
    of the metadata can be updated as the package gets downloaded again.
    Instances are not safe for concurrent mutation.
    """

    def __init__(
        self,
        settings: EngineEnvironmentSettings,
        installer: Installer,
        provider: ManagedTemplatePackageProvider,
        mount_point_uri: str,
        package_identifier: str,
    ) -> None:
        if is_blank(mount_point_uri):
            raise InvalidArgument(
                "mount_point_uri cannot be None or empty", "mount_point_uri"
            )
        if is_blank(package_identifier):
            raise InvalidArgument(
                "package_identifier cannot be None or empty", "package_identifier"
            )
        if installer is None:
            raise InvalidArgument("installer cannot be None", "installer")
        if provider is None:
            raise InvalidArgument("provider cannot be None", "provider")
        if settings is None:
            raise InvalidArgument("settings cannot be None", "settings")

        self._settings = settings
        self._logger = settings.create_logger()
        self._installer = installer
        self._managed_provider = provider
        self._mount_point_uri = mount_point_uri
        self._identifier = package_identifier
        self._version: str | None = None
        self._author: str | None = None
        self._owners: str | None = None
        self._trusted: str | None = None
        self._nuget_source: str | None = None
        self._is_local_package = False

    @classmethod
    def deserialize(
        cls,
        settings: EngineEnvironmentSettings,
        installer: Installer,
        provider: ManagedTemplatePackageProvider,
        mount_point_uri: str,
        details: Mapping[str, str],
    ) -> "NuGetManagedTemplatePackage":
        """Rebuild a package from its persisted details.

        Only the well-known keys are read, anything else in ``details`` is
        ignored. Values are copied, so the caller may keep mutating its
        mapping afterwards.

        Raises:
            InvalidArgument: If the mount point is blank, or ``details`` is
                missing or has no non-blank PackageId entry
        """
        if is_blank(mount_point_uri):
            raise InvalidArgument(
                "mount_point_uri cannot be None or empty", "mount_point_uri"
            )
        if details is None:
            raise InvalidArgument("details cannot be None", "details")
        if PACKAGE_ID_KEY not in details:
            raise InvalidArgument(
                f"details should contain key {PACKAGE_ID_KEY}", "details"
            )
        if is_blank(details[PACKAGE_ID_KEY]):
            raise InvalidArgument(
                f"details should contain key {PACKAGE_ID_KEY} with non-empty value",
                "details",
            )

        package = cls(
            settings, installer, provider, mount_point_uri, details[PACKAGE_ID_KEY]
        )
        package.version = details.get(PACKAGE_VERSION_KEY)
        package.author = details.get(AUTHOR_KEY)
        package.owners = details.get(OWNERS_KEY)
        package.trusted = details.get(TRUSTED_KEY)
        package.nuget_source = details.get(NUGET_SOURCE_KEY)
        package.is_local_package = _parse_bool(details.get(LOCAL_PACKAGE_KEY))
        return package

    @classmethod
    def from_package_info(
        cls,
        settings: EngineEnvironmentSettings,
        installer: Installer,
        provider: ManagedTemplatePackageProvider,
        package_info: NuGetPackageInfo,
        is_local_package: bool = False,
    ) -> "NuGetManagedTemplatePackage":
        """Create the record for a package that was just downloaded to package_info.full_path."""
        package = cls(
            settings,
            installer,
            provider,
            package_info.full_path,
            package_info.package_identifier,
        )
        package.author = package_info.author
        package.owners = package_info.owners
        package.trusted = "true" if package_info.trusted else "false"
        package.nuget_source = package_info.nuget_source
        package.version = package_info.package_version
        package.is_local_package = is_local_package
        return package

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def display_name(self) -> str:
        if is_blank(self._version):
            return self._identifier
        return f"{self._identifier}::{self._version}"

    @property
    def mount_point_uri(self) -> str:
        return self._mount_point_uri

    @property
    def installer(self) -> Installer:
        return self._installer

    @property
    def managed_provider(self) -> ManagedTemplatePackageProvider:
        return self._managed_provider

    @property
    def provider(self) -> ManagedTemplatePackageProvider:
        return self._managed_provider

    @property
    def version(self) -> str | None:
        return self._version

    @version.setter
    def version(self, value: str | None) -> None:
        self._version = _none_if_blank(value)

    @property
    def author(self) -> str | None:
        return self._author

    @author.setter
    def author(self, value: str | None) -> None:
        self._author = _none_if_blank(value)

    @property
    def owners(self) -> str | None:
        return self._owners

    @owners.setter
    def owners(self, value: str | None) -> None:
        self._owners = _none_if_blank(value)

    @property
    def trusted(self) -> str:
        return self._trusted if self._trusted is not None else DEFAULT_TRUSTED

    @trusted.setter
    def trusted(self, value: str | None) -> None:
        self._trusted = _none_if_blank(value)

    @property
    def nuget_source(self) -> str | None:
        return self._nuget_source

    @nuget_source.setter
    def nuget_source(self, value: str | None) -> None:
        self._nuget_source = _none_if_blank(value)

    @property
    def is_local_package(self) -> bool:
        return self._is_local_package

    @is_local_package.setter
    def is_local_package(self, value: bool) -> None:
        self._is_local_package = bool(value)

    def read_last_change_time(self) -> LastChangeTimeResult:
        try:
            return LastChangeTimeResult(
                timestamp=self._settings.host.file_system.get_last_write_time_utc(
                    self._mount_point_uri
                )
            )
        except Exception as e:
            message = f"Failed to get last changed time for {self._mount_point_uri}, details: {e}"
            self._logger.debug(message)
            return LastChangeTimeResult(error=message)

    @property
    def last_change_time(self) -> datetime:
        return self.read_last_change_time().timestamp

    def get_details(self) -> dict[str, str]:
        """Details persisted next to the package entry.

        Only values that were set are exported, an unset trust flag is left
        out even though it reads as "false". Setters store blanks as None, so
        a set value is never blank. The identifier, version and
        local package flag are kept by the caller in the entry itself and
        are not part of this mapping.
        """
        details: dict[str, str] = {}
        for key, value in (
            (AUTHOR_KEY, self._author),
            (OWNERS_KEY, self._owners),
            (TRUSTED_KEY, self._trusted),
            (NUGET_SOURCE_KEY, self._nuget_source),
        ):
            if value is not None:
                details[key] = value
        return details

    def to_details(self) -> dict[str, str]:
        details = {PACKAGE_ID_KEY: self._identifier}
        if self._version is not None:
            details[PACKAGE_VERSION_KEY] = self._version
        if self._author is not None:
            details[AUTHOR_KEY] = self._author
        if self._owners is not None:
            details[OWNERS_KEY] = self._owners
        if self._trusted is not None:
            details[TRUSTED_KEY] = self._trusted
        if self._nuget_source is not None:
            details[NUGET_SOURCE_KEY] = self._nuget_source
        if self._is_local_package:
            details[LOCAL_PACKAGE_KEY] = "true"
        return details

    def __repr__(self) -> str:
        return f"NuGetManagedTemplatePackage({self.display_name!r}, mount_point_uri={self._mount_point_uri!r})"
