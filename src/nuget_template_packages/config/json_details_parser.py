# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import json
import logging
from collections.abc import Mapping

from nuget_template_packages.adaptors.os import (
    create_dirs,
    open_file,
    parent_dir,
    write_file,
)

logger = logging.getLogger("nuget_template_packages")


class JsonDetailsParser:
    """Reads and writes the flat details mapping persisted for a template package."""

    @staticmethod
    def parse_details(details_json: object) -> dict[str, str]:
        """Validate a decoded JSON document as a details mapping.

        Args:
            details_json: The decoded JSON value

        Returns:
            A new dictionary with the same keys and values

        Raises:
            ValueError: If the document is not an object of string values
        """
        if not isinstance(details_json, dict):
            raise ValueError(
                f"Details must be a JSON object, got {type(details_json).__name__}"
            )
        details = {}
        for key, value in details_json.items():
            if not isinstance(value, str):
                raise ValueError(
                    f"Invalid value for details key {key}: expected a string, got {type(value).__name__}"
                )
            details[key] = value
        return details

    @staticmethod
    def load_details(details_file_path: str) -> dict[str, str]:
        """Load a details mapping from a JSON file.

        Raises:
            FileNotFoundError: If the details file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the details format is invalid
        """
        try:
            return JsonDetailsParser.parse_details(
                json.loads(open_file(details_file_path))
            )
        except FileNotFoundError:
            logger.error(f"Details file not found: {details_file_path}")
            raise
        except json.JSONDecodeError:
            logger.error(f"Invalid JSON in details file: {details_file_path}")
            raise
        except ValueError as e:
            logger.error(f"Invalid details in {details_file_path}: {e}")
            raise

    @staticmethod
    def save_details(details_file_path: str, details: Mapping[str, str]) -> None:
        directory = parent_dir(details_file_path)
        if directory:
            create_dirs(directory)
        write_file(details_file_path, json.dumps(dict(details), indent=2))
        logger.debug(f"Saved {len(details)} detail(s) to {details_file_path}")
