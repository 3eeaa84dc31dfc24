# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""Base types for exporters."""

from enum import Enum


class ExportFormat(Enum):
    """Output format for scheme export."""

    CSS = "css"
    SCSS = "scss"
    TAILWIND = "tailwind"
    JSON = "json"
