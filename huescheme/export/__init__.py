# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Exporters for generated color schemes.

Each exporter formats scheme shades as text for a specific consumer
(CSS custom properties, SCSS variables, Tailwind config, JSON).
Exporters never modify shade values.
"""

from huescheme.export.base import ExportFormat
from huescheme.export.scheme import export_scheme, export_schemes

__all__ = [
    "ExportFormat",
    "export_scheme",
    "export_schemes",
]
