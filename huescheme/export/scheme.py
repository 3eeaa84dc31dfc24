# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Scheme exporters.

Formats a GeneratedScheme's shades as design-token text. Shade indices run
0 (lightest) to 9 (darkest).

Example (CSS)::

      --color-blue-0: #e8f3fc;
      --color-blue-1: #cde6fa;
      ...
      --color-blue-9: #0a2a47;
"""

from __future__ import annotations

import json
from typing import Iterable

from huescheme.export.base import ExportFormat
from huescheme.schema import GeneratedScheme


def export_scheme(
    scheme: GeneratedScheme,
    format: ExportFormat = ExportFormat.CSS,
) -> str:
    """Serialize one scheme.

    Args:
        scheme: The scheme to export.
        format: CSS, SCSS, TAILWIND or JSON.

    Returns:
        Formatted text (no trailing newline).
    """
    if format == ExportFormat.CSS:
        return _to_css(scheme)
    elif format == ExportFormat.SCSS:
        return _to_scss(scheme)
    elif format == ExportFormat.TAILWIND:
        return _to_tailwind(scheme)
    else:
        return json.dumps(_json_data(scheme), indent=2)


def export_schemes(
    schemes: Iterable[GeneratedScheme],
    format: ExportFormat = ExportFormat.CSS,
) -> str:
    """Serialize several schemes.

    Text formats are joined with a blank line between schemes. JSON merges
    all schemes into a single object keyed by family.
    """
    schemes = list(schemes)

    if format == ExportFormat.JSON:
        data: dict = {}
        for scheme in schemes:
            data.update(_json_data(scheme))
        return json.dumps(data, indent=2)

    return "\n\n".join(export_scheme(scheme, format) for scheme in schemes)


def _to_css(scheme: GeneratedScheme) -> str:
    """CSS custom properties, indented for a :root block."""
    family = scheme.family.value
    return "\n".join(
        f"  --color-{family}-{i}: {shade};" for i, shade in enumerate(scheme.shades)
    )


def _to_scss(scheme: GeneratedScheme) -> str:
    """SCSS variables."""
    family = scheme.family.value
    return "\n".join(
        f"$color-{family}-{i}: {shade};" for i, shade in enumerate(scheme.shades)
    )


def _to_tailwind(scheme: GeneratedScheme) -> str:
    """Tailwind theme.colors fragment (keys 00-90)."""
    lines = [f"'{scheme.family.value}': {{"]
    lines.extend(f"  {i}0: '{shade}'," for i, shade in enumerate(scheme.shades))
    lines.append("},")
    return "\n".join(lines)


def _json_data(scheme: GeneratedScheme) -> dict:
    return {scheme.family.value: {str(i): shade for i, shade in enumerate(scheme.shades)}}
