# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Schema for color scheme derivation.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same input → same analysis
- Serializable: JSON-ready via to_dict / from_dict

Color model:
- Hue: 0-360 degrees (≈0=red, ≈25=orange, ≈120=green, ≈200=blue, ≈328=pink)
- Chroma: HSL saturation in percent (0 = gray, 100 = fully saturated)
- Lightness: HSL lightness in percent (0 = black, 100 = white)

Shades are always ordered lightest first: index 0 is the lightest,
index 9 the darkest.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Mapping, Optional, Union

if TYPE_CHECKING:
    from huescheme.scheme.statistics import MultiZoneConfig


SHADE_COUNT = 10


# =============================================================================
# Input Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorOccurrence:
    """
    A single place in the source tree where a color is used.

    Attributes:
        file: Path of the file containing the color
        line: 1-based line number
        context: Source snippet around the usage
        type: Usage kind reported by the extractor (e.g. "css", "tsx")
        sub_type: Optional finer-grained usage kind
        css_property: CSS property the color is assigned to, if any
    """
    file: str
    line: int = 0
    context: str = ""
    type: str = ""
    sub_type: Optional[str] = None
    css_property: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "file": self.file,
            "line": self.line,
            "context": self.context,
            "type": self.type,
        }
        if self.sub_type is not None:
            d["subType"] = self.sub_type
        if self.css_property is not None:
            d["cssProperty"] = self.css_property
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ColorOccurrence:
        """Deserialize from dictionary."""
        return cls(
            file=data["file"],
            line=data.get("line", 0),
            context=data.get("context", ""),
            type=data.get("type", ""),
            sub_type=data.get("subType"),
            css_property=data.get("cssProperty"),
        )


@dataclass(frozen=True, slots=True)
class ColorAliases:
    """Names under which a color is referenced (variables, tokens, classes)."""
    scss_variables: tuple[str, ...] = ()
    css_custom_properties: tuple[str, ...] = ()
    tailwind_classes: tuple[str, ...] = ()
    design_tokens: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "scssVariables": list(self.scss_variables),
            "cssCustomProperties": list(self.css_custom_properties),
            "tailwindClasses": list(self.tailwind_classes),
            "designTokens": list(self.design_tokens),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorAliases:
        """Deserialize from dictionary."""
        return cls(
            scss_variables=tuple(data.get("scssVariables", ())),
            css_custom_properties=tuple(data.get("cssCustomProperties", ())),
            tailwind_classes=tuple(data.get("tailwindClasses", ())),
            design_tokens=tuple(data.get("designTokens", ())),
        )


@dataclass(frozen=True, slots=True)
class ColorSample:
    """
    A color extracted from a codebase.

    The engine only relies on hex_value and occurrences. The stored hue is
    informational; classification recomputes hue from the hex value.

    Attributes:
        hex_value: Hex string like "#339af0"
        hue: Hue reported by the extractor (0-360)
        primary_category: Category label (e.g. "brand", "inline-style")
        usage_pattern: Usage label (e.g. "global-design-system")
        semantic_meaning: Free-form semantic tags
        occurrences: Usage sites
        aliases: Variable / token / class names for this color
    """
    hex_value: str
    hue: float = 0.0
    primary_category: str = ""
    usage_pattern: str = ""
    semantic_meaning: tuple[str, ...] = ()
    occurrences: tuple[ColorOccurrence, ...] = ()
    aliases: ColorAliases = field(default_factory=ColorAliases)

    @property
    def occurrence_count(self) -> int:
        """Number of usage sites."""
        return len(self.occurrences)

    def to_dict(self) -> dict:
        """Serialize to dictionary (camelCase keys, same shape as the input JSON)."""
        return {
            "hexValue": self.hex_value,
            "hue": self.hue,
            "primaryCategory": self.primary_category,
            "usagePattern": self.usage_pattern,
            "semanticMeaning": list(self.semantic_meaning),
            "occurrences": [o.to_dict() for o in self.occurrences],
            "aliases": self.aliases.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorSample:
        """Deserialize from dictionary. Unknown keys are ignored."""
        return cls(
            hex_value=data["hexValue"],
            hue=float(data.get("hue", 0.0)),
            primary_category=data.get("primaryCategory") or "",
            usage_pattern=data.get("usagePattern") or "",
            semantic_meaning=tuple(data.get("semanticMeaning") or ()),
            occurrences=tuple(
                ColorOccurrence.from_dict(o) for o in data.get("occurrences", ())
            ),
            aliases=ColorAliases.from_dict(data.get("aliases") or {}),
        )


def samples_from_dict(data: Mapping[str, dict]) -> dict[str, ColorSample]:
    """Build a {key: ColorSample} mapping from the extractor's JSON object."""
    return {key: ColorSample.from_dict(value) for key, value in data.items()}


# =============================================================================
# Reference Types
# =============================================================================


class HueFamily(Enum):
    """
    The 13 standardized hue families (12 chromatic + gray).

    Member order is the reference table order and is used to break ties
    during classification.
    """
    GRAY = "gray"
    RED = "red"
    PINK = "pink"
    GRAPE = "grape"
    VIOLET = "violet"
    INDIGO = "indigo"
    BLUE = "blue"
    CYAN = "cyan"
    TEAL = "teal"
    GREEN = "green"
    LIME = "lime"
    YELLOW = "yellow"
    ORANGE = "orange"

    @property
    def is_neutral(self) -> bool:
        """True for the gray family, which has no meaningful hue."""
        return self is HueFamily.GRAY


@dataclass(frozen=True, slots=True)
class ReferenceHueFamily:
    """
    A named hue family in the reference palette.

    Attributes:
        family: Family identifier
        name: Display name ("Blue")
        hue: Reference hue angle in degrees. For gray this is only a
            display anchor.
        color: Representative color (shade 5)
        shades: 10 reference colors, lightest first
    """
    family: HueFamily
    name: str
    hue: float
    color: str
    shades: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate hue range and shade count."""
        if not 0.0 <= self.hue < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.hue}")
        if len(self.shades) != SHADE_COUNT:
            raise ValueError(
                f"Reference family needs {SHADE_COUNT} shades, got {len(self.shades)}"
            )


@dataclass(frozen=True, slots=True)
class ReferenceEntry:
    """
    Closest static reference-table entry for a color.

    Attributes:
        family: Family of the reference entry
        shade: Shade index (0 = lightest, 9 = darkest)
        distance: RGB Euclidean distance to the reference shade
    """
    family: HueFamily
    shade: int
    distance: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"hue": self.family.value, "shade": self.shade, "distance": self.distance}

    @classmethod
    def from_dict(cls, data: dict) -> ReferenceEntry:
        """Deserialize from dictionary."""
        return cls(
            family=HueFamily(data["hue"]),
            shade=data["shade"],
            distance=data["distance"],
        )


# =============================================================================
# Analysis Types
# =============================================================================


class AnalysisMode(Enum):
    """Discriminant for GroupAnalysis variants."""
    SINGLE = "single"
    MULTI_ZONE = "multi_zone"


@dataclass(frozen=True, slots=True)
class SingleHueAnalysis:
    """
    Statistics for one hue group, summarized by a single hue.

    Attributes:
        family: Hue family of the group
        colors: Member hex values in input order (includes neutral and
            unparseable members that were excluded from averaging)
        avg_hue: Circular-mean hue (0-360)
        avg_chroma: Mean saturation (0-100)
        avg_lightness: Mean lightness (0-100)
        usage: Sum of member occurrence counts
    """
    mode: ClassVar[AnalysisMode] = AnalysisMode.SINGLE

    family: HueFamily
    colors: tuple[str, ...]
    avg_hue: float
    avg_chroma: float
    avg_lightness: float
    usage: int = 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "mode": self.mode.value,
            "hue": self.family.value,
            "colors": list(self.colors),
            "avg_hue": self.avg_hue,
            "avg_chroma": self.avg_chroma,
            "avg_lightness": self.avg_lightness,
            "usage": self.usage,
        }


@dataclass(frozen=True, slots=True)
class MultiZoneHueAnalysis:
    """
    Statistics for one hue group with separate highlight, midtone and
    shadow hues.

    Only produced for chromatic groups with at least one chromatic member
    when multi-zone mode is enabled. All three zone hues are always set;
    the zone color lists record which members produced them and may be
    empty for back-filled zones.
    """
    mode: ClassVar[AnalysisMode] = AnalysisMode.MULTI_ZONE

    family: HueFamily
    colors: tuple[str, ...]
    avg_hue: float
    avg_chroma: float
    avg_lightness: float
    highlight_hue: float
    midtone_hue: float
    shadow_hue: float
    highlight_colors: tuple[str, ...] = ()
    midtone_colors: tuple[str, ...] = ()
    shadow_colors: tuple[str, ...] = ()
    usage: int = 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "mode": self.mode.value,
            "hue": self.family.value,
            "colors": list(self.colors),
            "avg_hue": self.avg_hue,
            "avg_chroma": self.avg_chroma,
            "avg_lightness": self.avg_lightness,
            "usage": self.usage,
            "highlight_hue": self.highlight_hue,
            "midtone_hue": self.midtone_hue,
            "shadow_hue": self.shadow_hue,
            "highlight_colors": list(self.highlight_colors),
            "midtone_colors": list(self.midtone_colors),
            "shadow_colors": list(self.shadow_colors),
        }


GroupAnalysis = Union[SingleHueAnalysis, MultiZoneHueAnalysis]


# =============================================================================
# Scheme Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class GeneratedScheme:
    """
    A derived 10-shade palette for one hue family.

    Attributes:
        family: Hue family
        name: Display name ("Blue")
        shades: 10 hex colors, lightest first
        analysis: Group analysis the shades were derived from
        multi_zone: True if three-zone hue interpolation was applied
    """
    family: HueFamily
    name: str
    shades: tuple[str, ...]
    analysis: GroupAnalysis
    multi_zone: bool = False

    def __post_init__(self) -> None:
        """Validate shade count."""
        if len(self.shades) != SHADE_COUNT:
            raise ValueError(
                f"Scheme needs {SHADE_COUNT} shades, got {len(self.shades)}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hue": self.family.value,
            "name": self.name,
            "shades": list(self.shades),
            "multi_zone": self.multi_zone,
            "analysis": self.analysis.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class SchemeMatch:
    """
    Nearest generated shade for a queried color.

    Attributes:
        color: Matched shade hex
        family: Family of the matched scheme
        shade: Shade index within the scheme
        scheme_name: Display name of the scheme
        distance: RGB Euclidean distance to the query color
    """
    color: str
    family: HueFamily
    shade: int
    scheme_name: str
    distance: float

    @property
    def color_name(self) -> str:
        """Composite name like "blue-5"."""
        return f"{self.family.value}-{self.shade}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "color": self.color,
            "hue": self.family.value,
            "shade": self.shade,
            "scheme_name": self.scheme_name,
            "distance": self.distance,
            "color_name": self.color_name,
        }


@dataclass(frozen=True, slots=True)
class SchemeAnalysis:
    """
    Full result of scheme derivation for a color collection.

    Attributes:
        total_colors: Number of input samples
        analyses: One GroupAnalysis per non-empty hue group, spectral order
        schemes: Generated schemes for groups with usage > 0
        reference_mapping: Closest reference entry per input hex
        multi_zone: Multi-zone configuration used, if any
    """
    total_colors: int
    analyses: tuple[GroupAnalysis, ...]
    schemes: tuple[GeneratedScheme, ...]
    reference_mapping: Mapping[str, ReferenceEntry]
    multi_zone: Optional[MultiZoneConfig] = None

    def get_scheme(self, family: HueFamily) -> Optional[GeneratedScheme]:
        """Get the generated scheme for a family, or None."""
        for scheme in self.schemes:
            if scheme.family is family:
                return scheme
        return None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "total_colors": self.total_colors,
            "analyses": [a.to_dict() for a in self.analyses],
            "schemes": [s.to_dict() for s in self.schemes],
            "reference_mapping": {
                hex_value: entry.to_dict()
                for hex_value, entry in self.reference_mapping.items()
            },
            "multi_zone": self.multi_zone.to_dict() if self.multi_zone is not None else None,
        }


# =============================================================================
# Usage Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class FileStats:
    """Color usage summary for one source file."""
    unique_colors: int
    total_occurrences: int
    most_used_color: str
    colors: tuple[str, ...]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "unique_colors": self.unique_colors,
            "total_occurrences": self.total_occurrences,
            "most_used_color": self.most_used_color,
            "colors": list(self.colors),
        }


@dataclass(frozen=True, slots=True)
class AnalysisMetrics:
    """Overall design-system adoption metrics for a color collection."""
    total_colors: int
    total_occurrences: int
    design_token_colors: int
    inline_colors: int
    coverage_percentage: int
    orphaned_colors: int
    recommended_tokens: int

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "total_colors": self.total_colors,
            "total_occurrences": self.total_occurrences,
            "design_token_colors": self.design_token_colors,
            "inline_colors": self.inline_colors,
            "coverage_percentage": self.coverage_percentage,
            "orphaned_colors": self.orphaned_colors,
            "recommended_tokens": self.recommended_tokens,
        }


@dataclass(frozen=True, slots=True)
class SimilarColorGroup:
    """
    Samples that are close enough in RGB space to be likely duplicates.

    Attributes:
        colors: Grouped samples (at least 2), first is the group seed
        average_distance: Mean pairwise RGB distance within the group
    """
    colors: tuple[ColorSample, ...]
    average_distance: float

    def __post_init__(self) -> None:
        """Validate group size."""
        if len(self.colors) < 2:
            raise ValueError("Similar color group needs at least 2 colors")
