"""Core data types and defaults for project property lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Checked in this order; the first one present wins.
TARGET_FRAMEWORK_PROPERTIES = (
    "TargetFrameworks",
    "TargetFramework",
    "TargetFrameworkVersion",
)


class ConditionKind(str, Enum):
    UNCONDITIONED = "Unconditioned"
    CONFIGURATION_PLATFORM = "ConfigurationPlatformEquals"
    UNRECOGNIZED = "Unrecognized"


@dataclass(frozen=True)
class ParsedCondition:
    """A PropertyGroup Condition attribute reduced to the one shape we understand."""
    kind: ConditionKind
    raw: str | None = None
    value: str | None = None  # "Configuration|Platform" literal

    def matches(self, key: str) -> bool:
        """True only for a recognised configuration condition equal to ``key``.

        Unrecognised conditions never match, even when MSBuild would
        evaluate them as true.
        """
        if self.kind is not ConditionKind.CONFIGURATION_PLATFORM:
            return False
        return self.value == key


@dataclass(frozen=True)
class ProjectDefaults:
    output_type: str = "Library"
    platform_target: str = "AnyCPU"
    target_framework_separator: str = ";"


DEFAULTS = ProjectDefaults()


@dataclass
class ProjectInfo:
    """Snapshot of the reader's answers for one configuration/platform pair."""
    configuration: str
    platform: str
    output_type: str = DEFAULTS.output_type
    assembly_name: str | None = None
    target_frameworks: list[str] = field(default_factory=list)
    platform_target: str = DEFAULTS.platform_target
    output_path: str | None = None
