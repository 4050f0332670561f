"""Parse PropertyGroup Condition attributes (a narrow subset of MSBuild conditions)."""

from __future__ import annotations

import re

from msbuildxml.config import ConditionKind, ParsedCondition

# Matches the condition Visual Studio writes for per-configuration groups:
#  '$(Configuration)|$(Platform)' == 'Debug|AnyCPU'
_CONFIGURATION_PLATFORM_RE = re.compile(
    r"^\s*'\$\(Configuration\)\|\$\(Platform\)'\s*==\s*'(?P<configuration>[^']*)'\s*$"
)

_UNCONDITIONED = ParsedCondition(kind=ConditionKind.UNCONDITIONED)


def configuration_key(configuration: str, platform: str) -> str:
    """Build the "Configuration|Platform" key compared against conditions."""
    return f"{configuration}|{platform}"


def parse_condition(raw: str | None) -> ParsedCondition:
    """Classify a Condition attribute value.

    ``None`` (no attribute) is unconditioned. Only a whole-string match of
    the configuration/platform equality is recognised; compound expressions,
    ``!=`` and reordered variables come back as UNRECOGNIZED.
    """
    if raw is None:
        return _UNCONDITIONED

    match = _CONFIGURATION_PLATFORM_RE.match(raw)
    if not match:
        return ParsedCondition(kind=ConditionKind.UNRECOGNIZED, raw=raw)

    return ParsedCondition(
        kind=ConditionKind.CONFIGURATION_PLATFORM,
        raw=raw,
        value=match.group("configuration"),
    )
