"""Read build properties from a parsed .csproj/.vbproj document (MSBuild schema)."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Callable, Iterable

from msbuildxml.config import (
    DEFAULTS,
    TARGET_FRAMEWORK_PROPERTIES,
    ConditionKind,
    ProjectDefaults,
    ProjectInfo,
)
from msbuildxml.dotnet.condition import configuration_key, parse_condition

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when the reader is given no document."""


class XmlMsBuildProject:
    """An MSBuild project described by XML.

    Handles both SDK-style and legacy (namespaced) project formats. Lookups
    are naive: conditioned assignments outside the recognised
    configuration/platform shape are ignored, and the first matching
    property group wins instead of MSBuild's last-assignment-wins order.
    Values reported here can therefore differ from what MSBuild evaluates.
    """

    def __init__(
        self,
        document: ET.ElementTree | ET.Element,
        defaults: ProjectDefaults | None = None,
    ) -> None:
        if document is None:
            raise InvalidArgumentError("document must not be None")

        root = document.getroot() if isinstance(document, ET.ElementTree) else document
        self._root = root
        self._defaults = defaults or DEFAULTS

        # Default namespace as a "{uri}" tag prefix, empty for SDK-style projects
        self._ns = ""
        if root.tag.startswith("{"):
            self._ns = root.tag.split("}")[0] + "}"

        logger.debug(f"Reading project <{root.tag}> (namespace {self._ns or 'none'})")

    @property
    def output_type(self) -> str:
        """The OutputType property, ``"Library"`` when undeclared.

        Assumes the property is defined once, in an unconditioned group.
        """
        value = self._property_value("OutputType", self._unconditioned_property_groups())
        return value if value is not None else self._defaults.output_type

    @property
    def assembly_name(self) -> str | None:
        """The AssemblyName property, or ``None`` when undeclared."""
        return self._property_value("AssemblyName", self._unconditioned_property_groups())

    @property
    def target_frameworks(self) -> list[str]:
        """The TargetFrameworks, TargetFramework or TargetFrameworkVersion value, split.

        The first of the three that is present wins outright, even if it is
        empty. Returns an empty list when none is declared.
        """
        for name in TARGET_FRAMEWORK_PROPERTIES:
            value = self._property_value(name, self._unconditioned_property_groups())
            if value is not None:
                separator = self._defaults.target_framework_separator
                return [tf.strip() for tf in value.split(separator)]
        return []

    @property
    def configurations(self) -> list[tuple[str, str]]:
        """Distinct (configuration, platform) pairs declared by conditioned groups."""
        pairs: list[tuple[str, str]] = []
        for pg in self._property_groups(lambda pg: True):
            condition = parse_condition(pg.get("Condition"))
            if condition.kind is not ConditionKind.CONFIGURATION_PLATFORM:
                continue
            configuration, sep, platform = condition.value.partition("|")
            if not sep:
                continue
            if (configuration, platform) not in pairs:
                pairs.append((configuration, platform))
        return pairs

    def get_property(self, name: str) -> str | None:
        """Look up any property among unconditioned groups."""
        return self._property_value(name, self._unconditioned_property_groups())

    def get_configuration_property(
        self, name: str, configuration: str, platform: str,
    ) -> str | None:
        """Look up any property among groups conditioned on this configuration."""
        groups = self._configuration_property_groups(configuration_key(configuration, platform))
        return self._property_value(name, groups)

    def get_platform_target(self, configuration: str, platform: str) -> str:
        """The PlatformTarget for a configuration, ``"AnyCPU"`` when not overridden.

        The default does not depend on ``platform``. It is assumed the
        property is only set in groups whose condition names one complete
        configuration.
        """
        value = self.get_configuration_property("PlatformTarget", configuration, platform)
        return value if value is not None else self._defaults.platform_target

    def get_output_path(self, configuration: str, platform: str) -> str | None:
        """The OutputPath for a configuration, or ``None``."""
        return self.get_configuration_property("OutputPath", configuration, platform)

    def describe(self, configuration: str, platform: str) -> ProjectInfo:
        """Collect every property answer for one configuration."""
        return ProjectInfo(
            configuration=configuration,
            platform=platform,
            output_type=self.output_type,
            assembly_name=self.assembly_name,
            target_frameworks=self.target_frameworks,
            platform_target=self.get_platform_target(configuration, platform),
            output_path=self.get_output_path(configuration, platform),
        )

    def _property_value(self, name: str, property_groups: Iterable[ET.Element]) -> str | None:
        tag = f"{self._ns}{name}"
        for pg in property_groups:
            prop = pg.find(tag)
            if prop is not None:
                # Element value: all descendant text, "" for an empty element
                return "".join(prop.itertext())
        return None

    def _unconditioned_property_groups(self) -> list[ET.Element]:
        return self._property_groups(lambda pg: pg.get("Condition") is None)

    def _configuration_property_groups(self, key: str) -> list[ET.Element]:
        def _matches(pg: ET.Element) -> bool:
            condition = parse_condition(pg.get("Condition"))
            if condition.kind is ConditionKind.UNRECOGNIZED:
                logger.debug(f"Ignoring unrecognised condition: {condition.raw!r}")
            return condition.matches(key)

        return self._property_groups(_matches)

    def _property_groups(self, predicate: Callable[[ET.Element], bool]) -> list[ET.Element]:
        return [
            pg for pg in self._root.findall(f"{self._ns}PropertyGroup")
            if predicate(pg)
        ]
