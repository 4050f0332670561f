"""msbuildxml - Read build settings from parsed MSBuild project XML."""

from msbuildxml.config import ConditionKind, ParsedCondition, ProjectDefaults, ProjectInfo
from msbuildxml.dotnet.condition import configuration_key, parse_condition
from msbuildxml.dotnet.project import InvalidArgumentError, XmlMsBuildProject

__version__ = "0.1.0"
__all__ = [
    "ConditionKind",
    "InvalidArgumentError",
    "ParsedCondition",
    "ProjectDefaults",
    "ProjectInfo",
    "XmlMsBuildProject",
    "configuration_key",
    "parse_condition",
]
