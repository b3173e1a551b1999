"""Error types raised while loading manifests and normalizing tool arguments."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence

# ArgumentIssue kinds
MISSING_REQUIRED = "missing_required"
TYPE_MISMATCH = "type_mismatch"
UNKNOWN_PARAMETER = "unknown_parameter"
INVALID_PAYLOAD = "invalid_payload"


class ToolError(Exception):
    """Base class for all hardware tool errors."""


@dataclass(frozen=True)
class ManifestIssue:
    """One problem found in a manifest, located by its field path."""

    path: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        where = self.path or "<manifest>"
        if self.value is None:
            return f"{where}: {self.message}"
        return f"{where}: {self.message} (got {self.value!r})"


class ManifestError(ToolError):
    """A manifest could not be turned into a ToolManifest."""

    def __init__(self, source: Optional[str], issues: Sequence[ManifestIssue]):
        self.source = source or "<string>"
        self.issues: List[ManifestIssue] = list(issues)
        details = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"{self.source}: {details}")


class ManifestParseError(ManifestError):
    """Manifest text does not match the manifest grammar (syntax, missing field, wrong shape)."""


class ManifestValidationError(ManifestError):
    """Manifest parsed but breaks a semantic rule (type tag, default, duplicate name)."""


@dataclass(frozen=True)
class ArgumentIssue:
    """One problem found in a caller-supplied argument set."""

    kind: str
    parameter: Optional[str]
    message: str
    expected: Optional[str] = None
    actual: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ArgumentError(ToolError):
    """Caller-supplied arguments were rejected for a tool call.

    Carries every issue found so that a model-driven caller can correct all of
    them in a single retry.
    """

    def __init__(self, tool: str, issues: Sequence[ArgumentIssue]):
        self.tool = tool
        self.issues: List[ArgumentIssue] = list(issues)
        super().__init__("; ".join(issue.message for issue in self.issues))

    @property
    def kinds(self) -> List[str]:
        return [issue.kind for issue in self.issues]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict for the model-facing layer."""
        return {
            "error": "invalid_arguments",
            "tool": self.tool,
            "message": str(self),
            "issues": [issue.to_dict() for issue in self.issues],
        }
