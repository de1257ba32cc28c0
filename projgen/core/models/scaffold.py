"""
Fallback scaffold model — directories and files to lay down by hand.

Used when a project kind's official generator is not installed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from projgen.core.models.invocation import ProjectKind


class ScaffoldFile(BaseModel):
    """A file in a fallback scaffold.

    Attributes:
        path:       Relative path inside the project directory.
        content:    Full file content.
        executable: Whether the file gets the executable bit.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    executable: bool = False


class FallbackScaffold(BaseModel):
    """Ordered directories and files for one project.

    Directories are created first (create-if-absent), then files are
    written in order. Files never reference each other.
    """

    model_config = ConfigDict(frozen=True)

    kind: ProjectKind
    project_name: str
    directories: list[str] = Field(default_factory=list)
    files: list[ScaffoldFile] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True for kinds that have no fallback layout."""
        return not self.directories and not self.files

    @property
    def file_paths(self) -> list[str]:
        return [f.path for f in self.files]
