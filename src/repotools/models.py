"""Data structures shared by the repository tools.

- RepositoryFile: one entry of the file snapshot the tools operate on
- FileChunk: a fragment returned by the external semantic search
- LineMatch / GrepOutcome: results of scanning one file's text
- TextContent: the content block every tool handler returns
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union


# =============================================================================
# Snapshot Files
# =============================================================================

class FileStatus(str, Enum):
    """Processing status of a file in the snapshot."""
    PENDING = "pending"          # Uploaded, not yet parsed
    PROCESSING = "processing"    # Text extraction / embedding in progress
    COMPLETED = "completed"      # Text available for grep/read
    ERROR = "error"              # Processing failed


@dataclass(frozen=True)
class RepositoryFile:
    """A file in the snapshot.

    Only completed files with non-empty text take part in grep and read;
    every file is visible to ls and glob.
    """
    name: str
    status: FileStatus = FileStatus.COMPLETED
    text: str | None = None
    id: str | None = None
    error: str | None = None

    def __post_init__(self):
        if not isinstance(self.status, FileStatus):
            object.__setattr__(self, "status", FileStatus(self.status))

    @property
    def is_readable(self) -> bool:
        return self.status == FileStatus.COMPLETED and bool(self.text)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "text": self.text,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RepositoryFile":
        """Deserialize from dictionary.

        Unknown statuses are kept out of the grep/read path by mapping them
        to PENDING.
        """
        try:
            status = FileStatus(data.get("status", "completed"))
        except ValueError:
            status = FileStatus.PENDING
        return cls(
            name=data["name"],
            status=status,
            text=data.get("text"),
            id=data.get("id"),
            error=data.get("error"),
        )


@dataclass(frozen=True)
class FileChunk:
    """A retrieved fragment of file text from semantic search."""
    file: RepositoryFile
    text: str
    similarity: float | None = None  # 0..1 when the backend reports it


# =============================================================================
# Grep Results
# =============================================================================

@dataclass(frozen=True)
class MatchSpan:
    """Offsets of one match within a line."""
    start: int
    end: int
    text: str


@dataclass
class LineMatch:
    """A reported line: either a real match or surrounding context."""
    line_number: int                                  # 1-indexed
    content: str
    spans: list[MatchSpan] = field(default_factory=list)
    is_context_only: bool = False


@dataclass
class GrepOutcome:
    """Result of scanning one text for a pattern."""
    matches: list[LineMatch] = field(default_factory=list)
    truncated: bool = False
    match_count: int = 0


# =============================================================================
# Content Blocks
# =============================================================================

@dataclass(frozen=True)
class TextContent:
    """Plain text block returned by a tool handler."""
    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}


# Only text is produced today; new block kinds join this union.
ContentBlock = Union[TextContent]
