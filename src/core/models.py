import time
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field


class DirectoryEntry(BaseModel):
    """One record of a directory listing: name, full path and type predicates."""
    name: str
    path: str
    is_file: bool = False
    is_dir: bool = False
    is_symlink: bool = False

    @property
    def is_other(self) -> bool:
        # FIFOs, sockets, devices
        return not (self.is_file or self.is_dir)


class ParsedLiteral(BaseModel):
    value: Any = None


class RawString(BaseModel):
    text: str


FieldValue = Union[ParsedLiteral, RawString]


class RunContext(BaseModel):
    """State carried across a single conversion run."""
    input_dir: Optional[str] = None
    output_dir: Optional[str] = None
    started_at: float = Field(default_factory=time.perf_counter)

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.started_at) * 1000


class ConversionOutcome(BaseModel):
    name: str
    output_path: str
    success: bool
    error: Optional[str] = None


class RunSummary(BaseModel):
    converted: int
    elapsed_ms: float
    message: str
    outcomes: List[ConversionOutcome] = []
