from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .rules import Diagnostic


class DiagnosticEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    rule: str
    message_id: str = Field(..., alias="messageId")
    message: str
    line: int
    column: int
    start: int
    end: int
    fix: Optional[str] = None

    @classmethod
    def from_diagnostic(cls, diag: Diagnostic) -> DiagnosticEntry:
        return cls(
            rule=diag.rule,
            messageId=diag.message_id,
            message=diag.message,
            line=diag.line,
            column=diag.column,
            start=diag.start_char,
            end=diag.end_char,
            fix=diag.replacement,
        )


class FileReport(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    path: str
    diagnostics: List[DiagnosticEntry] = Field(default_factory=list)
    fixed: bool = False
    fixes_applied: Dict[str, int] = Field(default_factory=dict, alias="fixesApplied")
    error: Optional[str] = None


class RunReport(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    tool_version: str = Field(..., alias="toolVersion")
    files: List[FileReport] = Field(default_factory=list)

    @property
    def diagnostic_count(self) -> int:
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def has_errors(self) -> bool:
        return any(f.error for f in self.files)


__all__ = ["DiagnosticEntry", "FileReport", "RunReport"]
