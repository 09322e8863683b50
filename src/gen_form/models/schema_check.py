"""
Schema check result models.

These are produced by the schema validator when it inspects a candidate
schema parsed from model output. Each problem is a structured record so
callers can branch on ``kind``; ``message`` renders the human-readable
"Field N: ..." line shown to users.
"""

from enum import Enum

from pydantic import BaseModel, Field


class IssueKind(str, Enum):
    """Kinds of defects the schema validator reports."""

    NOT_AN_OBJECT = "not_an_object"
    MISSING_FIELDS = "missing_fields"
    EMPTY_FIELDS = "empty_fields"
    INVALID_FIELD = "invalid_field"
    MISSING_NAME = "missing_name"
    MISSING_LABEL = "missing_label"
    MISSING_TYPE = "missing_type"
    DUPLICATE_NAME = "duplicate_name"
    INVALID_TYPE = "invalid_type"
    MISSING_OPTIONS = "missing_options"
    INVALID_OPTIONS = "invalid_options"
    INVALID_BOUND = "invalid_bound"
    MIN_GREATER_THAN_MAX = "min_greater_than_max"
    MAX_STARS_OUT_OF_RANGE = "max_stars_out_of_range"
    INVALID_MAP_TYPE = "invalid_map_type"
    INVALID_VALIDATION = "invalid_validation"
    INVALID_ATTRIBUTE = "invalid_attribute"


class SchemaIssue(BaseModel):
    """A single defect found in a candidate schema."""

    field_index: int | None = Field(default=None, description="0-based field position, None for schema-level issues")
    field_name: str | None = Field(default=None, description="Field name when one was given")
    kind: IssueKind = Field(..., description="Defect category")
    detail: str = Field(..., description="Human-readable description")

    @property
    def message(self) -> str:
        if self.field_index is None:
            return self.detail
        return f"Field {self.field_index + 1}: {self.detail}"


class SchemaCheckResult(BaseModel):
    """Outcome of checking a candidate schema."""

    is_valid: bool = Field(..., description="Whether the candidate can be used")
    errors: list[SchemaIssue] = Field(default_factory=list, description="Blocking defects, in field order")
    warnings: list[str] = Field(default_factory=list, description="Non-blocking advisories")

    @property
    def messages(self) -> list[str]:
        """Error messages as shown to users."""
        return [issue.message for issue in self.errors]

    def summary(self) -> str:
        """All error messages joined into one line."""
        return "; ".join(self.messages)

    def get_issues(self, kind: IssueKind) -> list[SchemaIssue]:
        return [issue for issue in self.errors if issue.kind == kind]

    def get_field_issues(self, field_index: int) -> list[SchemaIssue]:
        """Get all issues for the field at a 0-based position."""
        return [issue for issue in self.errors if issue.field_index == field_index]
