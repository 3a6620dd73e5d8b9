"""
API resource models.

Request and response bodies of the HTTP API, kept separate from the
domain models so the wire contract can evolve on its own.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bytediff.domain.models import DiffReport


class BinaryDataResource(BaseModel):
    """Request body of a side submission."""

    data: Optional[str] = Field(None, description="Base64 encoded binary data")
    model_config = ConfigDict(extra="ignore")


class DiffInsightResource(BaseModel):
    """Location of one differing run."""

    offset: int = Field(..., ge=0, description="Index of the first differing byte")
    length: int = Field(..., ge=1, description="Number of consecutive differing bytes")


class DiffReportResource(BaseModel):
    """Response body of a report lookup."""

    status: str = Field(..., description="equal, length_mismatch or not_equal")
    insights: Optional[List[DiffInsightResource]] = Field(
        None, description="Differing runs, omitted when there are none"
    )

    @classmethod
    def from_report(cls, report: DiffReport) -> "DiffReportResource":
        insights = [
            DiffInsightResource(offset=insight.offset, length=insight.length)
            for insight in report.insights
        ]
        return cls(status=report.status.value, insights=insights or None)

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)
