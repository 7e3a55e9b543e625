"""Pydantic models for flagged-alert reports."""

from pydantic import BaseModel


class RegionSummary(BaseModel):
    name: str
    state: str


class AlertReport(BaseModel):
    terms: list[str]
    summary: str
    regions: list[RegionSummary]
    link: str
