"""Pydantic models for upstream entities and API responses."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Region(BaseModel):
    """Administrative region as returned by the upstream data API."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    lat: float
    long: float


class Entry(BaseModel):
    """One day of case statistics for one region."""

    model_config = ConfigDict(frozen=True)

    hospitalized_with_symptoms: int = Field(0, ge=0)
    intensive_care: int = Field(0, ge=0)
    total_hospitalized: int = Field(0, ge=0)
    home_isolation: int = Field(0, ge=0)
    total_positive: int = Field(0, ge=0)
    total_positive_variation: int = 0
    new_positives: int = Field(0, ge=0)
    resigned_cured: int = Field(0, ge=0)
    deceased: int = Field(0, ge=0)
    cases_from_suspected_diagnostic: int = Field(0, ge=0)
    cases_from_screening: int = Field(0, ge=0)
    total_cases: int = Field(0, ge=0)
    tampons: int = Field(0, ge=0)
    cases_tested: int = Field(0, ge=0)


class CasesPerRegion(BaseModel):
    """A region paired with its total positive cases on a given date."""

    region: Region
    cases: int


class Ordering(StrEnum):
    """Ranking sort direction."""

    ASC = "asc"
    DESC = "desc"


class Status(StrEnum):
    """Health check status values."""

    HEALTHY = "healthy"


class HealthStatus(BaseModel):
    """Health check response."""

    status: Status


class Link(BaseModel):
    """Hypermedia link."""

    href: str
    rel: str
    title: str


class RootResponse(BaseModel):
    """Root endpoint response with navigation links."""

    message: str
    links: list[Link]
