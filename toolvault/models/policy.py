"""
Brand and Policy Models

Pydantic models for the static brand catalogue, manufacturer warranty
policies and the claim analysis derived from them.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ClaimVerdict(str, Enum):
    """Coverage classification of a warranty claim."""
    LIKELY_COVERED = "likely_covered"
    PARTIALLY_COVERED = "partially_covered"
    NOT_COVERED = "not_covered"


class Brand(BaseModel):
    """Tool manufacturer with known serial prefixes."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str
    serial_prefixes: List[str] = Field(default_factory=list)
    default_warranty_years: int
    policy_text: str = ""


class SerialPrefixEntry(BaseModel):
    """Serial prefixes belonging to a single brand."""
    model_config = ConfigDict(frozen=True)

    brand_id: str
    prefixes: List[str]


class SerialMatch(BaseModel):
    """Result of matching a serial number against the prefix table."""
    model_config = ConfigDict(frozen=True)

    brand_id: str
    prefix: str


class WarrantyClause(BaseModel):
    """A single numbered clause of a warranty policy."""
    model_config = ConfigDict(frozen=True)

    section: str
    text: str


class WarrantyPolicy(BaseModel):
    """Manufacturer warranty policy for one brand."""
    model_config = ConfigDict(frozen=True)

    brand_id: str
    title: str
    duration_years: int
    clauses: List[WarrantyClause] = Field(default_factory=list)
    exclusions: List[str] = Field(default_factory=list)
    common_issues: List[str] = Field(default_factory=list)
    consumer_law_note: str = ""


class ExclusionCheck(BaseModel):
    """One exclusion condition evaluated as part of a claim analysis."""
    model_config = ConfigDict(frozen=True)

    label: str
    passed: bool
    detail: str


class WarrantyClaimAnalysis(BaseModel):
    """
    Outcome of analysing a warranty claim.

    Produced once per claim flow and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    verdict: ClaimVerdict
    confidence: int = Field(ge=0, le=100)
    relevant_clauses: List[WarrantyClause] = Field(default_factory=list)
    exclusions_check: List[ExclusionCheck] = Field(default_factory=list)
    recommendation: str
    brand_name: Optional[str] = None
