"""
Data models for the genetic trait analysis service.
These models represent the parsed CSV rows, the interpreted traits and the
final analysis report that is persisted and returned to clients.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

RecommendationType = Literal["diet", "supplement", "lifestyle"]
RecommendationConfidence = Literal["low", "moderate", "high"]
TraitConfidence = Literal["low", "moderate", "high", "user_provided"]


class GenotypeRecord(BaseModel):
    """Represents a single data row from an uploaded genotype CSV."""
    rsid: str = Field(..., description="Variant identifier, upper-cased (e.g., RS4988235)")
    chromosome: str = Field(..., description="Chromosome label as uploaded")
    position: str = Field(..., description="Position as uploaded")
    genotype: str = Field(..., description="Normalized two-letter genotype, or empty if invalid")
    trait: Optional[str] = Field(None, description="User-supplied trait name override")
    interpretation: Optional[str] = Field(None, description="User-supplied interpretation override")
    sample_id: Optional[str] = Field(None, description="Sample identifier column, if present")

    def has_user_trait(self) -> bool:
        return bool(self.trait and self.interpretation)


class TraitRecommendation(BaseModel):
    """A single tagged recommendation attached to a trait."""
    type: RecommendationType = Field(..., description="diet, supplement or lifestyle")
    text: str = Field(..., description="Recommendation text")
    confidence: RecommendationConfidence = Field(..., description="low, moderate or high")


class GeneticTrait(BaseModel):
    """Interpreted trait derived from one or more genotype observations."""
    trait_name: str = Field(..., description="Trait name (e.g., Lactose Tolerance)")
    supporting_snps: List[str] = Field(default_factory=list, description="Supporting variant identifiers")
    interpretation: str = Field(..., description="Human-readable interpretation")
    recommendations: List[TraitRecommendation] = Field(default_factory=list)
    confidence: TraitConfidence = Field(..., description="low, moderate, high or user_provided")


class Traceability(BaseModel):
    """Upload metadata attached to every analysis result."""
    file_name: str
    upload_time: str = Field(..., description="ISO8601 upload timestamp (UTC)")
    mapping_version: str = Field(..., description="Version tag of the SNP reference table")
    hash: str = Field(..., description="SHA-256 hex digest of the uploaded bytes")


class GeneticAnalysisResult(BaseModel):
    """Final report for one genotype upload."""
    sample_id: Optional[str] = Field(None, description="Sample identifier taken from the upload")
    upload_hash: str = Field(..., description="SHA-256 hex digest of the uploaded bytes")
    parsed_rows: int = Field(..., ge=0, description="Rows retained by the parser")
    valid_rows: int = Field(..., ge=0, description="Rows with a reference-SNP id and valid genotype")
    invalid_rows: int = Field(..., ge=0, description="parsed_rows - valid_rows")
    traits: List[GeneticTrait] = Field(default_factory=list)
    traceability: Traceability
    badges_awarded: List[str] = Field(default_factory=list)
    disclaimer: str
