"""
Trait Mapper - SNP to nutrition-trait interpretation.

Maps validated genotype records to human-readable traits using a static
reference table, then attaches canned recommendations from a fixed rule set.
Deterministic: the same records always produce the same traits in the same
order.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Set, Tuple

from .csv_parser import is_valid_record
from .models import GeneticTrait, GenotypeRecord, TraitRecommendation

logger = logging.getLogger(__name__)

MAPPING_VERSION = "v1.0"


# ============================================================================
# Reference Table
# ============================================================================

SNP_TRAIT_MAPPING: Dict[str, Dict] = {
    "rs4988235": {
        "trait": "Lactose Tolerance",
        "mapping": {
            "GG": "Lactose tolerant",
            "AA": "Lactose intolerant",
            "AG": "Intermediate lactose tolerance",
            "GA": "Intermediate lactose tolerance",
        },
    },
    "rs1801133": {
        "trait": "Folate Metabolism",
        "mapping": {
            "CC": "Normal folate metabolism",
            "CT": "Intermediate (reduced) folate function",
            "TC": "Intermediate (reduced) folate function",
            "TT": "Reduced folate function (consider increased dietary folate)",
        },
    },
    "rs762551": {
        "trait": "Caffeine Metabolism",
        "mapping": {
            "AA": "Fast metabolizer",
            "AC": "Intermediate",
            "CA": "Intermediate",
            "CC": "Slow metabolizer (recommend lower caffeine)",
        },
    },
    "rs2282679": {
        "trait": "Vitamin D Binding",
        "mapping": {
            "GG": "Normal vitamin D binding",
            "GT": "Reduced vitamin D binding (consider higher vitamin D sources)",
            "TG": "Reduced vitamin D binding (consider higher vitamin D sources)",
            "TT": "Reduced vitamin D binding (consider higher vitamin D sources)",
        },
    },
    "rs174537": {
        "trait": "Omega-3 Processing",
        "mapping": {
            "GG": "Normal omega-3 conversion",
            "GT": "Intermediate omega-3 conversion",
            "TG": "Intermediate omega-3 conversion",
            "TT": "Lower endogenous conversion (recommend dietary omega-3)",
        },
    },
    "rs9939609": {
        "trait": "FTO Obesity Risk",
        "mapping": {
            "TT": "Typical risk",
            "AT": "Intermediate risk",
            "TA": "Intermediate risk",
            "AA": "Higher risk",
        },
    },
}


# ============================================================================
# Recommendation Rules
# ============================================================================

class RecommendationRule(NamedTuple):
    trait: str
    keyword: str
    type: str
    text: str
    confidence: str


RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule(
        "Lactose Tolerance", "intolerant", "diet",
        "Replace dairy milk with soy, almond, or oat milk. Choose lactose-free yogurt and cheese alternatives.",
        "high",
    ),
    RecommendationRule(
        "Folate Metabolism", "reduced", "diet",
        "Include daily servings of spinach, lentils, chickpeas, and citrus fruits. Consider folate-rich whole grains.",
        "moderate",
    ),
    RecommendationRule(
        "Folate Metabolism", "reduced", "supplement",
        "Consult healthcare provider about folate supplementation.",
        "low",
    ),
    RecommendationRule(
        "Caffeine Metabolism", "slow", "lifestyle",
        "Limit caffeine to <200mg daily. Avoid coffee after 2 PM to prevent sleep disruption.",
        "high",
    ),
)


def generate_recommendations(trait: str, interpretation: str) -> List[TraitRecommendation]:
    """Match (trait, interpretation keyword) against the fixed rule set."""
    lowered = interpretation.lower()
    return [
        TraitRecommendation(type=rule.type, text=rule.text, confidence=rule.confidence)
        for rule in RECOMMENDATION_RULES
        if rule.trait == trait and rule.keyword in lowered
    ]


# ============================================================================
# Mapper
# ============================================================================

class TraitMapper:
    """Maps genotype records to traits; first occurrence of a trait name wins."""

    def __init__(self, mapping: Optional[Dict[str, Dict]] = None, version: str = MAPPING_VERSION):
        self.mapping = {k.lower(): v for k, v in (mapping or SNP_TRAIT_MAPPING).items()}
        self.version = version

    def map_records(self, records: Iterable[GenotypeRecord]) -> List[GeneticTrait]:
        traits: List[GeneticTrait] = []
        seen: Set[str] = set()

        for record in records:
            if not is_valid_record(record):
                continue

            trait = self._map_record(record)
            if trait is None or trait.trait_name in seen:
                continue

            traits.append(trait)
            seen.add(trait.trait_name)

        logger.info("Mapped %d traits", len(traits), extra={"mapping_version": self.version})
        return traits

    def _map_record(self, record: GenotypeRecord) -> Optional[GeneticTrait]:
        # A row carrying its own trait/interpretation pair never falls through
        # to the reference table.
        if record.has_user_trait():
            return GeneticTrait(
                trait_name=record.trait,
                supporting_snps=[record.rsid],
                interpretation=record.interpretation,
                recommendations=generate_recommendations(record.trait, record.interpretation),
                confidence="user_provided",
            )

        snp = self.mapping.get(record.rsid.lower())
        if snp is None or not record.genotype:
            return None

        interpretation = snp["mapping"].get(record.genotype)
        if interpretation is None:
            return None

        return GeneticTrait(
            trait_name=snp["trait"],
            supporting_snps=[record.rsid],
            interpretation=interpretation,
            recommendations=generate_recommendations(snp["trait"], interpretation),
            confidence="moderate",
        )
