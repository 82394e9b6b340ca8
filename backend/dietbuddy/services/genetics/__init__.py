"""
Genetics Service

CSV genotype ingestion, SNP-to-trait mapping and report assembly.
"""

from .models import (
    GenotypeRecord,
    GeneticTrait,
    TraitRecommendation,
    Traceability,
    GeneticAnalysisResult,
)
from .csv_parser import (
    GeneticCsvError,
    normalize_genotype,
    parse_genotype_csv,
    validate_headers,
    is_valid_record,
)
from .trait_mapper import MAPPING_VERSION, SNP_TRAIT_MAPPING, TraitMapper, generate_recommendations
from .analysis import (
    DISCLAIMER,
    GeneticAnalysisError,
    GeneticAnalysisService,
    analyze_genetic_csv,
)

__all__ = [
    # Models
    'GenotypeRecord',
    'GeneticTrait',
    'TraitRecommendation',
    'Traceability',
    'GeneticAnalysisResult',

    # Parsing
    'GeneticCsvError',
    'normalize_genotype',
    'parse_genotype_csv',
    'validate_headers',
    'is_valid_record',

    # Mapping
    'MAPPING_VERSION',
    'SNP_TRAIT_MAPPING',
    'TraitMapper',
    'generate_recommendations',

    # Pipeline
    'DISCLAIMER',
    'GeneticAnalysisError',
    'GeneticAnalysisService',
    'analyze_genetic_csv',
]
