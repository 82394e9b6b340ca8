"""
Genetic Analysis Pipeline - Orchestrates CSV rows to records, traits and the stored report.

Receives the raw upload from the API route, runs the parser and trait
mapper, assembles a GeneticAnalysisResult and persists it under a fixed key,
replacing any prior result.
"""
import asyncio
import hashlib
import logging
import time
from datetime import datetime, timezone
from typing import Optional

from dietbuddy.storage import GENETIC_ANALYSIS_KEY, LocalStore, StorageError

from .csv_parser import GeneticCsvError, is_valid_record, parse_genotype_csv
from .models import GeneticAnalysisResult, Traceability
from .trait_mapper import TraitMapper

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "This service provides informational recommendations only and is not a medical "
    "diagnosis. Always consult a licensed healthcare professional before starting "
    "supplements or major diet changes."
)

DEFAULT_BADGES = ["DNA-Verified", "First-Report"]

ANALYSIS_POINTS = 50


class GeneticAnalysisError(ValueError):
    """Single user-facing error for any failed analysis."""
    pass


def compute_upload_hash(content: bytes) -> str:
    return hashlib.sha256(content).hexdigest()


def analyze_genetic_csv(
    content: bytes,
    file_name: str,
    *,
    mapper: Optional[TraitMapper] = None,
) -> GeneticAnalysisResult:
    """
    Full pipeline: decode the bytes, parse, validate, map and build the report.

    Raises:
        GeneticAnalysisError: the file could not be decoded, failed header
            validation, or parsing raised unexpectedly.
    """
    mapper = mapper or TraitMapper()

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise GeneticAnalysisError("Failed to read file: not valid UTF-8 text") from e

    try:
        records = parse_genotype_csv(text)
    except GeneticCsvError as e:
        raise GeneticAnalysisError(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error parsing %s", file_name)
        raise GeneticAnalysisError(f"Analysis failed: {e}") from e

    valid_records = [r for r in records if is_valid_record(r)]
    traits = mapper.map_records(valid_records)

    upload_hash = compute_upload_hash(content)
    sample_id = next((r.sample_id for r in records if r.sample_id), None)

    return GeneticAnalysisResult(
        sample_id=sample_id,
        upload_hash=upload_hash,
        parsed_rows=len(records),
        valid_rows=len(valid_records),
        invalid_rows=len(records) - len(valid_records),
        traits=traits,
        traceability=Traceability(
            file_name=file_name,
            upload_time=datetime.now(timezone.utc).isoformat(),
            mapping_version=mapper.version,
            hash=upload_hash,
        ),
        badges_awarded=list(DEFAULT_BADGES),
        disclaimer=DISCLAIMER,
    )


class GeneticAnalysisService:
    """Runs uploads and owns the persisted 'current result'."""

    def __init__(self, store: LocalStore, gamification=None, mapper: Optional[TraitMapper] = None):
        self.store = store
        self.gamification = gamification
        self.mapper = mapper or TraitMapper()
        self._lock = asyncio.Lock()

    async def analyze_upload(self, content: bytes, file_name: str) -> GeneticAnalysisResult:
        # Uploads are serialised; the last one to finish owns the stored result.
        async with self._lock:
            logger.info("Starting genetic analysis for %s (%d bytes)", file_name, len(content))
            start_time = time.time()

            # Parsing runs off the event loop; the lock is held across the await.
            result = await asyncio.to_thread(
                analyze_genetic_csv, content, file_name, mapper=self.mapper
            )

            try:
                self.store.set(GENETIC_ANALYSIS_KEY, result.model_dump())
            except StorageError as e:
                raise GeneticAnalysisError(f"Could not save analysis result: {e}") from e

            if self.gamification is not None:
                try:
                    self.gamification.add_points(ANALYSIS_POINTS)
                except StorageError as e:
                    # The result is already stored; a lost award does not fail the upload.
                    logger.warning("Could not award analysis points: %s", e)

            logger.info(
                "Genetic analysis finished in %.2fs: %d parsed, %d valid, %d traits",
                time.time() - start_time,
                result.parsed_rows,
                result.valid_rows,
                len(result.traits),
            )
            return result

    def get_result(self) -> Optional[GeneticAnalysisResult]:
        data = self.store.get(GENETIC_ANALYSIS_KEY)
        if data is None:
            return None
        try:
            return GeneticAnalysisResult.model_validate(data)
        except ValueError as e:
            logger.error("Error loading saved genetic analysis: %s", e)
            return None

    def clear(self) -> bool:
        removed = self.store.remove(GENETIC_ANALYSIS_KEY)
        logger.info("Genetic analysis cleared (existed=%s)", removed)
        return removed
