from __future__ import annotations

import re
from typing import Dict, List, Sequence

from .models import GenotypeRecord


# ----------------------------------------------------------------------
# Constants
# ----------------------------------------------------------------------

REQUIRED_COLUMNS: List[str] = ["rsid", "chromosome", "position", "genotype"]
OPTIONAL_COLUMNS: List[str] = ["trait", "interpretation", "sample_id"]

RSID_PREFIX = "RS"

_SEPARATOR_RE = re.compile(r"[/|]")
_GENOTYPE_RE = re.compile(r"^[ATCG]{2}$")
_ALLELE_RE = re.compile(r"^[ATCG]$")


class GeneticCsvError(ValueError):
    pass


def normalize_genotype(genotype: str) -> str:
    """
    Normalize a genotype code.

    Removes ``/`` and ``|`` separators and upper-cases. A single allele is
    treated as homozygous (``"a"`` -> ``"AA"``). Anything that is not two
    nucleotides from {A,T,C,G} after that normalizes to ``""``.
    """
    if not genotype:
        return ""

    normalized = _SEPARATOR_RE.sub("", genotype).upper().strip()

    if _ALLELE_RE.match(normalized):
        normalized = normalized + normalized

    if not _GENOTYPE_RE.match(normalized):
        return ""

    return normalized


def validate_headers(headers: Sequence[str]) -> List[str]:
    """Return the required columns absent from ``headers`` (case-insensitive)."""
    normalized = {h.strip().lower() for h in headers}
    return [col for col in REQUIRED_COLUMNS if col not in normalized]


def is_valid_record(record: GenotypeRecord) -> bool:
    """A row is usable for mapping if it has a reference-SNP id and a valid genotype."""
    return (
        bool(record.rsid)
        and record.rsid.startswith(RSID_PREFIX)
        and bool(_GENOTYPE_RE.match(record.genotype or ""))
    )


def parse_genotype_csv(text: str) -> List[GenotypeRecord]:
    """
    Parse genotype CSV text into records.

    The first non-empty line is the header and must contain the
    ``rsid, chromosome, position, genotype`` columns. Data rows with fewer
    fields than the header are skipped.

    Raises:
        GeneticCsvError: empty file, no data rows, or missing required columns.
    """
    lines = [line for line in text.split("\n") if line.strip()]

    if len(lines) < 2:
        raise GeneticCsvError("CSV file must contain headers and at least one data row")

    headers = [h.strip().lower() for h in lines[0].split(",")]
    missing = validate_headers(headers)
    if missing:
        raise GeneticCsvError(f"Missing required headers: {', '.join(missing)}")

    records: List[GenotypeRecord] = []
    for line in lines[1:]:
        values = [v.strip() for v in line.split(",")]
        if len(values) < len(headers):
            continue

        row: Dict[str, str] = {}
        for idx, header in enumerate(headers):
            # a repeated header name takes the later column
            row[header] = values[idx]

        records.append(_row_to_record(row))

    return records


def _row_to_record(row: Dict[str, str]) -> GenotypeRecord:
    return GenotypeRecord(
        rsid=row["rsid"].upper(),
        chromosome=row["chromosome"],
        position=row["position"],
        genotype=normalize_genotype(row["genotype"]),
        trait=row.get("trait") or None,
        interpretation=row.get("interpretation") or None,
        sample_id=row.get("sample_id") or None,
    )
