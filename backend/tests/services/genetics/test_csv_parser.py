"""
Unit tests for the genotype CSV parser.
Covers genotype normalization, header validation and row handling.
"""

import pytest
from dietbuddy.services.genetics.csv_parser import (
    GeneticCsvError,
    is_valid_record,
    normalize_genotype,
    parse_genotype_csv,
    validate_headers,
)
from dietbuddy.services.genetics.models import GenotypeRecord


class TestNormalizeGenotype:
    """Test genotype code normalization."""

    @pytest.mark.parametrize("raw,expected", [
        ("AG", "AG"),
        ("ag", "AG"),
        ("A/G", "AG"),
        ("C|T", "CT"),
        (" tt ", "TT"),
    ])
    def test_valid_pairs(self, raw, expected):
        """Separators and case are normalized away"""
        assert normalize_genotype(raw) == expected

    def test_single_allele_is_homozygous(self):
        """A single nucleotide is doubled: 'a' -> 'AA'"""
        assert normalize_genotype("a") == "AA"
        assert normalize_genotype("G") == "GG"

    @pytest.mark.parametrize("raw", ["", "XY", "AGT", "--", "N", "A G", "0/1"])
    def test_invalid_codes_become_empty(self, raw):
        """Anything that is not two of A/T/C/G normalizes to an empty string"""
        assert normalize_genotype(raw) == ""


class TestValidateHeaders:
    """Test required-column detection."""

    def test_all_present(self):
        assert validate_headers(["rsid", "chromosome", "position", "genotype"]) == []

    def test_case_and_whitespace_insensitive(self):
        assert validate_headers([" RSID", "Chromosome ", "POSITION", "GenoType"]) == []

    def test_reports_exactly_the_missing_columns(self):
        """Missing columns are listed in canonical order"""
        assert validate_headers(["genotype", "rsid"]) == ["chromosome", "position"]
        assert validate_headers([]) == ["rsid", "chromosome", "position", "genotype"]


class TestParseGenotypeCsv:
    """Test parsing of whole CSV documents."""

    def test_parses_rows_in_order(self):
        text = (
            "rsid,chromosome,position,genotype\n"
            "rs4988235,2,136608646,GG\n"
            "rs762551,15,75041917,a/a\n"
        )
        records = parse_genotype_csv(text)

        assert [r.rsid for r in records] == ["RS4988235", "RS762551"]
        assert records[0].chromosome == "2"
        assert records[0].position == "136608646"
        assert records[1].genotype == "AA"

    def test_header_only_fails(self):
        """Fewer than two non-blank lines is rejected"""
        with pytest.raises(GeneticCsvError, match="headers and at least one data row"):
            parse_genotype_csv("rsid,chromosome,position,genotype\n\n   \n")

    def test_empty_file_fails(self):
        with pytest.raises(GeneticCsvError, match="headers and at least one data row"):
            parse_genotype_csv("")

    def test_missing_headers_named_in_error(self):
        with pytest.raises(GeneticCsvError) as exc_info:
            parse_genotype_csv("rsid,genotype\nrs1,AA\n")
        assert str(exc_info.value) == "Missing required headers: chromosome, position"

    def test_short_rows_are_skipped(self):
        """Rows with fewer fields than the header are dropped silently"""
        text = (
            "rsid,chromosome,position,genotype\n"
            "rs4988235,2,136608646\n"
            "rs762551,15,75041917,AA\n"
        )
        records = parse_genotype_csv(text)
        assert len(records) == 1
        assert records[0].rsid == "RS762551"

    def test_extra_fields_and_columns_ignored(self):
        text = (
            "rsid,chromosome,position,genotype,notes\n"
            "rs4988235,2,136608646,GG,hello,world\n"
        )
        records = parse_genotype_csv(text)
        assert len(records) == 1
        assert records[0].genotype == "GG"

    def test_windows_line_endings(self):
        text = "rsid,chromosome,position,genotype\r\nrs4988235,2,136608646,GG\r\n"
        records = parse_genotype_csv(text)
        assert records[0].genotype == "GG"

    def test_optional_columns(self):
        text = (
            "rsid,chromosome,position,genotype,trait,interpretation,sample_id\n"
            "rs1,1,100,AA,Iron Absorption,High absorber,S-01\n"
            "rs2,1,200,CC,,,\n"
        )
        records = parse_genotype_csv(text)

        assert records[0].trait == "Iron Absorption"
        assert records[0].interpretation == "High absorber"
        assert records[0].sample_id == "S-01"
        assert records[1].trait is None
        assert records[1].sample_id is None

    def test_repeated_header_takes_later_column(self):
        text = (
            "rsid,chromosome,position,genotype,genotype\n"
            "rs762551,15,75041917,XX,AA\n"
        )
        records = parse_genotype_csv(text)

        assert len(records) == 1
        assert records[0].genotype == "AA"


class TestIsValidRecord:
    """Test row validity used for the valid/invalid counts."""

    def _record(self, rsid, genotype):
        return GenotypeRecord(rsid=rsid, chromosome="1", position="1", genotype=genotype)

    def test_valid(self):
        assert is_valid_record(self._record("RS762551", "AA"))

    def test_rejects_non_rs_identifier(self):
        assert not is_valid_record(self._record("I6000001", "AA"))

    def test_rejects_empty_genotype(self):
        assert not is_valid_record(self._record("RS9999999", ""))
