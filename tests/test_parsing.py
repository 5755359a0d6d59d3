"""Tests for parsing and validating the model reply."""

import json

import pytest

from opportunity_finder.errors import GenerationFailure, MalformedRecord
from opportunity_finder.generation.parsing import parse_opportunities
from tests.conftest import make_record_dict


class TestParseOpportunities:
    """Tests for parse_opportunities."""

    def test_parses_array_in_order(self, ten_records: list[dict]) -> None:
        """A JSON array of valid records parses to records in the same order."""
        records = parse_opportunities(json.dumps(ten_records))
        assert [r.business_type for r in records] == [f"Negocio {i}" for i in range(10)]

    def test_surrounding_whitespace_ignored(self, sample_record: dict) -> None:
        """Leading/trailing whitespace around the array is fine."""
        records = parse_opportunities("\n  " + json.dumps([sample_record]) + "\n")
        assert len(records) == 1

    def test_markdown_fence_unwrapped(self, sample_record: dict) -> None:
        """A ```json fenced reply is unwrapped before parsing."""
        text = "```json\n" + json.dumps([sample_record]) + "\n```"
        records = parse_opportunities(text)
        assert records[0].sector == "Hostelería"

    def test_envelope_object_unwrapped(self, sample_record: dict) -> None:
        """{'opportunities': [...]} (strict-mode envelope) is accepted."""
        records = parse_opportunities(json.dumps({"opportunities": [sample_record]}))
        assert len(records) == 1

    def test_invalid_json_raises(self) -> None:
        """Unparsable text is a GenerationFailure."""
        with pytest.raises(GenerationFailure):
            parse_opportunities("Aquí tienes las oportunidades: [")

    def test_empty_array_raises(self) -> None:
        """'[]' is rejected as an empty result."""
        with pytest.raises(GenerationFailure):
            parse_opportunities("[]")

    @pytest.mark.parametrize("reply", ['{"sector": "x"}', '"texto"', "42", "null", ""])
    def test_non_array_raises(self, reply: str) -> None:
        """Anything other than a non-empty array is a GenerationFailure."""
        with pytest.raises(GenerationFailure):
            parse_opportunities(reply)

    def test_malformed_record_reports_index_and_fields(self, sample_record: dict) -> None:
        """A record violating the schema raises MalformedRecord with its index."""
        bad = make_record_dict(easeOfCreation=15)
        bad["acceptanceProbability"]["rating"] = "Muy alta"
        with pytest.raises(MalformedRecord) as exc_info:
            parse_opportunities(json.dumps([sample_record, bad]))
        assert exc_info.value.index == 1
        fields = exc_info.value.failing_fields()
        assert "easeOfCreation" in fields
        assert "acceptanceProbability.rating" in fields

    def test_malformed_record_is_generation_failure(self) -> None:
        """MalformedRecord is handled anywhere GenerationFailure is."""
        with pytest.raises(GenerationFailure):
            parse_opportunities(json.dumps(["not an object"]))
