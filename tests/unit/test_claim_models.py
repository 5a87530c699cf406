from decimal import Decimal

import pytest

from claimcheck.claims.models import ClaimContext, describe_evaluation


def _claim_data(total_amount: object = "250.50") -> dict:
    return {
        "patientInfo": {"name": "Ana Torres", "policyNumber": "POL-7781"},
        "providerDetails": {"name": " Clinica Central "},
        "diagnosis": {"code": "J20.9", "totalAmount": total_amount},
    }


class TestClaimContext:
    def test_from_dict_keeps_sections(self) -> None:
        context = ClaimContext.from_dict(_claim_data())

        assert context.patient_info["policyNumber"] == "POL-7781"
        assert context.to_payload() == {
            "patientInfo": {"name": "Ana Torres", "policyNumber": "POL-7781"},
            "providerDetails": {"name": " Clinica Central "},
            "diagnosis": {"code": "J20.9", "totalAmount": "250.50"},
        }

    def test_missing_sections_default_to_empty(self) -> None:
        context = ClaimContext.from_dict({})

        assert context.to_payload() == {
            "patientInfo": {},
            "providerDetails": {},
            "diagnosis": {},
        }
        assert context.provider == ""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("250.50", Decimal("250.50")),
            (120, Decimal("120")),
            (99.5, Decimal("99.5")),
            (None, Decimal("0")),
            ("  ", Decimal("0")),
        ],
    )
    def test_requested_amount(self, raw: object, expected: Decimal) -> None:
        assert ClaimContext.from_dict(_claim_data(raw)).requested_amount == expected

    @pytest.mark.parametrize("raw", ["abc", True, "NaN", "Infinity"])
    def test_non_numeric_amount_is_rejected(self, raw: object) -> None:
        with pytest.raises(ValueError, match="numeric"):
            ClaimContext.from_dict(_claim_data(raw))

    def test_provider_name_fallbacks(self) -> None:
        context = ClaimContext(provider_details={"providerName": "Lab Norte"})

        assert context.provider == "Lab Norte"

    def test_provider_name_is_trimmed(self) -> None:
        assert ClaimContext.from_dict(_claim_data()).provider == "Clinica Central"


def test_describe_evaluation() -> None:
    assert describe_evaluation(3) == "3 document(s) evaluated"
