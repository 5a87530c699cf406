from claimcheck.adjudication.mapper import map_adjudication_response
from claimcheck.adjudication.models import AdjudicationResult, ApprovedItem

FULL_RESPONSE = {
    "IsSuccess": True,
    "Output": "Claim processed",
    "output": {
        "patient": {"name": "Ana Torres", "policyNumber": "POL-7781"},
        "diagnosis": {"code": "J20.9", "description": "Acute bronchitis"},
        "approvedItems": [
            {"item": "Amoxicillin 500mg", "quantity": 2, "total": 24.5},
            {"item": "Consultation", "quantity": "1", "total": "60"},
        ],
        "totalReimbursement": 84.5,
        "justification": "Covered under outpatient plan",
        "scoreTotal": 12,
    },
}


class TestMapAdjudicationResponse:
    def test_maps_full_response(self) -> None:
        result = map_adjudication_response(FULL_RESPONSE)

        assert result.is_success
        assert result.message == "Claim processed"
        assert result.has_output
        assert result.patient.name == "Ana Torres"
        assert result.patient.policy_number == "POL-7781"
        assert result.diagnosis.code == "J20.9"
        assert result.diagnosis.description == "Acute bronchitis"
        assert result.approved_items == [
            ApprovedItem(item="Amoxicillin 500mg", quantity=2.0, total=24.5),
            ApprovedItem(item="Consultation", quantity=1.0, total=60.0),
        ]
        assert result.total_reimbursement == 84.5
        assert result.justification == "Covered under outpatient plan"
        assert result.score_total == 12.0

    def test_missing_items_render_as_empty_list(self) -> None:
        result = map_adjudication_response(
            {
                "IsSuccess": True,
                "output": {"patient": {"name": "Ana Torres"}, "totalReimbursement": 0},
            }
        )

        assert result.approved_items == []
        assert result.patient.policy_number == ""
        assert result.diagnosis.code == ""
        assert result.total_reimbursement == 0.0

    def test_list_wrapped_response_uses_first_element(self) -> None:
        result = map_adjudication_response([FULL_RESPONSE, {"IsSuccess": False}])

        assert result.is_success
        assert result.total_reimbursement == 84.5

    def test_empty_response_gives_defaults(self) -> None:
        assert map_adjudication_response(None) == AdjudicationResult()
        assert map_adjudication_response({}) == AdjudicationResult()
        assert map_adjudication_response([]) == AdjudicationResult()
        assert not AdjudicationResult().has_output

    def test_mistyped_fields_are_neutralised(self) -> None:
        result = map_adjudication_response(
            {
                "IsSuccess": "yes",
                "output": {
                    "patient": "Ana",
                    "approvedItems": [{"item": "Gauze", "quantity": True}, "bad"],
                    "totalReimbursement": "n/a",
                },
            }
        )

        assert not result.is_success
        assert result.patient.name == ""
        assert result.approved_items == [ApprovedItem(item="Gauze", quantity=0.0, total=0.0)]
        assert result.total_reimbursement == 0.0

    def test_non_finite_numbers_become_zero(self) -> None:
        result = map_adjudication_response(
            {
                "output": {
                    "approvedItems": [{"item": "Gauze", "quantity": "inf", "total": "NaN"}],
                    "totalReimbursement": "nan",
                    "scoreTotal": float("inf"),
                },
            }
        )

        assert result.total_reimbursement == 0.0
        assert result.score_total == 0.0
        assert result.approved_items == [ApprovedItem(item="Gauze", quantity=0.0, total=0.0)]
