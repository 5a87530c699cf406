from claimcheck.claims.models import ClaimContext, ClaimRecord, describe_evaluation
from claimcheck.database.repositories.claim_record_repository import ClaimRecordRepository
from claimcheck.logging.logger import Log
from claimcheck.risk.aggregator import ClaimAssessment


class SubmissionGuard:
    """Writes the claim record of one run at most once.

    The ``submitted`` flag belongs to this instance; each run owns its own
    guard. The flag is raised before the write, so a failed write is not
    attempted again within the same run.
    """

    def __init__(
        self,
        repository: ClaimRecordRepository,
        context: ClaimContext,
        currency: str,
    ) -> None:
        self._repository = repository
        self._context = context
        self._currency = currency
        self.submitted = False
        self.record: ClaimRecord | None = None
        self.record_id: int | None = None

    def observe(self, assessment: ClaimAssessment) -> ClaimRecord | None:
        """Submit on the first observation; later observations are no-ops.

        Returns the record built on the first call, None afterwards.
        """
        if self.submitted:
            Log.debug("Claim record already submitted for this run, skipping")
            return None
        self.submitted = True
        record = ClaimRecord(
            provider=self._context.provider,
            status=assessment.status,
            requested_amount=self._context.requested_amount,
            currency=self._currency,
            observations=describe_evaluation(assessment.document_count),
        )
        self.record = record
        try:
            self.record_id = self._repository.insert(record)
        except Exception as exc:
            Log.error(f"Claim record submission failed, continuing: {exc}")
            return record
        Log.info(f"Claim record {self.record_id} submitted with status {record.status.value}")
        return record
