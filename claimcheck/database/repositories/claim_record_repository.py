from claimcheck.claims.models import ClaimRecord
from claimcheck.database.connection import get_connection


class ClaimRecordRepository:
    """Database operations for the claim_intake_records table."""

    def insert(self, record: ClaimRecord) -> int:
        """Persist a claim record and return its id."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO claim_intake_records
                        (provider, status, requested_amount, currency, observations,
                         created_at)
                    VALUES (%s, %s, %s, %s, %s, NOW())
                    RETURNING id
                    """,
                    (
                        record.provider,
                        record.status.value,
                        record.requested_amount,
                        record.currency,
                        record.observations,
                    ),
                )
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise RuntimeError("INSERT into claim_intake_records returned no id")
        return int(row[0])
