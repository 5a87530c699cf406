import pytest

from claimcheck.config.settings import Settings
from claimcheck.risk.models import RiskBandConfiguration
from claimcheck.risk.validator import default_configuration


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        validator_image_url="http://validators.test/image",
        validator_invoice_url="http://validators.test/invoice",
        validator_document_url="http://validators.test/document",
        risk_config_url="http://config.test",
        adjudication_url="http://workflow.test/adjudicate",
        retry_base_delay_seconds=0.0,
        inter_call_delay_seconds=0.0,
    )


@pytest.fixture()
def default_bands() -> RiskBandConfiguration:
    return default_configuration()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    return b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF"
