from typing import Any

import httpx

from claimcheck.logging.logger import Log
from claimcheck.risk.exceptions import RiskConfigurationError
from claimcheck.risk.models import DEFAULT_BANDS, RiskBandConfiguration
from claimcheck.risk.validator import default_configuration, validate_bands
from claimcheck.transport.responses import extract_error_message, read_json
from claimcheck.validation.exceptions import TransientCallError
from claimcheck.validation.retry import call_with_retry, linear_backoff

_BANDS_KEYS = ("bands", "RISK_LEVELS")


class RiskConfigClient:
    """Reads and updates risk bands and risk weights on the configuration service."""

    def __init__(
        self,
        client: httpx.Client,
        base_url: str,
        *,
        max_attempts: int = 3,
        retry_base_delay: float = 1.0,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._max_attempts = max_attempts
        self._backoff = linear_backoff(retry_base_delay)

    def fetch_bands(self) -> RiskBandConfiguration:
        """Load the administrator's bands, falling back to the defaults on any failure."""
        try:
            data = self._request("GET", "/risk-levels")
            config = validate_bands(_extract_bands(data))
        except (RiskConfigurationError, TransientCallError) as exc:
            Log.warning(f"Using default risk bands {DEFAULT_BANDS}: {exc}")
            return default_configuration()
        Log.info(f"Loaded risk bands {config.as_mapping()}")
        return config

    def update_bands(self, bands: dict[str, list[int]]) -> RiskBandConfiguration:
        """Validate ``bands`` locally, then store them.

        Raises:
            RiskConfigurationError: if the bands are invalid or the service refuses them.
        """
        validate_bands(bands)
        try:
            data = self._request("PUT", "/risk-levels", json={"RISK_LEVELS": bands})
        except TransientCallError as exc:
            raise RiskConfigurationError(f"Could not update risk bands: {exc}") from exc
        stored = data.get("RISK_LEVELS") if isinstance(data, dict) else None
        return validate_bands(stored or bands)

    def fetch_weights(self) -> dict[str, float]:
        """Load the per-check penalty weights.

        Raises:
            RiskConfigurationError: if the weights cannot be loaded.
        """
        try:
            data = self._request("GET", "/config/risk-weights")
        except TransientCallError as exc:
            raise RiskConfigurationError(f"Could not load risk weights: {exc}") from exc
        weights = data.get("RISK_WEIGHTS") if isinstance(data, dict) else None
        return _validate_weights(weights or {})

    def update_weights(self, weights: dict[str, float]) -> dict[str, float]:
        validated = _validate_weights(weights)
        try:
            data = self._request(
                "PUT", "/config/risk-weights", json={"RISK_WEIGHTS": validated}
            )
        except TransientCallError as exc:
            raise RiskConfigurationError(f"Could not update risk weights: {exc}") from exc
        stored = data.get("RISK_WEIGHTS") if isinstance(data, dict) else None
        return _validate_weights(stored or validated)

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        return call_with_retry(
            lambda: self._send(method, path, json),
            max_attempts=self._max_attempts,
            backoff=self._backoff,
            operation_name=f"{method} {path}",
        )

    def _send(self, method: str, path: str, json: Any) -> Any:
        try:
            response = self._client.request(method, f"{self._base_url}{path}", json=json)
        except httpx.TransportError as exc:
            raise TransientCallError(f"Configuration service unreachable: {exc}") from exc
        except httpx.RequestError as exc:
            raise RiskConfigurationError(
                f"Configuration service sent an unreadable response: {exc}"
            ) from exc
        if response.is_error:
            raise RiskConfigurationError(extract_error_message(response))
        return read_json(response)


def _extract_bands(data: Any) -> Any:
    if isinstance(data, dict):
        for key in _BANDS_KEYS:
            if data.get(key):
                return data[key]
    return data


def _validate_weights(raw: Any) -> dict[str, float]:
    if not isinstance(raw, dict):
        raise RiskConfigurationError("Risk weights must be a mapping of check name to number")
    weights: dict[str, float] = {}
    for name, value in raw.items():
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise RiskConfigurationError(f"Risk weight '{name}' must be a number")
        if value < 0:
            raise RiskConfigurationError(f"Risk weight '{name}' must not be negative")
        weights[str(name)] = float(value)
    return weights
