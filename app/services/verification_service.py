"""Anti-automation (reCAPTCHA) verification of public form submissions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)

RECAPTCHA_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


@dataclass(frozen=True)
class VerificationResult:
    success: bool
    score: float | None = None
    error_codes: list[str] = field(default_factory=list)


class RecaptchaVerifier:
    """Checks client tokens against the reCAPTCHA siteverify endpoint.

    When ``secret_key`` is empty the verifier is disabled and the lead form is
    accepted without a token. Transport errors and malformed responses resolve
    to ``fail_open``: availability of the form wins over strict abuse checks
    unless the deployment turns it off.
    """

    def __init__(
        self,
        secret_key: str | None,
        *,
        min_score: float = 0.5,
        fail_open: bool = True,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.secret_key = secret_key or None
        self.min_score = min_score
        self.fail_open = fail_open
        self.timeout = timeout
        self._client = client

    @property
    def enabled(self) -> bool:
        return self.secret_key is not None

    def verify(self, token: str) -> VerificationResult:
        if not self.enabled:
            return VerificationResult(success=True, score=1.0)

        try:
            data = self._post(token)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("reCAPTCHA verification error, fail_open=%s: %s", self.fail_open, exc)
            return VerificationResult(success=self.fail_open)

        score = data.get("score")
        if score is not None and not isinstance(score, (int, float)):
            logger.warning("reCAPTCHA returned a non-numeric score: %r", score)
            return VerificationResult(success=self.fail_open)

        error_codes = [str(code) for code in data.get("error-codes") or []]
        success = data.get("success") is True and (score is None or score >= self.min_score)
        if not success:
            logger.warning("reCAPTCHA failed: %s score=%s", error_codes, score)
        return VerificationResult(
            success=success,
            score=float(score) if score is not None else None,
            error_codes=error_codes,
        )

    def _post(self, token: str) -> dict:
        form = {"secret": self.secret_key, "response": token}
        if self._client is not None:
            response = self._client.post(RECAPTCHA_VERIFY_URL, data=form, timeout=self.timeout)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(RECAPTCHA_VERIFY_URL, data=form)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError("unexpected reCAPTCHA response shape")
        return data
