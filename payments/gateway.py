import requests
from django.conf import settings


class RazorpayError(Exception):
    pass


class RazorpayClient:
    """
    Minimal Razorpay REST client. Built explicitly from settings
    (see build_gateway) and passed into the payment services.
    """

    def __init__(self, key_id: str, key_secret: str, *, base_url: str, timeout: float, session=None):
        self.key_id = key_id
        self.key_secret = key_secret
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def create_order(self, payload: dict) -> dict:
        """POST /orders. Returns the gateway order object as-is."""
        if not self.key_id or not self.key_secret:
            raise RazorpayError("Razorpay credentials are not configured")

        try:
            resp = self.session.post(
                f"{self.base_url}/orders",
                auth=(self.key_id, self.key_secret),
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RazorpayError(f"Network error: {e}") from e

        if resp.status_code not in (200, 201):
            # try to surface the error body
            try:
                err = resp.json()
            except ValueError:
                err = resp.text
            raise RazorpayError(f"API error {resp.status_code}: {err}")

        try:
            data = resp.json()
        except ValueError as e:
            raise RazorpayError(f"Bad response format: {e}") from e
        if not isinstance(data, dict) or 'id' not in data:
            raise RazorpayError(f"Bad response format: {data!r}")
        return data


def build_gateway() -> RazorpayClient:
    return RazorpayClient(
        settings.RAZORPAY_KEY_ID,
        settings.RAZORPAY_KEY_SECRET,
        base_url=settings.RAZORPAY_API_BASE,
        timeout=settings.RAZORPAY_TIMEOUT,
    )
