"""HTTP client used by the UI to talk to the transaction API."""

import json
import math
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .logic import parse_float, split_name_field
from .models import Transaction


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def build_payload(*, name: str, description: str, date_time: str) -> dict:
    """Build the POST body from the raw form fields.

    The leading token of ``name`` becomes the price. A token that is not a
    number gives NaN, which is sent as ``null`` like ``JSON.stringify``.
    """
    token, label = split_name_field(name)
    price = parse_float(token)
    return {
        "price": price if math.isfinite(price) else None,
        "name": label,
        "description": description,
        "dateTime": date_time,
    }


class ApiClient:
    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}/transaction"

    def _send(self, request: Request):
        try:
            with urlopen(request) as response:  # noqa: S310 - URL comes from trusted env config
                return json.loads(response.read().decode("utf-8"))
        except HTTPError as exc:
            body = exc.read().decode("utf-8", errors="replace")[:500]
            raise ApiError(
                f"API request failed with status {exc.code}: {body}",
                status_code=exc.code,
                body=body,
            ) from exc
        except URLError as exc:
            raise ApiError(f"API unreachable: {exc.reason}") from exc
        except ValueError as exc:
            raise ApiError(f"API returned invalid JSON: {exc}") from exc

    def get_transactions(self) -> list[Transaction]:
        request = Request(
            url=self.collection_url,
            headers={"Accept": "application/json"},
            method="GET",
        )
        rows = self._send(request)
        return [Transaction.from_dict(row) for row in rows]

    def add_transaction(self, payload: dict) -> Transaction:
        request = Request(
            url=self.collection_url,
            data=json.dumps(payload).encode("utf-8"),
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            method="POST",
        )
        return Transaction.from_dict(self._send(request))
