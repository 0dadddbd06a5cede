# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""HTTP transport for JSON-RPC requests."""

# Load standard packages
from typing import NamedTuple, Protocol

# Load external packages
import requests

# Bitcoin Core reports RPC-level errors (and unknown methods) with these HTTP
# statuses, while still sending a JSON-RPC envelope in the body
RPC_ERROR_STATUSES = frozenset({404, 500})


class TransportResponse(NamedTuple):
    """A raw response body and whether it was delivered."""

    body: str
    ok: bool
    reason: str = ''


class Transport(Protocol):
    """Anything that can send one authenticated HTTP POST."""

    def post(
            self,
            url: str,
            body: str,
            username: str,
            password: str,
            headers: dict[str, str],
            verify: bool,
        ) -> TransportResponse:
        ...


class HttpTransport:
    """A transport that issues a single POST per call via requests.

    There are no retries and no connection reuse: every call is a
    self-contained request. The timeout, if any, is the only policy here.
    """

    timeout: None | float

    def __init__(self, timeout: None | float = None) -> None:
        self.timeout = timeout

    def post(
            self,
            url: str,
            body: str,
            username: str,
            password: str,
            headers: dict[str, str],
            verify: bool = True,
        ) -> TransportResponse:
        """Send a request body, return the response body and a success flag."""
        try:
            response = requests.post(
                url,
                data=body.encode('utf8'),
                auth=(username, password),
                headers=headers,
                verify=verify,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return TransportResponse('', False, f'{type(e).__name__}: {e}')
        if response.ok or (
            response.status_code in RPC_ERROR_STATUSES
            and is_json(response.headers.get('Content-Type', ''))
        ):
            return TransportResponse(response.text, True)
        reason = f'http query failed with status code {response.status_code}'
        return TransportResponse(response.text, False, reason)


def is_json(content_type: str) -> bool:
    """Check whether a Content-Type header denotes JSON."""
    return content_type.split(';')[0].strip().lower() == 'application/json'
