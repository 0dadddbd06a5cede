# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""A generic client for the Bitcoin Core JSON-RPC."""

# Load standard packages
from collections.abc import Sequence
from decimal import Decimal
from typing import Any
import json
import logging

# Load local packages
from .outcome import Err, ErrorKind, Ok, OkNull, Outcome
from .transport import HttpTransport, Transport

PROTOCOL_VERSION = '1.0'
REQUEST_ID = 'py-bitcoin-rpc'
DEFAULT_URL = 'http://127.0.0.1:8332/'
HEADERS = {'Content-Type': 'application/json'}

logger = logging.getLogger(__name__)


def encode_decimal(value: Any) -> float:
    """Serialize BTC amounts held as Decimal."""
    if isinstance(value, Decimal):
        return float(value)
    name = type(value).__name__
    raise TypeError(f'Object of type {name} is not JSON serializable')


def encode_request(method: str, params: Sequence[Any] = ()) -> str:
    """Serialize a JSON-RPC request envelope."""
    request = {
        'jsonrpc': PROTOCOL_VERSION,
        'id': REQUEST_ID,
        'method': method,
        'params': list(params),
    }
    return json.dumps(request, default=encode_decimal)


def decode_response(
        raw: str | bytes,
        log: logging.Logger | logging.LoggerAdapter = logger,
    ) -> Outcome:
    """Unwrap a JSON-RPC response envelope, never raise."""
    try:
        content = json.loads(raw, parse_float=Decimal)
    except (ValueError, TypeError) as e:
        # UnicodeDecodeError and JSONDecodeError are both ValueErrors
        log.error('Failed to parse JSON response: %s', e)
        return Err(ErrorKind.MALFORMED_RESPONSE, str(e))
    if not isinstance(content, dict):
        detail = f'expected a JSON object, got {type(content).__name__}'
        log.error('Failed to parse JSON response: %s', detail)
        return Err(ErrorKind.MALFORMED_RESPONSE, detail)

    error = content.get('error')
    if error is not None:
        detail = json.dumps(error, default=encode_decimal)
        log.error('RPC error: %s', detail)
        code = error.get('code') if isinstance(error, dict) else None
        if not isinstance(code, int) or isinstance(code, bool):
            code = None
        return Err(ErrorKind.REMOTE_ERROR, detail, code)

    if 'result' not in content:
        detail = 'missing JSON-RPC result'
        log.error('Failed to parse JSON response: %s', detail)
        return Err(ErrorKind.MALFORMED_RESPONSE, detail)
    result = content['result']
    return OkNull() if result is None else Ok(result)


class Client:
    """A thin wrapper around a Bitcoin node's JSON-RPC.

    Credentials and the node URL are fixed for the lifetime of the client.
    Every call is encoded, posted and decoded independently, and failures of any
    kind never escape as exceptions: dispatch() reports them as Err outcomes,
    call() collapses them to None.
    """

    username: str
    password: str
    url: str
    transport: Transport
    log: logging.Logger | logging.LoggerAdapter

    def __init__(
            self,
            username: str,
            password: str,
            url: str = DEFAULT_URL,
            transport: None | Transport = None,
            log: None | logging.Logger | logging.LoggerAdapter = None,
        ) -> None:
        """Initialize an interface to a Bitcoin node."""
        self.username = username
        self.password = password
        self.url = url
        self.transport = HttpTransport() if transport is None else transport
        self.log = logger if log is None else log

    def dispatch(self, method: str, params: Sequence[Any] = ()) -> Outcome:
        """Run an arbitrary query, return a tagged outcome."""
        body = encode_request(method, params)
        self.log.info('Sending RPC request: %s', body)
        response = self.transport.post(
            self.url, body, self.username, self.password, dict(HEADERS), True,
        )
        raw, ok = response[0], response[1]
        if not ok:
            reason = getattr(response, 'reason', '') or 'transport failure'
            self.log.error('Failed to send RPC request: %s', reason)
            return Err(ErrorKind.TRANSPORT_FAILURE, reason)
        self.log.debug('%s', raw)
        return decode_response(raw, self.log)

    def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        """Run an arbitrary query, return the result or None on failure."""
        return self.dispatch(method, params).value
