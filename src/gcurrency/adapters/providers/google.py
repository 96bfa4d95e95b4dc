# src/gcurrency/adapters/providers/google.py
"""
Google Calculator Quote Client

This module implements the client for the Google calculator endpoint.
The endpoint answers with a JavaScript object literal whose keys are not
quoted, e.g.:

    {lhs: "1 U.S. dollar",rhs: "0.84 Euros",error: "",icc: true}

so the body is repaired into JSON before decoding. No caching happens here;
every call to fetch_rate performs one HTTP request.

Files that USE this module:
- gcurrency.application.bank (default QuoteClient of GoogleCurrencyBank)
- tests.test_providers (unit tests)

Files that this module USES:
- gcurrency.adapters.providers.base (QuoteClient interface)
- gcurrency.config (settings for endpoint location and timeout)
- gcurrency.domain (Quote model and error types)
"""
import json
import logging
import re
import urllib.parse
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import requests

from gcurrency.adapters.providers.base import QuoteClient
from gcurrency.config import settings
from gcurrency.domain.errors import FetchFailed, MalformedResponse, UnknownRate
from gcurrency.domain.models import Quote

log = logging.getLogger(__name__)

QUOTE_KEYS = ("lhs", "rhs", "error", "icc")

# A JSON string literal (kept as-is) or a bare key following "{" or ","
_TOKEN_RE = re.compile(
    r'("(?:[^"\\]|\\.)*")|([{,]\s*)(' + "|".join(QUOTE_KEYS) + r')(\s*:)',
    re.DOTALL,
)
# JavaScript \xHH escapes are not valid JSON
_HEX_ESCAPE_RE = re.compile(r'(?<!\\)((?:\\\\)*)\\x([0-9a-fA-F]{2})')
# ASCII digits only, no "_" separators or NaN/Infinity
_NUMBER_RE = re.compile(r'^[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?$')


def _repair_token(match: "re.Match[str]") -> str:
    literal = match.group(1)
    if literal is not None:
        return _HEX_ESCAPE_RE.sub(r"\1\\u00\2", literal)
    return f'{match.group(2)}"{match.group(3)}"{match.group(4)}'


def fix_response_json_data(data: str) -> str:
    """
    Quote the bare lhs/rhs/error/icc keys of a calculator response.

    Text inside string values is not touched, and keys that are already
    quoted stay as they are.

    Args:
        data: Raw response body

    Returns:
        Text that json.loads can decode
    """
    return _TOKEN_RE.sub(_repair_token, data)


def _as_text(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    raise MalformedResponse(f"Quote field {name!r} has unexpected type {type(value).__name__}")


def parse_quote(data: str) -> Quote:
    """
    Repair and decode a calculator response into a Quote.

    Raises:
        MalformedResponse: If the body is not an object literal or has no error field
    """
    try:
        decoded = json.loads(fix_response_json_data(data))
    except ValueError as e:
        log.error("Quote response is not decodable: %r", data[:200])
        raise MalformedResponse(f"Quote response could not be decoded: {e}") from e

    if not isinstance(decoded, dict):
        log.error("Quote response has unexpected type: %r", type(decoded))
        raise MalformedResponse("Quote response is not an object")
    # null is not a success marker; treat it like a missing field
    if decoded.get("error") is None:
        log.error("Quote response missing 'error' field: %s", decoded)
        raise MalformedResponse("Quote response missing 'error' field")

    return Quote(
        lhs=_as_text("lhs", decoded.get("lhs")),
        rhs=_as_text("rhs", decoded.get("rhs")),
        error=_as_text("error", decoded.get("error")),
        icc=_as_text("icc", decoded.get("icc")),
    )


def extract_rate(quote: Quote) -> Decimal:
    """
    Read the rate from the leading number of quote.rhs ("0.84 Euros" -> 0.84).

    Raises:
        MalformedResponse: If rhs has no leading number or it is not a positive finite value
    """
    tokens = quote.rhs.split()
    if not tokens:
        raise MalformedResponse("Quote response has empty 'rhs' field")

    token = tokens[0].replace(",", "")
    if not _NUMBER_RE.match(token):
        raise MalformedResponse(f"Quote 'rhs' does not start with a number: {quote.rhs!r}")
    try:
        rate = Decimal(token)
    except InvalidOperation as e:
        raise MalformedResponse(f"Quote 'rhs' does not start with a number: {quote.rhs!r}") from e

    if not rate.is_finite() or rate <= 0:
        raise MalformedResponse(f"Quote returned non-positive rate: {quote.rhs!r}")
    return rate


class GoogleQuoteClient(QuoteClient):
    def __init__(
        self,
        host: Optional[str] = None,
        path: Optional[str] = None,
        scheme: Optional[str] = None,
        language: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the calculator client.

        Args:
            host: Endpoint host (defaults to settings.service_host)
            path: Endpoint path (defaults to settings.service_path)
            scheme: "http" or "https" (defaults to settings.service_scheme)
            language: Value of the hl query parameter (defaults to settings.service_language)
            timeout: HTTP timeout in seconds; None waits indefinitely
        """
        self.host = host or settings.service_host
        self.path = path or settings.service_path
        self.scheme = scheme or settings.service_scheme
        self.language = language or settings.service_language
        self.timeout = timeout or settings.http_timeout_seconds

    def build_url(self, from_code: str, to_code: str) -> str:
        """
        Build the calculator URL asking for the value of 1 `from_code` in `to_code`.

        Example:
            http://www.google.com/ig/calculator?hl=en&q=1USD%3D%3FEUR
        """
        query = urllib.parse.urlencode({
            "hl": self.language,
            "q": f"1{str(from_code).upper()}=?{str(to_code).upper()}",
        })
        return urllib.parse.urlunsplit((self.scheme, self.host, self.path, query, ""))

    def fetch_rate(self, from_code: str, to_code: str) -> Decimal:
        """
        Query the calculator for a single rate.

        Returns:
            Units of `to_code` per 1 unit of `from_code`

        Raises:
            FetchFailed: On connection error, non-2xx status or timeout
            UnknownRate: If the endpoint reports an error for the pair
            MalformedResponse: If the body cannot be read as a quote
        """
        url = self.build_url(from_code, to_code)
        try:
            log.info("Fetching %s->%s rate from %s", from_code, to_code, self.host)
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.text
        except requests.exceptions.Timeout as e:
            log.error("Quote request timed out after %s seconds", self.timeout)
            raise FetchFailed(f"Quote request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.error("Quote request failed: %s", e)
            raise FetchFailed(f"Quote request failed: {e}") from e

        quote = parse_quote(body)
        if not quote.succeeded:
            log.warning("Quote endpoint has no rate for %s->%s (error=%r)", from_code, to_code, quote.error)
            raise UnknownRate(
                f"No rate available for {from_code}->{to_code}: {quote.error}",
                error_code=quote.error,
            )

        rate = extract_rate(quote)
        log.info("Fetched %s->%s rate: %s", from_code, to_code, rate)
        return rate
