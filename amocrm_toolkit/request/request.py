"""
Request layer for the amoCRM API.

Builds authenticated endpoints, sends them with httpx and turns the
{"response": ...} envelope into either data or a typed error.
"""

import json
import logging
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from ..core.config import ClientSettings
from ..core.models import (
    ApiError,
    AuthScheme,
    FormatError,
    HttpMethod,
    NetworkError,
    RequestDescriptor,
)
from ..core.params import ParamsBag

logger = logging.getLogger(__name__)

ModifiedSince = datetime | str | int | float | None


class Request:
    """
    Sends requests to the amoCRM API on behalf of one resource model.

    Features:
    - Two query-string auth schemes (legacy and current)
    - JSON request body wrapped as {"request": ...}
    - IF-MODIFIED-SINCE header support
    - Uniform NetworkError / ApiError / FormatError failures
    """

    scheme: AuthScheme = AuthScheme.CURRENT

    def __init__(
        self,
        parameters: ParamsBag,
        settings: ClientSettings | None = None,
        http_client: httpx.Client | None = None,
        scheme: AuthScheme | None = None,
    ):
        """
        Initialize the request layer.

        Args:
            parameters: Parameter store owned by this request
            settings: Client settings (defaults used if None)
            http_client: Optional httpx client (created if None)
            scheme: Auth scheme override for this instance
        """
        self.parameters = parameters
        self.settings = settings or ClientSettings()
        if scheme is not None:
            self.scheme = scheme
        self.logger = logger

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(
                verify=self.settings.verify_ssl,
                timeout=self.settings.timeout_seconds,
            )
        else:
            self.http_client = http_client

    def set_logger(self, custom_logger: logging.Logger) -> None:
        """Route this request's log records to another logger."""
        self.logger = custom_logger

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def get_parameters(self) -> ParamsBag:
        return self.parameters

    def get_request(
        self,
        path: str,
        parameters: Mapping[str, Any] | None = None,
        modified: ModifiedSince = None,
    ) -> Any:
        """
        Merge query parameters and send the request.

        Args:
            path: API path (e.g., "/private/api/v2/json/leads/list")
            parameters: GET parameters to merge before sending
            modified: Value for the IF-MODIFIED-SINCE header

        Returns:
            The "response" part of the envelope, or None for no data
        """
        if parameters:
            self.parameters.add_get(parameters)

        return self.request(path, modified)

    def post_request(self, path: str, parameters: Mapping[str, Any] | None = None) -> Any:
        """
        Merge body fields and send the request as POST.

        Args:
            path: API path (e.g., "/private/api/v2/json/leads/set")
            parameters: POST fields to merge before sending

        Returns:
            The "response" part of the envelope, or None for no data
        """
        if parameters:
            self.parameters.add_post(parameters)

        return self.request(path)

    def describe(self, path: str, modified: ModifiedSince = None) -> RequestDescriptor:
        """Describe the call that request() would send right now."""
        method = HttpMethod.POST if self.parameters.has_post() else HttpMethod.GET
        modified_since = parse_modified(modified) if modified is not None else None
        return RequestDescriptor(path=path, method=method, modified_since=modified_since)

    def prepare_headers(self, modified: ModifiedSince = None) -> dict[str, str]:
        """
        Build the HTTP headers for a call.

        Raises:
            FormatError: If modified cannot be read as a date/time
        """
        headers = {"Content-Type": "application/json"}

        if modified is not None:
            headers["IF-MODIFIED-SINCE"] = format_rfc1123(parse_modified(modified))

        return headers

    def prepare_endpoint(self, path: str) -> str:
        """
        Build the full URL with GET parameters and the auth pair.

        Auth keys are merged last, so they win over same-named GET keys.
        """
        login_key, hash_key = self.scheme.query_keys
        query = self.parameters.get_get()
        query.update({
            login_key: self.parameters.get_auth("login"),
            hash_key: self.parameters.get_auth("apikey"),
        })

        domain = self.parameters.get_auth("domain")
        return f"https://{domain}.{self.settings.base_host}{path}?{urlencode(flatten_query(query))}"

    def request(self, path: str, modified: ModifiedSince = None) -> Any:
        """
        Send one call and interpret its response.

        Args:
            path: API path
            modified: Value for the IF-MODIFIED-SINCE header

        Returns:
            The "response" part of the envelope, or None for no data

        Raises:
            FormatError: If modified cannot be parsed (nothing is sent)
            NetworkError: On connection, DNS, TLS or timeout failures
            ApiError: If the server answers with status >= 300
        """
        descriptor = self.describe(path, modified)
        headers = self.prepare_headers(descriptor.modified_since)
        endpoint = self.prepare_endpoint(descriptor.path)

        self.logger.debug(f"Set endpoint to {endpoint}")
        self.logger.debug(f"Set headers to {headers}")

        content = None
        if descriptor.method is HttpMethod.POST:
            content = json.dumps({"request": self.parameters.get_post()})
            self.logger.debug(f"Set POST body to {content}")

        try:
            try:
                response = self.http_client.request(
                    method=descriptor.method.value,
                    url=endpoint,
                    headers=headers,
                    content=content,
                )
            except (httpx.RequestError, httpx.InvalidURL) as e:
                message = str(e)
                if not message:
                    self.logger.debug("Transport returned no data without an error message")
                    return None
                code = _native_error_code(e)
                self.logger.warning(f"Request to {descriptor.path} failed: {message} ({code})")
                raise NetworkError(message, code) from e

            self.logger.debug(f"Response status is {response.status_code}")
            self.logger.debug(f"Response body is {response.text}")

            return self.parse_response(response.content, response.status_code)
        finally:
            if self.settings.clear_params_after_request:
                self.parameters.clear()

    def parse_response(self, body: str | bytes | None, status_code: int | None) -> Any:
        """
        Check the response envelope for errors and return its contents.

        Args:
            body: Raw response body
            status_code: HTTP status code of the response

        Returns:
            The "response" value, or None when the body carries no envelope

        Raises:
            ApiError: If status_code is 300 or above
        """
        result = _decode_json(body)

        if not isinstance(result, dict) or result.get("response") is None:
            return None

        response = result["response"]

        if (status_code or 0) // 100 >= 3:
            if self.scheme is AuthScheme.LEGACY:
                raise ApiError(json.dumps(response, ensure_ascii=False, separators=(",", ":")))

            message = ""
            code = 0
            if isinstance(response, dict):
                message = str(response.get("error") or "")
                code = _error_code(response.get("error_code"))
            raise ApiError(message, code)

        return response


def parse_modified(value: ModifiedSince) -> datetime:
    """
    Read an IF-MODIFIED-SINCE value as an aware datetime.

    Accepts datetime objects, unix timestamps, ISO-8601 strings, RFC 1123
    strings and "now".
    Naive values are taken as UTC.

    Raises:
        FormatError: If the value cannot be read as a date/time
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise FormatError(f"Invalid timestamp: {value}") from e
    elif isinstance(value, str):
        text = value.strip()
        if text.lower() == "now":
            parsed = datetime.now(timezone.utc)
        else:
            parsed = _parse_date_text(text)
            if parsed is None:
                raise FormatError(f"Invalid date/time: '{value}'")
    else:
        raise FormatError(f"Unsupported date/time value: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def flatten_query(params: Mapping[str, Any]) -> list[tuple[str, Any]]:
    """
    Flatten query parameters into key/value pairs.

    Nested mappings and lists become bracketed keys (filter[id][0]=1),
    booleans become 1 or 0 and None values are left out.
    """
    pairs: list[tuple[str, Any]] = []
    for key, value in params.items():
        _flatten_value(str(key), value, pairs)
    return pairs


def _flatten_value(prefix: str, value: Any, pairs: list[tuple[str, Any]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten_value(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten_value(f"{prefix}[{index}]", item, pairs)
    elif isinstance(value, bool):
        pairs.append((prefix, "1" if value else "0"))
    else:
        pairs.append((prefix, value))


def format_rfc1123(value: datetime) -> str:
    """Format a datetime like "Mon, 02 Jan 2017 12:30:00 +0000"."""
    return format_datetime(value)


def _parse_date_text(text: str) -> datetime | None:
    # fromisoformat only takes a trailing Z from 3.11 on
    iso_text = text[:-1] + "+00:00" if text[-1:] in ("Z", "z") else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass

    # RFC 2822 / RFC 1123 style, e.g. "Mon, 02 Jan 2017 12:30:00 GMT"
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def _decode_json(body: str | bytes | None) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None


def _error_code(raw: Any) -> int:
    try:
        code = int(raw)
    except (TypeError, ValueError):
        return 0
    return code if code > 0 else 0


def _native_error_code(exc: BaseException) -> int:
    # httpx wraps the socket error; the errno lives down the cause chain
    current: BaseException | None = exc
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, OSError) and current.errno:
            return current.errno
        current = current.__cause__ or current.__context__
    return 0
