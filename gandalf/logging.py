"""
Gandalf client logging utilities.

Requests and responses go to the "gandalf.http" logger at DEBUG level. The
only secret-bearing payloads Gandalf handles are SSH keys, so request bodies
are logged with public key blobs shortened and any private key that was sent
by mistake redacted. The library installs no handlers on its own.
"""

import logging
import re

_sdk_logger = logging.getLogger("gandalf")
_http_logger = logging.getLogger("gandalf.http")

_sdk_logger.addHandler(logging.NullHandler())

# Armored private keys, PEM or OpenSSH
_PRIVATE_KEY_PATTERN = re.compile(
    r"-----BEGIN[^-]*PRIVATE KEY-----.*?-----END[^-]*PRIVATE KEY-----", re.DOTALL
)
PRIVATE_KEY_PLACEHOLDER = "[PRIVATE_KEY_REDACTED]"

# Characters of a public key blob kept on each side of the ellipsis
_KEY_PREVIEW_LENGTH = 8

# OpenSSH public keys: "<type> <base64 blob> [comment]"
_PUBLIC_KEY_PATTERN = re.compile(
    r"(ssh-[a-z0-9-]+|ecdsa-sha2-[a-z0-9-]+|sk-[a-z0-9@.-]+)(\s+)"
    r"([A-Za-z0-9+/=]{%d,})" % (_KEY_PREVIEW_LENGTH * 2 + 1)
)


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure Gandalf client logging.

    Args:
        level: Level of the "gandalf" logger (default: INFO)
        http_level: Level of "gandalf.http" (default: same as level)
        handler: Handler to attach (default: StreamHandler to stderr)
        format_string: Record format (default: timestamp, logger, level, message)

    Example:
        ```python
        import logging
        from gandalf.logging import configure_logging

        # Trace every request sent to the Gandalf server
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string))

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)
    _http_logger.setLevel(http_level if http_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the "gandalf" logger, or "gandalf.<name>" when a suffix is given."""
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"gandalf.{name}")


def redact_private_keys(text: str) -> str:
    """Replace armored private keys in text with a placeholder."""
    return _PRIVATE_KEY_PATTERN.sub(PRIVATE_KEY_PLACEHOLDER, text)


def truncate_key(text: str) -> str:
    """
    Shorten SSH public keys found in text for log output.

    "ssh-rsa AAAAB3NzaC1yc2E...blob user@host" becomes
    "ssh-rsa AAAAB3Nz...lastblob user@host". Key types and comments are kept,
    text without public keys is returned unchanged.
    """

    def shorten(match: re.Match[str]) -> str:
        key_type, space, blob = match.groups()
        return f"{key_type}{space}{blob[:_KEY_PREVIEW_LENGTH]}...{blob[-_KEY_PREVIEW_LENGTH:]}"

    return _PUBLIC_KEY_PATTERN.sub(shorten, text)


def safe_log_body(body: str) -> str:
    """Return a request body with key material made safe to log."""
    return truncate_key(redact_private_keys(body))


def log_http_request(method: str, url: str, body: str | None = None) -> None:
    """
    Log an outgoing request at DEBUG level.

    Args:
        method: HTTP method
        url: Request URL
        body: Request body text, if any
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    message = f"{method} {url}"
    if body is not None:
        message += f" | body={safe_log_body(body)}"
    _http_logger.debug(message)


def log_http_response(status_code: int, url: str, elapsed_ms: float | None = None) -> None:
    """Log a received response at DEBUG level."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    message = f"Response {status_code} from {url}"
    if elapsed_ms is not None:
        message += f" | elapsed={elapsed_ms:.2f}ms"
    _http_logger.debug(message)


__all__ = [
    "PRIVATE_KEY_PLACEHOLDER",
    "configure_logging",
    "get_logger",
    "redact_private_keys",
    "truncate_key",
    "safe_log_body",
    "log_http_request",
    "log_http_response",
]
