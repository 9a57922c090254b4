"""Endpoint value type.

The selector treats candidates as opaque hashable values, so any caller type
with sane ``__eq__``/``__hash__`` works. :class:`Endpoint` is the default
address descriptor used by the load-balancing layer and by the tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from hc_sampler.exceptions import InvalidArgumentError

_MIN_PORT = 1
_MAX_PORT = 65535


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Address identity of a service instance.

    Attributes:
        host: Hostname or IP address (IPv6 without brackets).
        port: TCP port, or ``None`` when the default port applies.
    """

    host: str
    port: int | None = None

    def __post_init__(self) -> None:
        if not self.host:
            raise InvalidArgumentError("host must be a non-empty string")
        if self.port is None:
            return
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise InvalidArgumentError(f"port must be an integer, got {self.port!r}")
        if not _MIN_PORT <= self.port <= _MAX_PORT:
            raise InvalidArgumentError(
                f"port must be in [{_MIN_PORT}, {_MAX_PORT}], got {self.port}"
            )

    @classmethod
    def of(cls, authority: str, port: int | None = None) -> Endpoint:
        """Parse ``host``, ``host:port`` or ``[v6]:port`` into an Endpoint.

        Args:
            authority: Host, optionally followed by ``:port``.
            port: Explicit port. Must not be combined with a port in *authority*.

        Returns:
            The parsed Endpoint.

        Raises:
            InvalidArgumentError: If the host is empty or the port is invalid.
        """
        host, parsed_port = _split_authority(authority.strip())
        if parsed_port is not None and port is not None:
            raise InvalidArgumentError(f"port specified twice for '{authority}'")
        return cls(host, port if port is not None else parsed_port)

    def __str__(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is None:
            return host
        return f"{host}:{self.port}"


def _split_authority(authority: str) -> tuple[str, int | None]:
    """Split an authority string into host and optional port."""
    if authority.startswith("["):
        close = authority.find("]")
        if close < 0:
            raise InvalidArgumentError(f"unterminated IPv6 literal in '{authority}'")
        host = authority[1:close]
        rest = authority[close + 1 :]
        if not rest:
            return host, None
        if not rest.startswith(":"):
            raise InvalidArgumentError(f"unexpected characters after IPv6 literal in '{authority}'")
        return host, _parse_port(rest[1:], authority)

    # A bare IPv6 address has several colons and no port.
    if authority.count(":") > 1:
        return authority, None
    host, sep, port_text = authority.partition(":")
    if not sep:
        return host, None
    return host, _parse_port(port_text, authority)


def _parse_port(text: str, authority: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise InvalidArgumentError(f"invalid port in '{authority}'")
    return int(text)
