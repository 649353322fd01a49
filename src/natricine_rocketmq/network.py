"""Local host address discovery."""

import functools
import ipaddress
import socket

# Never contacted; connecting a UDP socket only selects the outbound interface.
_PROBE_ADDR = ("192.0.2.1", 9)


def _is_usable(address: str) -> bool:
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        return False
    return not (ip.is_loopback or ip.is_link_local or ip.is_unspecified)


def _hostname_addresses() -> list[str]:
    try:
        _, _, addresses = socket.gethostbyname_ex(socket.gethostname())
    except OSError:
        return []
    return addresses


def _route_address() -> str | None:
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(_PROBE_ADDR)
            return str(sock.getsockname()[0])
    except OSError:
        return None


@functools.cache
def get_local_address() -> str:
    """Return this host's preferred non-loopback IPv4 address.

    Resolved once per process and cached. Private addresses are preferred
    over public ones, mirroring how a broker-side client id is normally
    built. Falls back to 127.0.0.1 when nothing better is found.
    """
    candidates = [a for a in _hostname_addresses() if _is_usable(a)]
    route = _route_address()
    if route and _is_usable(route) and route not in candidates:
        candidates.append(route)

    for address in candidates:
        if ipaddress.ip_address(address).is_private:
            return address
    if candidates:
        return candidates[0]
    return "127.0.0.1"
