"""Host and interface lookups backed by the operating system."""

from __future__ import annotations

import logging
import socket

import psutil

from .interfaces import NetworkIdentityPort

logger = logging.getLogger(__name__)

_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


class PsutilNetworkIdentityService(NetworkIdentityPort):
    """Network identity service using `socket` and `psutil` lookups."""

    def identity_lookup_hostname(self) -> str:
        """Return the hostname reported by the kernel.

        Returns:
            str: Hostname, or an empty string when it cannot be read.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        try:
            return socket.gethostname()
        except OSError as error:
            logger.debug("hostname lookup failed: %s", error)
            return ""

    def identity_lookup_interface_addresses(self) -> list[str]:
        """Enumerate IPv4 and IPv6 addresses of all local interfaces.

        Returns:
            list[str]: Addresses in interface order. IPv6 zone suffixes are removed.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        try:
            interfaces = psutil.net_if_addrs()
        except (OSError, psutil.Error) as error:
            logger.debug("interface enumeration failed: %s", error)
            return []

        addresses: list[str] = []
        for interface_addresses in interfaces.values():
            for interface_address in interface_addresses:
                if interface_address.family not in _IP_FAMILIES or not interface_address.address:
                    continue
                addresses.append(interface_address.address.split("%", 1)[0])
        return addresses
