"""Identity reporting for confirming which instance answered a request."""

from .interfaces import IdentityFacts, NetworkIdentityPort, RequestMetadata
from .network import PsutilNetworkIdentityService
from .reporter import IdentityReporter, identity_canonical_header_name, identity_format_remote_address

__all__ = [
    "IdentityFacts",
    "IdentityReporter",
    "NetworkIdentityPort",
    "PsutilNetworkIdentityService",
    "RequestMetadata",
    "identity_canonical_header_name",
    "identity_format_remote_address",
]
