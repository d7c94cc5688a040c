#
#
#

"""Protocol definition for the GleSYS API transport.

This module defines structural typing (PEP 544) for the transport used by
DomainService, allowing substitutes in tests without explicit inheritance.
"""

from typing import Any, Dict, Optional, Protocol


class GlesysTransport(Protocol):
    """Protocol defining the expected interface for API transports.

    GlesysClient conforms to this interface; tests substitute a Mock.
    Implementations own authentication, the base URL and error mapping.
    """

    def get(self, path: str, timeout: Optional[float] = None) -> Dict:
        """Issue a GET request.

        Args:
            path: API path relative to the base URL, e.g. 'domain/list'
            timeout: Optional per-request timeout in seconds

        Returns:
            Decoded JSON envelope
        """
        ...

    def post(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Dict:
        """Issue a POST request with a JSON body.

        Args:
            path: API path relative to the base URL, e.g. 'domain/add'
            data: JSON serializable request body
            timeout: Optional per-request timeout in seconds

        Returns:
            Decoded JSON envelope
        """
        ...
