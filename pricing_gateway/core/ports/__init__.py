# pricing_gateway/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the Infrastructure Adapters implement, so the use cases can talk
to the upstream pricing service without knowing the transport.
"""

from .pricing_service import IPricingService

__all__ = [
    "IPricingService",
]
