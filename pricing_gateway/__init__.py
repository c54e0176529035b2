# pricing_gateway/__init__.py
"""
Storefront Pricing Gateway.

Routing and backend-proxy layer of the storefront pricing dashboard,
laid out as Ports & Adapters:
- `core`: routing rules, session identity, use cases (framework free).
- `adapters`: the FastAPI surface and the upstream pricing client.
- `shared`: settings, logging, telemetry and DI wiring.
"""

__version__ = "1.0.0"
