# pricing_gateway/adapters/api/__init__.py
"""
REST API Adapter.

HTTP entry point of the gateway, built on FastAPI:
- It depends on `pricing_gateway.core` (use cases, routing rules).
- It resolves use cases through `pricing_gateway.shared.container`.
- It does NOT contain routing or proxy rules itself.
"""
