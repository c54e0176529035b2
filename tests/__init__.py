# tests/__init__.py
"""
Test Suite for the Storefront Pricing Gateway.

Organization:
- `core`: routing rules, session identity and use cases with a mocked upstream.
- `adapters`: the httpx upstream client and the FastAPI surface (middleware, routers).
"""
