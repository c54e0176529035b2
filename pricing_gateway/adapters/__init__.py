# pricing_gateway/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations around `pricing_gateway.core`:
- `api`: the Primary Adapter (Driving) - FastAPI app, locale middleware, routers.
- `pricing_client`: Secondary Adapter (Driven) - httpx client for the upstream
  pricing service.

Dependencies point INWARD: these modules import `pricing_gateway.core`,
never the other way round.
"""
