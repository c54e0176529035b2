# pricing_gateway/core/__init__.py
"""
Core Domain Layer.

Pure routing and proxy logic of the gateway:
- No dependencies on the web framework (FastAPI, Starlette).
- No dependencies on the transport to the upstream pricing service.
- Defines the Port (`IPricingService`) the infrastructure layer implements.
"""
