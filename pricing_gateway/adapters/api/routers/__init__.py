# pricing_gateway/adapters/api/routers/__init__.py
"""
API Route Definitions.

Route handlers organized by area:
- `pricing`: price application proxy (Core Value).
- `recommendations`: accept / reject proxies for price recommendations.
- `locale`: language switching.
- `pages`: root redirect and page shells.
- `health`: system health checks.
"""

from .health import router as health_router
from .locale import router as locale_router
from .pages import router as pages_router
from .pricing import router as pricing_router
from .recommendations import router as recommendations_router

__all__ = [
    "health_router",
    "locale_router",
    "pages_router",
    "pricing_router",
    "recommendations_router",
]
