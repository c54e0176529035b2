# pricing_gateway/core/use_cases/__init__.py
from .apply_price import ApplyPrice
from .review_recommendation import ReviewRecommendation

__all__ = [
    "ApplyPrice",
    "ReviewRecommendation",
]
