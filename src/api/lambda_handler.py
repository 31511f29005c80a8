# src/api/lambda_handler.py
"""
AWS Lambda handler for FastAPI using Mangum (ASGI adapter).

How it works:
- API Gateway invokes Lambda
- Mangum translates the event into an ASGI request
- FastAPI handles routing (/health, /options, /estimate, /estimate/compare, /tips/...)
- Response is returned back to API Gateway

Configuration:
- ESTIMATOR_* env vars are validated at cold start so a bad override fails
  the deployment instead of the first request.
"""

from __future__ import annotations

from mangum import Mangum

from src.api.app import app
from src.utils.config import get_estimator_config
from src.utils.log import configure_logging

configure_logging()
get_estimator_config()

# Mangum handler
handler = Mangum(app, lifespan="off")
