"""Serverless analytics: GET /api/analytics/summary and GET /api/analytics/daily"""

from mangum import Mangum

from profit_api.application import create_app
from profit_api.routers import analytics

app = create_app(analytics.router, prefix="/api", title="Analytics function")

handler = Mangum(app, lifespan="off")
