"""Serverless billing portal: POST /api/create-portal-session"""

from mangum import Mangum

from profit_api.application import create_app
from profit_api.routers import billing

app = create_app(billing.router, prefix="/api", title="Billing portal session function")

handler = Mangum(app, lifespan="off")
