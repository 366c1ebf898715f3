"""Serverless user lookup: GET /api/users?email=..."""

from mangum import Mangum

from profit_api.application import create_app
from profit_api.routers import users

app = create_app(users.router, prefix="/api", title="User lookup function")

handler = Mangum(app, lifespan="off")
