"""Serverless handler for the gateway using Mangum."""
from mangum import Mangum

from gateway_api.main import create_app

# Credentials are loaded here, at cold start
app = create_app()

handler = Mangum(app, lifespan="off")

# Export handler for the serverless runtime
lambda_handler = handler
