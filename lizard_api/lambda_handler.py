"""AWS Lambda handler for API Gateway / function URL invocations."""

import structlog
from mangum import Mangum

from .main import app

logger = structlog.get_logger()

handler = Mangum(app, lifespan="off")

logger.info("Lambda handler ready")
