"""
Library defaults for the layered constructs.
"""

# Export names
EXPORT_NAME_MAX_LENGTH = 256  # CloudFormation limit for Export.Name
EXPORT_NAME_HASH_LENGTH = 8
EXPORT_NAME_SEPARATOR = "-"

# Lambda configuration
LAMBDA_MEMORY_SIZE = 1024  # MB
LAMBDA_MIN_MEMORY_SIZE = 128  # MB
LAMBDA_MAX_MEMORY_SIZE = 10240  # MB
LAMBDA_TIMEOUT = 6  # seconds
LAMBDA_MAX_TIMEOUT = 900  # seconds
LAMBDA_HANDLER = "bootstrap"
LAMBDA_SERVICE_PRINCIPAL = "lambda.amazonaws.com"
LAMBDA_LIVE_ALIAS = "live"
LAMBDA_LOG_GROUP_PREFIX = "/aws/lambda"

# OpenTelemetry collector layer (published by AWS in account 901920570463)
OTEL_LAYER_ACCOUNT = "901920570463"
OTEL_LAYER_VERSION = "0-102-1"
DEFAULT_ARCHITECTURE = "amd64"

# DynamoDB streams
STREAM_BATCH_SIZE = 1

# Static site
SITE_INDEX_DOCUMENT = "index.html"
SITE_ERROR_PAGE_PATH = "/index.html"
SITE_API_PATH_PATTERN = "/api/*"
SITE_DEPLOYMENT_MEMORY_LIMIT = 1024  # MB
SITE_NONCURRENT_VERSION_EXPIRATION_DAYS = 1
