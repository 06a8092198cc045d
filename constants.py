import os

# =============================================================================
# PROJECT CONFIGURATION
# =============================================================================

# Environment-specific AWS account configuration
ENV_CONFIG = {
    "dev": {
        "account": "123456789012",  # Your AWS dev account ID
        "region": "us-east-1",  # CloudFront certificates must live in us-east-1
    },
    # "prod": {
    #     "account": "123456789013",  # Your AWS prod account ID
    #     "region": "us-east-1",
    # },
}

# Optional static site, deployed only when SITE_DOMAIN is set
SITE_CONFIG = {
    "domain_name": os.getenv("SITE_DOMAIN"),  # Root domain with an existing hosted zone
    "site_sub_domain": os.getenv("SITE_SUB_DOMAIN", "www"),
    "api_domain": os.getenv("SITE_API_DOMAIN"),  # Origin for /api/* requests
}

# Project prefix used for resource naming (keep short, lowercase, alphanumeric)
PREFIX = "myproject"

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
LAMBDA_ASSET_PATH = os.path.join(PROJECT_ROOT, "dist", "processor")
SITE_ASSET_PATH = os.path.join(PROJECT_ROOT, "dist", "site")
