"""
Configuration models for the constructs.
"""

from layered_constructs.models.dynamodb_table import DynamoDbTableConstructProps
from layered_constructs.models.lambda_function import LambdaFunctionConstructProps, LambdaPermission
from layered_constructs.models.static_site import StaticSiteConstructProps

__all__ = [
    "DynamoDbTableConstructProps",
    "LambdaFunctionConstructProps",
    "LambdaPermission",
    "StaticSiteConstructProps",
]
