"""
Reusable AWS CDK constructs.
"""

from layered_constructs.dynamodb_table_construct import DynamoDbTableConstruct
from layered_constructs.export_names import create_export_name, generate_export_name
from layered_constructs.lambda_function_construct import LambdaFunctionConstruct
from layered_constructs.static_site_construct import StaticSiteConstruct

__all__ = [
    "DynamoDbTableConstruct",
    "LambdaFunctionConstruct",
    "StaticSiteConstruct",
    "create_export_name",
    "generate_export_name",
]
