"""
Common CDK testing helpers.

Stacks created here are not synthesized; call ``Template.from_stack(stack)``
after adding constructs to them.
"""

import os
from typing import Any

from aws_cdk import App, Environment, Stack

from layered_constructs.testing.dynamodb_table_props_builder import DynamoDbTableConstructPropsBuilder
from layered_constructs.testing.lambda_function_props_builder import LambdaFunctionConstructPropsBuilder
from layered_constructs.testing.static_site_props_builder import StaticSiteConstructPropsBuilder

TEST_STACK_NAME = "test-stack"
TEST_REGION = "us-east-1"
TEST_ACCOUNT = "123456789012"
TEST_ASSETS_ENV_VAR = "LAYERED_CONSTRUCTS_TEST_ASSETS"
TEST_LAMBDA_ASSET = "assets/test-lambda"


def create_test_stack(
    stack_name: str = TEST_STACK_NAME,
    region: str = TEST_REGION,
    account: str = TEST_ACCOUNT,
    *,
    stack_props: dict[str, Any] | None = None,
    stack_class: type[Stack] = Stack,
) -> tuple[App, Stack]:
    """
    Create a CDK app and a stack to add constructs to.

    Args:
        stack_name: Name (and id) of the stack
        region: AWS region of the stack environment
        account: AWS account of the stack environment
        stack_props: Keyword arguments for the stack; replaces the default environment
        stack_class: Stack type to instantiate, called as ``stack_class(app, stack_name, **stack_props)``

    Returns:
        Tuple of the app and the stack
    """
    app = App()
    if stack_props is None:
        stack_props = {"env": Environment(account=account, region=region)}
    stack = stack_class(app, stack_name, **stack_props)
    return app, stack


def create_test_stack_minimal(
    stack_name: str = TEST_STACK_NAME,
    region: str = TEST_REGION,
    account: str = TEST_ACCOUNT,
    *,
    stack_props: dict[str, Any] | None = None,
    stack_class: type[Stack] = Stack,
) -> Stack:
    """Same as ``create_test_stack`` without returning the app."""
    _, stack = create_test_stack(
        stack_name,
        region,
        account,
        stack_props=stack_props,
        stack_class=stack_class,
    )
    return stack


def get_test_asset_path(relative_path: str, base_dir: str | None = None) -> str:
    """
    Resolve a test asset to an absolute path.

    The base directory is ``base_dir`` when given, else the directory named by
    ``LAYERED_CONSTRUCTS_TEST_ASSETS``, else the current working directory.
    """
    root = base_dir or os.environ.get(TEST_ASSETS_ENV_VAR) or os.getcwd()
    return os.path.abspath(os.path.join(root, relative_path))


def get_test_lambda_asset_path() -> str:
    return get_test_asset_path(TEST_LAMBDA_ASSET)


def create_props_builder(asset_path: str | None = None) -> LambdaFunctionConstructPropsBuilder:
    """Lambda props builder with test names, an ENVIRONMENT variable and OTEL enabled."""
    return (
        LambdaFunctionConstructPropsBuilder()
        .with_function_name("test-function")
        .with_function_suffix("test")
        .with_asset_path(asset_path or get_test_lambda_asset_path())
        .with_role_name("test-function-role")
        .with_policy_name("test-function-policy")
        .with_environment_variable("ENVIRONMENT", "test")
        .with_otel_enabled(True)
    )


def create_dynamo_db_table_props_builder() -> DynamoDbTableConstructPropsBuilder:
    return DynamoDbTableConstructPropsBuilder()


def create_static_site_props_builder() -> StaticSiteConstructPropsBuilder:
    return StaticSiteConstructPropsBuilder()
