"""
Helpers for unit testing stacks built from the layered constructs.
"""

from layered_constructs.testing.dynamodb_table_assertions import (
    assert_global_secondary_index_count,
    assert_has_dynamo_table,
    assert_has_global_secondary_index,
    assert_has_partition_key,
    assert_has_sort_key,
    assert_has_table_outputs,
    assert_has_table_stream,
    assert_has_time_to_live_attribute,
)
from layered_constructs.testing.dynamodb_table_props_builder import DynamoDbTableConstructPropsBuilder
from layered_constructs.testing.helpers import (
    create_dynamo_db_table_props_builder,
    create_props_builder,
    create_static_site_props_builder,
    create_test_stack,
    create_test_stack_minimal,
    get_test_asset_path,
    get_test_lambda_asset_path,
)
from layered_constructs.testing.lambda_function_assertions import (
    assert_has_cloud_watch_logs_permissions,
    assert_has_environment_variables,
    assert_has_function_url,
    assert_has_function_url_output,
    assert_has_lambda_function,
    assert_has_lambda_permissions,
    assert_has_log_group,
    assert_has_memory_size,
    assert_has_no_function_url,
    assert_has_no_otel_layer,
    assert_has_no_snap_start,
    assert_has_otel_layer,
    assert_has_snap_start,
    assert_has_timeout,
    assert_has_version_and_alias,
)
from layered_constructs.testing.lambda_function_props_builder import LambdaFunctionConstructPropsBuilder
from layered_constructs.testing.static_site_assertions import (
    assert_has_api_proxy_behavior,
    assert_has_bucket_deployment,
    assert_has_cloud_front_distribution,
    assert_has_complete_static_site,
    assert_has_no_api_proxy_behavior,
    assert_has_route53_records,
    assert_has_ssl_certificate,
    assert_has_static_website_bucket,
    assert_route53_record_count,
)
from layered_constructs.testing.static_site_props_builder import StaticSiteConstructPropsBuilder

__all__ = [
    "DynamoDbTableConstructPropsBuilder",
    "LambdaFunctionConstructPropsBuilder",
    "StaticSiteConstructPropsBuilder",
    "assert_global_secondary_index_count",
    "assert_has_api_proxy_behavior",
    "assert_has_bucket_deployment",
    "assert_has_cloud_front_distribution",
    "assert_has_cloud_watch_logs_permissions",
    "assert_has_complete_static_site",
    "assert_has_dynamo_table",
    "assert_has_environment_variables",
    "assert_has_function_url",
    "assert_has_function_url_output",
    "assert_has_global_secondary_index",
    "assert_has_lambda_function",
    "assert_has_lambda_permissions",
    "assert_has_log_group",
    "assert_has_memory_size",
    "assert_has_no_api_proxy_behavior",
    "assert_has_no_function_url",
    "assert_has_no_otel_layer",
    "assert_has_no_snap_start",
    "assert_has_otel_layer",
    "assert_has_partition_key",
    "assert_has_route53_records",
    "assert_has_snap_start",
    "assert_has_sort_key",
    "assert_has_ssl_certificate",
    "assert_has_static_website_bucket",
    "assert_has_table_outputs",
    "assert_has_table_stream",
    "assert_has_time_to_live_attribute",
    "assert_has_timeout",
    "assert_has_version_and_alias",
    "assert_route53_record_count",
    "create_dynamo_db_table_props_builder",
    "create_props_builder",
    "create_static_site_props_builder",
    "create_test_stack",
    "create_test_stack_minimal",
    "get_test_asset_path",
    "get_test_lambda_asset_path",
]
