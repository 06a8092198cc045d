import os

import pytest

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))

# Set environment variables before any imports so the module-level Loggers pick them up
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "layered-constructs-test")
os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "WARNING")
os.environ.setdefault("LAYERED_CONSTRUCTS_TEST_ASSETS", TESTS_DIR)

from layered_constructs.models import (  # noqa: E402
    DynamoDbTableConstructProps,
    LambdaFunctionConstructProps,
    StaticSiteConstructProps,
)
from layered_constructs.testing import (  # noqa: E402
    create_dynamo_db_table_props_builder,
    create_props_builder,
    create_static_site_props_builder,
    get_test_asset_path,
)


def pytest_configure(config):
    """
    Pytest hook that runs before test collection.
    Points test asset resolution at the tests directory.
    """
    os.environ["LAYERED_CONSTRUCTS_TEST_ASSETS"] = TESTS_DIR


@pytest.fixture
def lambda_props() -> LambdaFunctionConstructProps:
    """Lambda props with test names, one environment variable and OTEL enabled."""
    return create_props_builder().build()


@pytest.fixture
def table_props() -> DynamoDbTableConstructProps:
    """Table props with a string partition key."""
    return create_dynamo_db_table_props_builder().with_partition_key("pk").build()


@pytest.fixture
def site_asset_path() -> str:
    return get_test_asset_path("assets/static-site")


@pytest.fixture
def site_props(site_asset_path: str) -> StaticSiteConstructProps:
    """Static site props for www.example.com."""
    return create_static_site_props_builder().with_asset_path(site_asset_path).build()
