from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from pydantic import BaseModel, ConfigDict, Field


class DynamoDbTableConstructProps(BaseModel):
    """
    Configuration for a DynamoDB table.

    Keys, streams and TTL are optional; the construct only sets the ones
    that are present.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    table_name: str = Field(..., min_length=1)
    removal_policy: RemovalPolicy
    billing_mode: dynamodb.BillingMode
    partition_key: dynamodb.Attribute | None = None
    sort_key: dynamodb.Attribute | None = None
    global_secondary_indexes: list[dynamodb.GlobalSecondaryIndexProps] = Field(default_factory=list)
    stream: dynamodb.StreamViewType | None = Field(default=None, description="Stream view type, None disables streams")
    time_to_live_attribute: str | None = None
