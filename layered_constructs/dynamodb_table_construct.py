"""
DynamoDB Table Construct.

A construct that creates a DynamoDB table with optional keys, global secondary
indexes, streams and TTL, and exports its ARN, name, index names and stream
ARN as CloudFormation outputs.
"""

import inspect
from typing import Any

from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as lambda_
from aws_lambda_powertools import Logger
from constructs import Construct

from layered_constructs import constants
from layered_constructs.export_names import create_export_name
from layered_constructs.models import DynamoDbTableConstructProps

logger = Logger()

# Keyword names accepted by GlobalSecondaryIndexProps.
_GSI_FIELDS = tuple(
    name for name in inspect.signature(dynamodb.GlobalSecondaryIndexProps.__init__).parameters if name != "self"
)


def _gsi_kwargs(index: dynamodb.GlobalSecondaryIndexProps) -> dict[str, Any]:
    """Unpack a GSI struct into keyword arguments for add_global_secondary_index."""
    kwargs = {}
    for field in _GSI_FIELDS:
        value = getattr(index, field, None)
        if value is not None:
            kwargs[field] = value
    return kwargs


class DynamoDbTableConstruct(Construct):
    """
    A construct that creates a DynamoDB table with exported outputs.

    Features:
    - Partition/sort keys, streams and TTL set only when configured
    - One output per global secondary index (qualifier ``gsi-{n}``)
    - ARN and name outputs, plus the stream ARN when streams are enabled
    - Stream consumers attached with ``attach_stream_lambda``
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        props: DynamoDbTableConstructProps,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        self.props = props
        stack = Stack.of(self)

        # Create DynamoDB table
        self.table = self._create_table(id)

        for i, index in enumerate(props.global_secondary_indexes):
            self.table.add_global_secondary_index(**_gsi_kwargs(index))
            CfnOutput(
                self,
                f"{id}-gsi-{i}",
                value=index.index_name,
                export_name=create_export_name(stack, id, f"gsi-{i}"),
            )

        self.table_arn = self.table.table_arn
        self.table_name = props.table_name
        self.table_stream_arn: str | None = self.table.table_stream_arn

        # Outputs
        CfnOutput(self, f"{id}-arn", value=self.table_arn, export_name=create_export_name(stack, id, "arn"))
        CfnOutput(self, f"{id}-name", value=self.table_name, export_name=create_export_name(stack, id, "name"))

        if self.table_stream_arn is not None:
            CfnOutput(
                self,
                f"{id}-stream-arn",
                value=self.table_stream_arn,
                export_name=create_export_name(stack, id, "stream-arn"),
            )

        logger.debug(
            "Created DynamoDB table construct",
            extra={
                "construct_id": id,
                "table_name": props.table_name,
                "gsi_count": len(props.global_secondary_indexes),
                "stream": props.stream is not None,
            },
        )

    def _create_table(self, id: str) -> dynamodb.Table:
        """Create the DynamoDB table."""
        props = self.props
        table_kwargs: dict[str, Any] = {
            "table_name": props.table_name,
            "removal_policy": props.removal_policy,
            "billing_mode": props.billing_mode,
        }
        if props.partition_key is not None:
            table_kwargs["partition_key"] = props.partition_key
        if props.sort_key is not None:
            table_kwargs["sort_key"] = props.sort_key
        if props.stream is not None:
            table_kwargs["stream"] = props.stream
        if props.time_to_live_attribute:
            table_kwargs["time_to_live_attribute"] = props.time_to_live_attribute

        return dynamodb.Table(self, id, **table_kwargs)

    def attach_stream_lambda(self, function: lambda_.IFunction) -> lambda_.EventSourceMapping:
        """
        Attach a Lambda function to the table stream.

        Args:
            function: Function that processes the stream records

        Returns:
            The event source mapping

        Raises:
            RuntimeError: If the table was created without a stream
        """
        if self.table_stream_arn is None:
            raise RuntimeError("Cannot attach stream Lambda to table without streams enabled")

        self.table.grant_stream_read(function)
        return lambda_.EventSourceMapping(
            self,
            f"{self.table_name}-stream-mapping",
            target=function,
            event_source_arn=self.table_stream_arn,
            starting_position=lambda_.StartingPosition.TRIM_HORIZON,
            batch_size=constants.STREAM_BATCH_SIZE,
        )
