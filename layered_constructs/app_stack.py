from typing import Any

from aws_cdk import CfnOutput, RemovalPolicy, Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_iam as iam
from constructs import Construct

from layered_constructs.dynamodb_table_construct import DynamoDbTableConstruct
from layered_constructs.lambda_function_construct import LambdaFunctionConstruct
from layered_constructs.models import (
    DynamoDbTableConstructProps,
    LambdaFunctionConstructProps,
    StaticSiteConstructProps,
)
from layered_constructs.static_site_construct import StaticSiteConstruct


class AppStack(Stack):
    """
    Example application stack: a streamed DynamoDB table, a Lambda function
    consuming the stream, and optionally a static website.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        stage: str,
        table_name: str,
        lambda_asset_path: str,
        site: StaticSiteConstructProps | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        self.stage = stage

        # Create the table
        self.table = DynamoDbTableConstruct(
            self,
            "Table",
            DynamoDbTableConstructProps(
                table_name=f"{table_name}-{stage}",
                partition_key=dynamodb.Attribute(name="pk", type=dynamodb.AttributeType.STRING),
                sort_key=dynamodb.Attribute(name="sk", type=dynamodb.AttributeType.STRING),
                removal_policy=RemovalPolicy.DESTROY if stage == "dev" else RemovalPolicy.RETAIN,
                billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
                stream=dynamodb.StreamViewType.NEW_AND_OLD_IMAGES,
                time_to_live_attribute="ttl",
            ),
        )

        # Create the stream processor
        self.processor = LambdaFunctionConstruct(
            self,
            "Processor",
            LambdaFunctionConstructProps(
                function_name=f"{table_name}-processor",
                function_suffix=stage,
                asset_path=lambda_asset_path,
                role_name=f"{table_name}-processor-{stage}-role",
                policy_name=f"{table_name}-processor-{stage}-policy",
                policy_statements=[
                    iam.PolicyStatement(
                        effect=iam.Effect.ALLOW,
                        actions=["dynamodb:GetItem", "dynamodb:Query"],
                        resources=[self.table.table_arn],
                    ),
                ],
                environment_variables={
                    "TABLE_NAME": self.table.table_name,
                    "STAGE": stage,
                },
            ),
        )
        self.table.attach_stream_lambda(self.processor.lambda_function)

        self.site = StaticSiteConstruct(self, "Site", site) if site is not None else None

        # Outputs
        CfnOutput(
            self,
            "ProcessorAliasArn",
            value=self.processor.alias.function_arn,
            description="Stream processor live alias ARN",
        )
