"""
Lambda Function Construct.

A construct that creates a custom-runtime Lambda function together with its
IAM role and policy, log group, published version and ``live`` alias.
"""

from typing import Any, cast

from aws_cdk import CfnOutput, Duration, Fn, RemovalPolicy, Stack
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from aws_lambda_powertools import Logger
from cdk_nag import NagSuppressions
from constructs import Construct

from layered_constructs import constants
from layered_constructs.export_names import create_export_name
from layered_constructs.models import LambdaFunctionConstructProps, LambdaPermission

logger = Logger()

ARCHITECTURES = {
    "amd64": lambda_.Architecture.X86_64,
    "arm64": lambda_.Architecture.ARM_64,
}


class LambdaFunctionConstruct(Construct):
    """
    A construct that creates a Lambda function on the ``provided.al2023`` runtime.

    Features:
    - Inline policy scoped to the function's own log group, plus caller statements
    - Log group with two weeks retention
    - Optional OpenTelemetry collector layer with active tracing
    - Optional SnapStart on published versions
    - ``live`` alias on the current version
    - Invoke permissions granted on the function, version and alias
    - Optional function URL on the alias, exported as an output
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        props: LambdaFunctionConstructProps,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        self.props = props
        stack = Stack.of(self)
        self.region = stack.region
        self.account = stack.account

        self.policy = self._create_policy(id)
        self.role = self._create_role(id)
        self.log_group = self._create_log_group(id)
        self.lambda_function = self._create_function(id)

        if props.include_otel_layer:
            self.lambda_function.add_layers(
                lambda_.LayerVersion.from_layer_version_arn(self, "OTELLambdaLayer", self._otel_layer_arn())
            )

        # Create a new version on every deployment
        current_version = self.lambda_function.current_version

        if props.enable_snap_start:
            cfn_function = cast(lambda_.CfnFunction, self.lambda_function.node.default_child)
            cfn_function.add_property_override("SnapStart", {"ApplyOn": "PublishedVersions"})

        self.alias = lambda_.Alias(
            self,
            f"{id}-alias",
            alias_name=constants.LAMBDA_LIVE_ALIAS,
            version=current_version,
        )

        self._add_permissions_to_all_targets(
            base_id=f"{id}-permission",
            version=current_version,
            permissions=props.permissions,
        )

        self.live_alias_function_url_domain: str | None = None
        if props.generate_url:
            function_url = self.alias.add_function_url(auth_type=lambda_.FunctionUrlAuthType.NONE)
            self.live_alias_function_url_domain = Fn.select(2, Fn.split("/", function_url.url))

            CfnOutput(
                self,
                f"{id}-url-output",
                value=function_url.url,
                export_name=create_export_name(stack, id, "url-output"),
            )

        self._add_nag_suppressions()

        logger.debug(
            "Created Lambda function construct",
            extra={
                "construct_id": id,
                "function_name": props.full_function_name,
                "otel": props.include_otel_layer,
                "snap_start": props.enable_snap_start,
                "permissions": len(props.permissions),
            },
        )

    def _log_group_arn(self, suffix: str) -> str:
        return (
            f"arn:aws:logs:{self.region}:{self.account}:log-group:"
            f"{constants.LAMBDA_LOG_GROUP_PREFIX}/{self.props.full_function_name}*{suffix}"
        )

    def _create_policy(self, id: str) -> iam.Policy:
        """Create the inline policy with CloudWatch Logs access and caller statements."""
        policy = iam.Policy(
            self,
            f"{id}-policy",
            policy_name=self.props.policy_name,
            statements=[
                iam.PolicyStatement(
                    effect=iam.Effect.ALLOW,
                    actions=[
                        "logs:CreateLogStream",
                        "logs:CreateLogGroup",
                        "logs:TagResource",
                    ],
                    resources=[self._log_group_arn(":*")],
                ),
                iam.PolicyStatement(
                    effect=iam.Effect.ALLOW,
                    actions=["logs:PutLogEvents"],
                    resources=[self._log_group_arn(":*:*")],
                ),
            ],
        )
        policy.add_statements(*self.props.policy_statements)
        return policy

    def _create_role(self, id: str) -> iam.Role:
        """Create IAM role for the Lambda function."""
        role = iam.Role(
            self,
            f"{id}-role",
            assumed_by=iam.ServicePrincipal(constants.LAMBDA_SERVICE_PRINCIPAL),
            role_name=self.props.role_name,
        )
        role.attach_inline_policy(self.policy)
        return role

    def _create_log_group(self, id: str) -> logs.LogGroup:
        return logs.LogGroup(
            self,
            f"{id}-log-group",
            log_group_name=f"{constants.LAMBDA_LOG_GROUP_PREFIX}/{self.props.full_function_name}",
            retention=logs.RetentionDays.TWO_WEEKS,
            removal_policy=RemovalPolicy.DESTROY,
        )

    def _create_function(self, id: str) -> lambda_.Function:
        props = self.props
        return lambda_.Function(
            self,
            f"{id}-function",
            function_name=props.full_function_name,
            runtime=lambda_.Runtime.PROVIDED_AL2023,
            architecture=ARCHITECTURES[props.architecture],
            handler=constants.LAMBDA_HANDLER,
            code=lambda_.Code.from_asset(props.asset_path),
            role=self.role,
            memory_size=props.memory_size,
            timeout=Duration.seconds(props.timeout_in_seconds),
            environment=dict(props.environment_variables),
            log_group=self.log_group,
            tracing=lambda_.Tracing.ACTIVE if props.include_otel_layer else lambda_.Tracing.DISABLED,
            current_version_options=lambda_.VersionOptions(removal_policy=RemovalPolicy.RETAIN),
        )

    def _otel_layer_arn(self) -> str:
        return (
            f"arn:aws:lambda:{self.region}:{constants.OTEL_LAYER_ACCOUNT}:layer:"
            f"aws-otel-collector-{self.props.architecture}-ver-{self.props.otel_layer_version}:1"
        )

    def _add_permissions_to_all_targets(
        self,
        base_id: str,
        version: lambda_.IVersion,
        permissions: list[LambdaPermission],
    ) -> None:
        """Grant each permission on the function, its current version and the live alias."""
        for index, perm in enumerate(permissions):
            permission_kwargs = {
                "principal": iam.ServicePrincipal(perm.principal),
                "action": perm.action,
                "event_source_token": perm.event_source_token,
                "source_arn": perm.source_arn,
            }
            self.lambda_function.add_permission(f"{base_id}-fn-{index}", **permission_kwargs)
            version.add_permission(f"{base_id}-ver-{index}", **permission_kwargs)
            self.alias.add_permission(f"{base_id}-alias-{index}", **permission_kwargs)

    def _add_nag_suppressions(self) -> None:
        """Add cdk-nag suppressions for expected security findings."""
        NagSuppressions.add_resource_suppressions(
            self.policy,
            suppressions=[
                {
                    "id": "AwsSolutions-IAM5",
                    "reason": "Log stream ARNs are only known at runtime; the wildcard is scoped to the function's log group.",
                },
            ],
            apply_to_children=True,
        )
