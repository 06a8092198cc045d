from typing import Literal

from aws_cdk import aws_iam as iam
from pydantic import BaseModel, ConfigDict, Field

from layered_constructs import constants


class LambdaPermission(BaseModel):
    """Invoke permission granted to a service principal on the function, its version and its alias."""

    principal: str = Field(..., min_length=1, description="Service principal, e.g. apigateway.amazonaws.com")
    action: str = Field(..., min_length=1, description="Lambda action, e.g. lambda:InvokeFunction")
    event_source_token: str | None = Field(default=None, description="Token required by Alexa skills")
    source_arn: str | None = Field(default=None, description="ARN of the invoking resource")


class LambdaFunctionConstructProps(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    function_name: str = Field(..., min_length=1)
    function_suffix: str = Field(..., min_length=1, description="Appended to the name, e.g. the stage")
    asset_path: str = Field(..., min_length=1, description="Directory or zip with the bootstrap binary")
    role_name: str = Field(..., min_length=1)
    policy_name: str = Field(..., min_length=1)
    policy_statements: list[iam.PolicyStatement] = Field(default_factory=list)
    environment_variables: dict[str, str] = Field(default_factory=dict)
    include_otel_layer: bool = True
    permissions: list[LambdaPermission] = Field(default_factory=list)
    enable_snap_start: bool = False
    memory_size: int = Field(
        default=constants.LAMBDA_MEMORY_SIZE,
        ge=constants.LAMBDA_MIN_MEMORY_SIZE,
        le=constants.LAMBDA_MAX_MEMORY_SIZE,
    )
    timeout_in_seconds: int = Field(default=constants.LAMBDA_TIMEOUT, ge=1, le=constants.LAMBDA_MAX_TIMEOUT)
    architecture: Literal["amd64", "arm64"] = constants.DEFAULT_ARCHITECTURE
    otel_layer_version: str = constants.OTEL_LAYER_VERSION
    generate_url: bool = False

    @property
    def full_function_name(self) -> str:
        return f"{self.function_name}-{self.function_suffix}"
