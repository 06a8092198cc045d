"""
Static Site Construct.

Creates the infrastructure for a static website:
- S3 bucket configured for website hosting
- ACM certificate validated through the domain's Route53 hosted zone
- CloudFront distribution, optionally proxying /api/* to an API domain
- Route53 A records for the site domain and every alternate domain
- Deployment of the site assets with a CloudFront invalidation
"""

from typing import Any

from aws_cdk import Duration, RemovalPolicy
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3deploy
from aws_lambda_powertools import Logger
from cdk_nag import NagSuppressions
from constructs import Construct

from layered_constructs import constants
from layered_constructs.models import StaticSiteConstructProps

logger = Logger()


class StaticSiteConstruct(Construct):
    """
    Static website served from S3 through CloudFront on a custom domain.

    The hosted zone for ``props.domain_name`` must already exist; it is
    looked up at synth time, so the enclosing stack needs an explicit
    account and region.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        props: StaticSiteConstructProps,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        self.props = props
        self.site_domain = props.site_domain

        self.zone = route53.HostedZone.from_lookup(self, id, domain_name=props.domain_name)
        self.bucket = self._create_bucket(id)
        self.certificate = self._create_certificate(id)
        self.distribution = self._create_distribution(id)

        if props.api_domain and props.api_domain.strip():
            self._add_api_behavior(props.api_domain)

        self._create_records(id)
        self.deployment = self._create_deployment(id)

        self._add_nag_suppressions()

        logger.debug(
            "Created static site construct",
            extra={
                "construct_id": id,
                "site_domain": self.site_domain,
                "alternate_domains": props.alternate_domains,
                "api_domain": props.api_domain,
            },
        )

    def _create_bucket(self, id: str) -> s3.Bucket:
        """Create S3 bucket for static website hosting."""
        return s3.Bucket(
            self,
            f"{id}-bucket",
            bucket_name=self.site_domain,
            website_index_document=constants.SITE_INDEX_DOCUMENT,
            website_error_document=constants.SITE_INDEX_DOCUMENT,
            public_read_access=True,
            block_public_access=s3.BlockPublicAccess(
                block_public_policy=False,
                block_public_acls=False,
                ignore_public_acls=False,
                restrict_public_buckets=False,
            ),
            removal_policy=RemovalPolicy.DESTROY,
            versioned=False,
            auto_delete_objects=True,
            lifecycle_rules=[
                s3.LifecycleRule(
                    enabled=True,
                    noncurrent_version_expiration=Duration.days(constants.SITE_NONCURRENT_VERSION_EXPIRATION_DAYS),
                ),
            ],
        )

    def _create_certificate(self, id: str) -> acm.Certificate:
        """Create SSL certificate with DNS validation."""
        return acm.Certificate(
            self,
            f"{id}-certificate",
            domain_name=self.site_domain,
            validation=acm.CertificateValidation.from_dns(self.zone),
            subject_alternative_names=list(self.props.alternate_domains) or None,
        )

    def _create_distribution(self, id: str) -> cloudfront.Distribution:
        """Create CloudFront distribution in front of the website bucket."""
        return cloudfront.Distribution(
            self,
            f"{id}-cdn",
            domain_names=[self.site_domain, *self.props.alternate_domains],
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.S3StaticWebsiteOrigin(
                    self.bucket,
                    protocol_policy=cloudfront.OriginProtocolPolicy.HTTP_ONLY,
                ),
                allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD,
                compress=True,
            ),
            certificate=self.certificate,
            error_responses=[
                cloudfront.ErrorResponse(
                    http_status=403,
                    response_http_status=200,
                    response_page_path=constants.SITE_ERROR_PAGE_PATH,
                ),
            ],
        )

    def _add_api_behavior(self, api_domain: str) -> None:
        """Forward /api/* to the API domain without caching."""
        self.distribution.add_behavior(
            constants.SITE_API_PATH_PATTERN,
            origins.HttpOrigin(api_domain, protocol_policy=cloudfront.OriginProtocolPolicy.HTTPS_ONLY),
            allowed_methods=cloudfront.AllowedMethods.ALLOW_ALL,
            cache_policy=cloudfront.CachePolicy.CACHING_DISABLED,
            origin_request_policy=cloudfront.OriginRequestPolicy.ALL_VIEWER_EXCEPT_HOST_HEADER,
            viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            compress=True,
        )

    def _create_records(self, id: str) -> None:
        """Create A records for the site domain and each alternate domain."""
        target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(self.distribution))

        route53.ARecord(self, f"{id}-alias-record", zone=self.zone, record_name=self.site_domain, target=target)

        for counter, domain in enumerate(self.props.alternate_domains):
            route53.ARecord(self, f"{id}-alias-record-{counter}", zone=self.zone, record_name=domain, target=target)

    def _create_deployment(self, id: str) -> s3deploy.BucketDeployment:
        """Deploy the site assets and invalidate the CloudFront cache."""
        return s3deploy.BucketDeployment(
            self,
            f"{id}-deployment",
            sources=[s3deploy.Source.asset(self.props.asset_path)],
            destination_bucket=self.bucket,
            distribution=self.distribution,
            distribution_paths=["/*"],
            memory_limit=constants.SITE_DEPLOYMENT_MEMORY_LIMIT,
        )

    def _add_nag_suppressions(self) -> None:
        """Add cdk-nag suppressions for a publicly readable website."""
        NagSuppressions.add_resource_suppressions(
            self.bucket,
            [
                {"id": "AwsSolutions-S1", "reason": "Access logging is not required for public static assets"},
                {"id": "AwsSolutions-S2", "reason": "Website hosting requires public read access"},
                {"id": "AwsSolutions-S5", "reason": "Served through the S3 website endpoint, which does not support OAI"},
                {"id": "AwsSolutions-S10", "reason": "The S3 website endpoint only supports HTTP"},
            ],
            apply_to_children=True,
        )

        NagSuppressions.add_resource_suppressions(
            self.distribution,
            [
                {"id": "AwsSolutions-CFR1", "reason": "Public website without geo restrictions"},
                {"id": "AwsSolutions-CFR2", "reason": "WAF is managed outside this construct"},
                {"id": "AwsSolutions-CFR3", "reason": "Access logging is not required for public static assets"},
                {"id": "AwsSolutions-CFR4", "reason": "Viewer TLS policy follows the CloudFront default"},
                {"id": "AwsSolutions-CFR5", "reason": "The S3 website endpoint only supports HTTP"},
            ],
            apply_to_children=True,
        )

        NagSuppressions.add_resource_suppressions(
            self.deployment,
            [
                {"id": "AwsSolutions-IAM4", "reason": "BucketDeployment handler uses the Lambda basic execution role"},
                {"id": "AwsSolutions-IAM5", "reason": "BucketDeployment handler needs object-level wildcards"},
                {"id": "AwsSolutions-L1", "reason": "BucketDeployment handler runtime is managed by CDK"},
            ],
            apply_to_children=True,
        )
