from pydantic import BaseModel, Field


class StaticSiteConstructProps(BaseModel):
    """
    Configuration for a static website served through CloudFront.

    ``domain_name`` must match an existing Route53 hosted zone. The site is
    published at ``{site_sub_domain}.{domain_name}``.
    """

    domain_name: str = Field(..., min_length=1, description="Root domain with a hosted zone, e.g. example.com")
    site_sub_domain: str = Field(..., min_length=1, description="Subdomain of the site, e.g. www")
    asset_path: str = Field(..., min_length=1, description="Directory with the built website")
    api_domain: str | None = Field(default=None, description="Origin for /api/* requests")
    alternate_domains: list[str] = Field(default_factory=list, description="Extra names on the certificate and CDN")

    @property
    def site_domain(self) -> str:
        return f"{self.site_sub_domain}.{self.domain_name}"
