"""
Configuration Management Module

This module defines the configuration structure for the static site
infrastructure. It uses Pydantic for data validation so that a malformed
domain is rejected before any CDK construct is declared.

Structure:
- BaseConfig: Base class with common functionality
- AWS Configuration: AwsConfig
- Site Configuration: SiteConfig, RemovalConfig, DistributionConfig

Configurations can be overridden via YAML files per environment.
Example file structure:
```
config/
  └── environments/
      ├── dev.yaml
      ├── staging.yaml
      └── prod.yaml

```
"""

import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from aws_cdk import Tags, Stack
from .enums import (
    AwsRegion,
    EnvironmentName,
    PriceClass,
    TlsPolicy
)


_LABEL = r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"
DOMAIN_PATTERN = re.compile(rf"^(?:{_LABEL}\.)+[a-z][a-z0-9-]{{0,61}}[a-z0-9]$")
SUB_DOMAIN_PATTERN = re.compile(rf"^{_LABEL}(?:\.{_LABEL})*$")
BUCKET_NAME_MAX_LENGTH = 63
# Entry document of the single-page app, also served for every website error
INDEX_DOCUMENT = "index.html"


class BaseConfig(BaseModel):
    """
    Base configuration with common methods.

    This class provides basic functionality like tag management
    and resource prefix generation.

    Attributes:
        env_name: Deployment environment (dev, prod, etc.)
        project_name: Project name
    """
    env_name: EnvironmentName
    project_name: str

    @property
    def env_name_str(self) -> str:
        """Returns the environment name as a string."""
        return self.env_name.value

    def prefix(self, base: str) -> str:
        """Generates a standardized prefix for resources."""
        return f"{self.project_name}-{self.env_name_str}-{base}"

    def add_stack_global_tags(self, stack: Stack):
        """Adds global tags to the configuration."""
        for key, value in self.tags.items():
            Tags.of(stack).add(key, value)

    @property
    def tags(self):
        """Standardized tags to apply to all resources."""
        return {
            "EnvName": self.env_name_str,
            "ProjectName": self.project_name,
            "ManagedBy": "CDK"
        }


class AwsConfig(BaseModel):
    """
    Base AWS configuration.

    Opaque to the site composition: it is only handed to the stack
    environment.

    Attributes:
        account: AWS account ID
        region: AWS deployment region, us-east-1 only since the viewer
            certificate must be issued there
    """
    account: str = Field(pattern=r"^\d{12}$")
    region: AwsRegion = AwsRegion.US_EAST_1

    @property
    def region_str(self) -> str:
        """Returns the region as a string."""
        return self.region.value


class RemovalConfig(BaseModel):
    """
    Teardown behaviour of the site bucket.

    Both flags default to retaining data. Enabling them means that
    deleting the stack deletes the bucket and every object in it.

    Attributes:
        destroy_on_teardown: Delete the bucket with the stack (default: False)
        auto_delete_objects: Empty the bucket before deleting it (default: False)
    """
    destroy_on_teardown: bool = False
    auto_delete_objects: bool = False

    @model_validator(mode='after')
    def validate_auto_delete(self) -> 'RemovalConfig':
        """Objects can only be auto-deleted when the bucket itself is destroyed."""
        if self.auto_delete_objects and not self.destroy_on_teardown:
            raise ValueError(
                "auto_delete_objects requires destroy_on_teardown to be enabled"
            )
        return self

    @property
    def is_destructive(self) -> bool:
        return self.destroy_on_teardown


class DistributionConfig(BaseModel):
    """
    CloudFront distribution configuration.

    Attributes:
        minimum_protocol_version: Minimum viewer TLS policy (default: TLSv1.2_2021)
        price_class: Edge locations served (default: PriceClass_100)
        fallback_status_codes: Origin status codes remapped to the index document (default: [403])
        comment: Distribution comment (optional)
    """
    minimum_protocol_version: TlsPolicy = TlsPolicy.TLS_V1_2_2021
    price_class: PriceClass = PriceClass.PRICE_CLASS_100
    fallback_status_codes: List[int] = Field(default_factory=lambda: [403])
    comment: str = ""

    @field_validator('fallback_status_codes')
    @classmethod
    def validate_fallback_codes(cls, codes: List[int]) -> List[int]:
        if not codes:
            raise ValueError("fallback_status_codes must contain at least 403")
        for code in codes:
            if code not in (403, 404):
                raise ValueError(f"Unsupported fallback status code: {code}")
        # duplicates would declare the same error response twice
        return sorted(set(codes))


class SiteConfig(BaseModel):
    """
    Static site configuration.

    The bucket index and error documents and the CloudFront fallback page
    are all INDEX_DOCUMENT; unknown keys are rejected.

    Attributes:
        domain_name: Fully-qualified domain name (e.g. "example.com")
        sub_domain: Optional sub domain, empty for the apex domain
        asset_path: Local directory uploaded by the deployment step (default: "website")
        removal: Bucket teardown behaviour
        distribution: CloudFront settings

    Example:
        ```python
        site = SiteConfig(domain_name="example.com", sub_domain="blog")
        site.site_domain  # "blog.example.com"
        ```
    """
    model_config = ConfigDict(extra='forbid')

    domain_name: str
    sub_domain: str = ""
    asset_path: str = "website"
    removal: RemovalConfig = RemovalConfig()
    distribution: DistributionConfig = DistributionConfig()

    @field_validator('domain_name', 'sub_domain', mode='before')
    @classmethod
    def normalize_domain(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator('domain_name')
    @classmethod
    def validate_domain_name(cls, value: str) -> str:
        if not value:
            raise ValueError("domain_name is required")
        if not DOMAIN_PATTERN.match(value):
            raise ValueError(f"domain_name is not a fully-qualified domain: {value!r}")
        return value

    @field_validator('sub_domain')
    @classmethod
    def validate_sub_domain(cls, value: str) -> str:
        if value and not SUB_DOMAIN_PATTERN.match(value):
            raise ValueError(f"sub_domain is not a valid DNS label: {value!r}")
        return value

    @model_validator(mode='after')
    def validate_site_domain(self) -> 'SiteConfig':
        """The site domain doubles as the globally unique bucket name."""
        if len(self.site_domain) > BUCKET_NAME_MAX_LENGTH:
            raise ValueError(
                f"site domain {self.site_domain!r} is longer than "
                f"{BUCKET_NAME_MAX_LENGTH} characters and cannot name a bucket"
            )
        return self

    @property
    def site_domain(self) -> str:
        """Returns the domain the site is served from."""
        if self.sub_domain:
            return f"{self.sub_domain}.{self.domain_name}"
        return self.domain_name

    @property
    def index_document(self) -> str:
        return INDEX_DOCUMENT

    @property
    def error_document(self) -> str:
        """Website errors fall back to the entry document as well."""
        return INDEX_DOCUMENT

    @property
    def index_path(self) -> str:
        """Viewer path of the index document."""
        return f"/{INDEX_DOCUMENT}"


class InfrastructureConfig(BaseConfig):
    """
    Complete infrastructure configuration.

    Attributes:
        aws: Base AWS configuration
        site: Static site configuration

    Example:
        ```yaml
        # config/environments/dev.yaml
        aws:
          account: "123456789012"
          region: us-east-1

        site:
          domain_name: "example.com"
          sub_domain: "dev"
          removal:
            destroy_on_teardown: true
            auto_delete_objects: true
        ```
    """
    aws: AwsConfig
    site: SiteConfig
