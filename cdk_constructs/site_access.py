from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct
from config.base_config import SiteConfig


class SiteAccessIdentity(Construct):
    """Principal standing for the CloudFront distribution when it reads the bucket."""

    def __init__(self, scope: Construct, id: str, site: SiteConfig, **kwargs) -> None:
        super().__init__(scope, id)

        self.identity = cloudfront.OriginAccessIdentity(
            self, "OriginAccessIdentity",
            comment=f"OAI for {site.site_domain}"
        )

    @property
    def canonical_user_id(self) -> str:
        return self.identity.cloud_front_origin_access_identity_s3_canonical_user_id


def read_statement(bucket: s3.IBucket, canonical_user_id: str) -> iam.PolicyStatement:
    """The single grant on the site bucket: the CDN may read objects."""
    return iam.PolicyStatement(
        actions=["s3:GetObject"],
        resources=[bucket.arn_for_objects("*")],
        principals=[iam.CanonicalUserPrincipal(canonical_user_id)]
    )


def bind_read_access(bucket: s3.IBucket, identity: SiteAccessIdentity) -> s3.BucketPolicy:
    """
    Grants the access identity s3:GetObject on every object of the bucket.

    The bucket policy is rendered from scratch on every synth, so applying it
    replaces whatever statements drifted into the live policy. Identical
    statements are de-duplicated when the policy document is rendered, so
    binding twice still yields a single statement.

    Returns:
        The bucket policy holding the statement
    """
    result = bucket.add_to_resource_policy(read_statement(bucket, identity.canonical_user_id))
    if not result.statement_added:
        raise ValueError(f"Bucket {bucket.node.path} does not accept a resource policy")
    return bucket.policy
