import logging

from aws_cdk import Annotations, RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct
from config.base_config import SiteConfig

logger = logging.getLogger(__name__)

DESTRUCTIVE_TEARDOWN_WARNING = "static-site:destructiveTeardown"


class SiteBucket(Construct):
    """
    Private bucket holding the site content.

    Public access is always fully blocked; the only reader is the CloudFront
    origin access identity bound in site_access.
    """

    def __init__(self, scope: Construct, id: str, site: SiteConfig, **kwargs) -> None:
        super().__init__(scope, id)
        self.site = site

        removal = site.removal
        self.bucket = s3.Bucket(
            self, "Bucket",
            bucket_name=site.site_domain,
            public_read_access=False,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            encryption=s3.BucketEncryption.S3_MANAGED,
            removal_policy=RemovalPolicy.DESTROY if removal.destroy_on_teardown else RemovalPolicy.RETAIN,
            auto_delete_objects=removal.auto_delete_objects,
            website_index_document=site.index_document,
            website_error_document=site.error_document
        )

        if removal.is_destructive:
            self._warn_destructive_teardown()

    def _warn_destructive_teardown(self):
        message = (
            f"Bucket {self.site.site_domain} is destroyed on stack deletion"
            + (" together with all of its objects" if self.site.removal.auto_delete_objects else "")
            + ". Disable site.removal.destroy_on_teardown to retain site content."
        )
        logger.warning(message)
        Annotations.of(self).add_warning_v2(DESTRUCTIVE_TEARDOWN_WARNING, message)

    @property
    def bucket_name(self) -> str:
        return self.bucket.bucket_name
