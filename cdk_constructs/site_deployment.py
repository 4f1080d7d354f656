import logging
import os

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3deploy
from constructs import Construct
from config.base_config import SiteConfig
from .errors import AssetSourceError

logger = logging.getLogger(__name__)

INVALIDATION_PATHS = ["/*"]


class SiteDeployment(Construct):
    """
    Uploads the local site assets and invalidates every cached path.

    Runs after the distribution exists since the invalidation needs its ID.
    Re-deploying unchanged assets rewrites the same objects and issues one
    more invalidation.
    """

    def __init__(self,
                 scope: Construct,
                 id: str,
                 site: SiteConfig,
                 bucket: s3.IBucket,
                 distribution: cloudfront.IDistribution,
                 asset_path: str = None,
                 **kwargs) -> None:
        super().__init__(scope, id)

        self.asset_path = os.path.abspath(asset_path or site.asset_path)
        if not os.path.isdir(self.asset_path):
            raise AssetSourceError(self.asset_path)
        logger.info("Deploying site assets from %s to %s", self.asset_path, site.site_domain)

        self.deployment = s3deploy.BucketDeployment(
            self, "DeployWebsite",
            sources=[s3deploy.Source.asset(self.asset_path)],
            destination_bucket=bucket,
            distribution=distribution,
            distribution_paths=INVALIDATION_PATHS
        )
