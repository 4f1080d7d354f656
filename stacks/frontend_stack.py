from aws_cdk import Stack
from constructs import Construct
from cdk_constructs.static_site import StaticSite
from config.base_config import InfrastructureConfig


class FrontendStack(Stack):
    def __init__(self,
                 scope: Construct,
                 construct_id: str,
                 config: InfrastructureConfig,
                 asset_path: str = None,
                 **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)
        self.config = config
        # Bucket, certificate, CloudFront distribution and asset deployment
        self.static_site = StaticSite(
            self, "StaticSite",
            site=self.config.site,
            asset_path=asset_path
        )
        self.outputs = self.static_site.outputs

        # Global tags for the stack
        self.config.add_stack_global_tags(self)
