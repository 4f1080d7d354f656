import logging

from constructs import Construct
from config.base_config import SiteConfig
from .site_access import SiteAccessIdentity, bind_read_access
from .site_bucket import SiteBucket
from .site_certificate import SiteCertificate
from .site_deployment import SiteDeployment
from .site_distribution import SiteDistribution
from .site_graph import SiteGraph
from .site_outputs import SiteOutputs, emit_outputs

logger = logging.getLogger(__name__)


class StaticSite(Construct):
    """
    Private bucket served through CloudFront on a custom domain.

    Resources are declared through a SiteGraph so every identifier a resource
    references comes from a step it depends on:

        bucket, certificate, identity
        policy        <- bucket, identity
        distribution  <- bucket, certificate, identity, policy
        deployment    <- bucket, distribution
        outputs       <- bucket, certificate, distribution
    """

    def __init__(self, scope: Construct, id: str, site: SiteConfig, asset_path: str = None, **kwargs) -> None:
        super().__init__(scope, id)
        self.site = site
        self.asset_path = asset_path

        self.graph = self._create_graph()
        logger.info("Composing static site %s", site.site_domain)
        results = self.graph.build()

        self.site_bucket: SiteBucket = results["bucket"]
        self.site_certificate: SiteCertificate = results["certificate"]
        self.access_identity: SiteAccessIdentity = results["identity"]
        self.bucket_policy = results["policy"]
        self.site_distribution: SiteDistribution = results["distribution"]
        self.site_deployment: SiteDeployment = results["deployment"]
        self.outputs: SiteOutputs = results["outputs"]

    @property
    def bucket(self):
        return self.site_bucket.bucket

    @property
    def certificate(self):
        return self.site_certificate.certificate

    @property
    def distribution(self):
        return self.site_distribution.distribution

    def _create_graph(self) -> SiteGraph:
        graph = SiteGraph()
        graph.add_step("bucket", self._create_bucket)
        graph.add_step("certificate", self._create_certificate)
        graph.add_step("identity", self._create_identity)
        graph.add_step("policy", self._bind_policy, requires=("bucket", "identity"))
        graph.add_step(
            "distribution", self._create_distribution,
            requires=("bucket", "certificate", "identity", "policy")
        )
        graph.add_step("deployment", self._create_deployment, requires=("bucket", "distribution"))
        graph.add_step("outputs", self._emit_outputs, requires=("bucket", "certificate", "distribution"))
        return graph

    def _create_bucket(self, refs) -> SiteBucket:
        return SiteBucket(self, "SiteBucket", site=self.site)

    def _create_certificate(self, refs) -> SiteCertificate:
        return SiteCertificate(self, "SiteCertificate", site=self.site)

    def _create_identity(self, refs) -> SiteAccessIdentity:
        return SiteAccessIdentity(self, "SiteAccessIdentity", site=self.site)

    def _bind_policy(self, refs):
        return bind_read_access(refs["bucket"].bucket, refs["identity"])

    def _create_distribution(self, refs) -> SiteDistribution:
        site_distribution = SiteDistribution(
            self, "SiteDistribution",
            site=self.site,
            bucket=refs["bucket"].bucket,
            identity=refs["identity"],
            certificate_arn=refs["certificate"].certificate_arn
        )
        # the certificate must be issued and the bucket private before serving
        site_distribution.node.add_dependency(refs["certificate"])
        site_distribution.node.add_dependency(refs["policy"])
        return site_distribution

    def _create_deployment(self, refs) -> SiteDeployment:
        return SiteDeployment(
            self, "SiteDeployment",
            site=self.site,
            bucket=refs["bucket"].bucket,
            distribution=refs["distribution"].distribution,
            asset_path=self.asset_path
        )

    def _emit_outputs(self, refs) -> SiteOutputs:
        return emit_outputs(
            self,
            bucket_name=refs["bucket"].bucket_name,
            certificate_arn=refs["certificate"].certificate_arn,
            distribution_domain_name=refs["distribution"].domain_name
        )
