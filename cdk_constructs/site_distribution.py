from typing import List

from aws_cdk import Duration, Tags
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct
from config.base_config import SiteConfig
from .site_access import SiteAccessIdentity

# Short enough that a fixed index document reaches viewers almost at once
FALLBACK_ERROR_CACHING_TTL = Duration.seconds(1)


class SiteDistribution(Construct):
    """
    CloudFront distribution serving the private bucket.

    The bucket is the single origin and is only reachable through the origin
    access identity. Viewer TLS uses the site certificate (SNI). Missing
    objects come back from the private bucket as 403, which is remapped to
    the index document with a 200 so that client-side routes work on deep
    links.
    """

    def __init__(self,
                 scope: Construct,
                 id: str,
                 site: SiteConfig,
                 bucket: s3.IBucket,
                 identity: SiteAccessIdentity,
                 certificate_arn: str,
                 **kwargs) -> None:
        super().__init__(scope, id)
        self.site = site
        settings = site.distribution

        # The ARN is threaded in by value; the imported reference renders as a
        # Ref to the certificate declared by SiteCertificate.
        self.certificate = acm.Certificate.from_certificate_arn(
            self, "ViewerCertificate", certificate_arn
        )

        self.distribution = cloudfront.Distribution(
            self, "Distribution",
            comment=settings.comment or f"Static site {site.site_domain}",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.S3BucketOrigin.with_origin_access_identity(
                    bucket,
                    origin_access_identity=identity.identity
                ),
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
                allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
                compress=True
            ),
            default_root_object=site.index_document,
            error_responses=self._fallback_error_responses(),
            price_class=cloudfront.PriceClass[settings.price_class.name],
            domain_names=[site.site_domain],
            certificate=self.certificate,
            ssl_support_method=cloudfront.SSLMethod.SNI,
            minimum_protocol_version=cloudfront.SecurityPolicyProtocol[settings.minimum_protocol_version.name]
        )

        Tags.of(self.distribution).add("Name", site.site_domain)

    def _fallback_error_responses(self) -> List[cloudfront.ErrorResponse]:
        return [
            cloudfront.ErrorResponse(
                http_status=code,
                response_http_status=200,
                response_page_path=self.site.index_path,
                ttl=FALLBACK_ERROR_CACHING_TTL
            )
            for code in self.site.distribution.fallback_status_codes
        ]

    @property
    def distribution_id(self) -> str:
        return self.distribution.distribution_id

    @property
    def domain_name(self) -> str:
        return self.distribution.distribution_domain_name
