from aws_cdk import aws_certificatemanager as acm
from constructs import Construct
from config.base_config import SiteConfig


class SiteCertificate(Construct):
    """
    TLS certificate for the site domain, validated by a DNS record.

    No hosted zone is passed: the operator publishes the validation record.
    CloudFormation keeps the certificate resource in progress until ACM
    reports it issued, so anything referencing certificate_arn waits for a
    validated certificate. Renewal is left to ACM.
    """

    def __init__(self, scope: Construct, id: str, site: SiteConfig, **kwargs) -> None:
        super().__init__(scope, id)

        self.certificate = acm.Certificate(
            self, "Certificate",
            domain_name=site.site_domain,
            validation=acm.CertificateValidation.from_dns()
        )

    @property
    def certificate_arn(self) -> str:
        return self.certificate.certificate_arn
