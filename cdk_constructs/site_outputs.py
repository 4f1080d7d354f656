from aws_cdk import CfnOutput
from constructs import Construct
from pydantic import BaseModel, ConfigDict


class SiteOutputs(BaseModel):
    """Identifiers surfaced once the site is composed."""
    model_config = ConfigDict(frozen=True)

    bucket_name: str
    certificate_arn: str
    distribution_domain_name: str


def emit_outputs(scope: Construct,
                 bucket_name: str,
                 certificate_arn: str,
                 distribution_domain_name: str) -> SiteOutputs:
    outputs = SiteOutputs(
        bucket_name=bucket_name,
        certificate_arn=certificate_arn,
        distribution_domain_name=distribution_domain_name
    )

    CfnOutput(
        scope, "Bucket",
        value=outputs.bucket_name,
        description="Name of the bucket holding the site content"
    )

    CfnOutput(
        scope, "Certificate",
        value=outputs.certificate_arn,
        description="ARN of the viewer TLS certificate"
    )

    CfnOutput(
        scope, "DistributionDomainName",
        value=outputs.distribution_domain_name,
        description="Domain name of the CloudFront distribution"
    )

    return outputs
