from enum import Enum


class EnvironmentName(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class AwsRegion(str, Enum):
    US_EAST_1 = "us-east-1"


class TlsPolicy(str, Enum):
    """Minimum viewer TLS policies accepted by CloudFront."""
    TLS_V1_2016 = "TLSv1_2016"
    TLS_V1_1_2016 = "TLSv1.1_2016"
    TLS_V1_2_2018 = "TLSv1.2_2018"
    TLS_V1_2_2019 = "TLSv1.2_2019"
    TLS_V1_2_2021 = "TLSv1.2_2021"


class PriceClass(str, Enum):
    PRICE_CLASS_100 = "PriceClass_100"
    PRICE_CLASS_200 = "PriceClass_200"
    PRICE_CLASS_ALL = "PriceClass_All"
