"""
CDK Constructs Package

This package contains the constructs composing a private S3 bucket served
through CloudFront on a custom domain.
"""

from .errors import AssetSourceError, CompositionError, UnresolvedReferenceError
from .site_access import SiteAccessIdentity, bind_read_access
from .site_bucket import SiteBucket
from .site_certificate import SiteCertificate
from .site_deployment import SiteDeployment
from .site_distribution import SiteDistribution
from .site_graph import SiteGraph
from .site_outputs import SiteOutputs, emit_outputs
from .static_site import StaticSite

__all__ = [
    'AssetSourceError',
    'CompositionError',
    'UnresolvedReferenceError',
    'SiteAccessIdentity',
    'bind_read_access',
    'SiteBucket',
    'SiteCertificate',
    'SiteDeployment',
    'SiteDistribution',
    'SiteGraph',
    'SiteOutputs',
    'emit_outputs',
    'StaticSite'
]
