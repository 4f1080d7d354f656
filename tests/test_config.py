import pytest
from pydantic import ValidationError

from config.base_config import DistributionConfig, RemovalConfig, SiteConfig
from config.enums import TlsPolicy
from config.loader import ConfigLoader


@pytest.mark.parametrize("domain_name, sub_domain, expected", [
    ("example.com", "", "example.com"),
    ("example.com", "blog", "blog.example.com"),
    ("example.co.uk", "www", "www.example.co.uk"),
    ("my-site.io", "a.b", "a.b.my-site.io"),
    ("Example.COM", " Blog ", "blog.example.com"),
])
def test_site_domain(domain_name, sub_domain, expected):
    site = SiteConfig(domain_name=domain_name, sub_domain=sub_domain)

    assert site.site_domain == expected


def test_sub_domain_defaults_to_apex():
    assert SiteConfig(domain_name="example.com").site_domain == "example.com"


@pytest.mark.parametrize("domain_name", [
    "",
    "example",
    "-example.com",
    "example-.com",
    "exa mple.com",
    "example.com/",
    "http://example.com",
    "192.168.1.1",
])
def test_malformed_domain_fails_fast(domain_name):
    with pytest.raises(ValidationError):
        SiteConfig(domain_name=domain_name)


def test_missing_domain_fails_fast():
    with pytest.raises(ValidationError):
        SiteConfig()


@pytest.mark.parametrize("sub_domain", ["-blog", "blog-", "bl_og", "blog."])
def test_malformed_sub_domain_fails_fast(sub_domain):
    with pytest.raises(ValidationError):
        SiteConfig(domain_name="example.com", sub_domain=sub_domain)


def test_site_domain_longer_than_a_bucket_name_is_rejected():
    with pytest.raises(ValidationError, match="cannot name a bucket"):
        SiteConfig(domain_name="example.com", sub_domain="a" * 60)


def test_documents_are_pinned_to_entry_document():
    site = SiteConfig(domain_name="example.com")

    assert site.index_document == "index.html"
    assert site.error_document == "index.html"
    assert site.index_path == "/index.html"


@pytest.mark.parametrize("key", ["index_document", "error_document"])
def test_documents_cannot_be_overridden(key):
    with pytest.raises(ValidationError):
        SiteConfig(domain_name="example.com", **{key: "404.html"})


def test_removal_defaults_retain_data():
    removal = RemovalConfig()

    assert not removal.destroy_on_teardown
    assert not removal.auto_delete_objects
    assert not removal.is_destructive


def test_auto_delete_requires_destroy():
    with pytest.raises(ValidationError, match="auto_delete_objects requires destroy_on_teardown"):
        RemovalConfig(auto_delete_objects=True)


def test_distribution_defaults():
    settings = DistributionConfig()

    assert settings.minimum_protocol_version == TlsPolicy.TLS_V1_2_2021
    assert settings.fallback_status_codes == [403]


def test_fallback_codes_are_deduplicated():
    assert DistributionConfig(fallback_status_codes=[404, 403, 403]).fallback_status_codes == [403, 404]


@pytest.mark.parametrize("codes", [[], [500]])
def test_invalid_fallback_codes(codes):
    with pytest.raises(ValidationError):
        DistributionConfig(fallback_status_codes=codes)


def test_loader_reads_environment_yaml(tmp_path):
    (tmp_path / "environments").mkdir()
    (tmp_path / "environments" / "staging.yaml").write_text(
        "aws:\n"
        "  account: \"123456789012\"\n"
        "  region: us-east-1\n"
        "site:\n"
        "  domain_name: example.com\n"
        "  sub_domain: staging\n"
        "  removal:\n"
        "    destroy_on_teardown: true\n"
    )

    config = ConfigLoader("staging", "static-site", base_path=str(tmp_path)).create_config()

    assert config.site.site_domain == "staging.example.com"
    assert config.site.removal.destroy_on_teardown
    assert not config.site.removal.auto_delete_objects
    assert config.prefix("frontend-stack") == "static-site-staging-frontend-stack"


def test_loader_rejects_bad_domain(tmp_path):
    (tmp_path / "environments").mkdir()
    (tmp_path / "environments" / "prod.yaml").write_text(
        "aws:\n"
        "  account: \"123456789012\"\n"
        "site:\n"
        "  domain_name: not_a_domain\n"
    )

    with pytest.raises(ValidationError):
        ConfigLoader("prod", "static-site", base_path=str(tmp_path)).create_config()


@pytest.mark.parametrize("env_name", ["dev", "prod"])
def test_shipped_environments_load(env_name):
    config = ConfigLoader(env_name, "static-site").create_config()

    assert config.site.domain_name == "example.com"
    assert config.aws.region_str == "us-east-1"


def test_loader_rejects_document_override(tmp_path):
    (tmp_path / "environments").mkdir()
    (tmp_path / "environments" / "dev.yaml").write_text(
        "aws:\n"
        "  account: \"123456789012\"\n"
        "site:\n"
        "  domain_name: example.com\n"
        "  error_document: 404.html\n"
    )

    with pytest.raises(ValidationError):
        ConfigLoader("dev", "static-site", base_path=str(tmp_path)).create_config()
