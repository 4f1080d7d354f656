from aws_cdk import App, Environment
from aws_cdk.assertions import Template

from config.base_config import AwsConfig, InfrastructureConfig, SiteConfig
from stacks.frontend_stack import FrontendStack

TEST_ENV = Environment(account="123456789012", region="us-east-1")


def make_config(**site) -> InfrastructureConfig:
    site.setdefault("domain_name", "example.com")
    return InfrastructureConfig(
        env_name="dev",
        project_name="static-site",
        aws=AwsConfig(account="123456789012", region="us-east-1"),
        site=SiteConfig(**site)
    )


def synth_stack(config: InfrastructureConfig, asset_dir: str):
    app = App()
    stack = FrontendStack(app, "FrontendStack", config=config, asset_path=asset_dir, env=TEST_ENV)
    return stack, Template.from_stack(stack)


def logical_id(template: Template, resource_type: str) -> str:
    resources = template.find_resources(resource_type)
    assert len(resources) == 1, f"expected one {resource_type}, found {len(resources)}"
    return next(iter(resources))


def output_value(template: Template, prefix: str):
    outputs = {
        key: value for key, value in template.find_outputs("*").items()
        if key.startswith(prefix)
    }
    assert len(outputs) == 1, f"expected one output starting with {prefix}, found {list(outputs)}"
    return next(iter(outputs.values()))["Value"]
