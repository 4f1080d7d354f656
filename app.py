#!/usr/bin/env python3
import logging

from aws_cdk import App, Environment
from stacks.frontend_stack import FrontendStack
from config.loader import ConfigLoader

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

app = App()

env_name = app.node.try_get_context('env') or 'dev'
project_name = app.node.try_get_context('project') or 'static-site'
# Load configuration
config_loader = ConfigLoader(env_name, project_name)
config = config_loader.create_config()

frontend_stack = FrontendStack(
    app,
    "FrontendStack",
    stack_name=config.prefix("frontend-stack"),
    env=Environment(
        account=config.aws.account,
        region=config.aws.region_str
    ),
    config=config
)

app.synth()
