# config/loader.py
import logging
import os
from typing import Dict, Any

import yaml

from .base_config import InfrastructureConfig, AwsConfig, SiteConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    def __init__(self, env_name: str, project_name: str, base_path: str = None):
        self.env_name = env_name
        self.project_name = project_name
        self.base_path = base_path or os.path.dirname(os.path.abspath(__file__))

    @property
    def config_path(self) -> str:
        return os.path.join(self.base_path, 'environments', f'{self.env_name}.yaml')

    def load_environment_config(self) -> Dict[str, Any]:
        """Load the configuration from the YAML file."""
        logger.info("Loading %s configuration from %s", self.env_name, self.config_path)
        with open(self.config_path, 'r') as f:
            return yaml.safe_load(f) or {}

    def create_config(self) -> InfrastructureConfig:
        """Create the complete configuration."""
        env_config = self.load_environment_config()

        config = {
            'env_name': self.env_name,
            'project_name': self.project_name,
            'aws': AwsConfig(**env_config.get('aws', {})),
            'site': SiteConfig(**env_config.get('site', {})),
        }

        return InfrastructureConfig(**config)
