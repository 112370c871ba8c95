from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import os

from lx.helpers import DockerHelper, EnvFile


def _env_list(name: str, default: str) -> list:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class HelixConfig:
    compose_binary: str = "docker-compose"
    docker_binary: str = "docker"
    compose_dev: str = "docker-compose.dev.yml"
    compose_prod: str = "releases/docker-compose.yml"
    compose_install: str = "./docker-compose.yml"
    env_file: str = ".env"
    config_file: str = "config.json"
    api_port: int = 3001
    default_db_password: str = "root"
    token_length: int = 128
    dev_images: list = field(
        default_factory=lambda: ["helix-dev-server", "helix-dev-db", "helix-dev-client"]
    )
    prod_images: list = field(
        default_factory=lambda: [
            "xavier2p/helix-server",
            "xavier2p/helix-db",
            "xavier2p/helix-client",
        ]
    )
    dev: bool = False
    show_password: bool = False

    @classmethod
    def from_env(cls, dev: bool = False, show_password: bool = False) -> "HelixConfig":
        """Build the configuration from HELIX_* environment variables"""
        defaults = cls()
        return cls(
            compose_binary=os.getenv("HELIX_COMPOSE_BINARY", defaults.compose_binary),
            docker_binary=os.getenv("HELIX_DOCKER_BINARY", defaults.docker_binary),
            compose_dev=os.getenv("HELIX_COMPOSE_DEV", defaults.compose_dev),
            compose_prod=os.getenv("HELIX_COMPOSE_PROD", defaults.compose_prod),
            compose_install=os.getenv("HELIX_COMPOSE_INSTALL", defaults.compose_install),
            env_file=os.getenv("HELIX_ENV_FILE", defaults.env_file),
            config_file=os.getenv("HELIX_CONFIG_FILE", defaults.config_file),
            api_port=int(os.getenv("HELIX_API_PORT", defaults.api_port)),
            default_db_password=os.getenv(
                "HELIX_DEFAULT_DB_PASSWORD", defaults.default_db_password
            ),
            token_length=int(os.getenv("HELIX_TOKEN_LENGTH", defaults.token_length)),
            dev_images=_env_list("HELIX_DEV_IMAGES", ",".join(defaults.dev_images)),
            prod_images=_env_list("HELIX_PROD_IMAGES", ",".join(defaults.prod_images)),
            dev=dev,
            show_password=show_password,
        )

    @property
    def compose_file(self) -> str:
        """Compose file of the selected mode"""
        return self.compose_dev if self.dev else self.compose_prod

    @property
    def images(self) -> list:
        """Images of the selected mode, server, database then client"""
        return self.dev_images if self.dev else self.prod_images


class BaseAction(ABC):
    """Base class for all commands of the tool"""

    banner: str | None = None

    def __init__(self, config: HelixConfig):
        self.config = config
        self.docker = DockerHelper(config.compose_binary, config.docker_binary)
        self.env_file = EnvFile(config.env_file)

    @abstractmethod
    def run(self):
        """Execute the command"""
        pass
