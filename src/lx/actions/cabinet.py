from dataclasses import asdict, dataclass
import json
import logging

import click

from lx.actions.base import BaseAction
from lx.helpers import ConfigFileError

logger = logging.getLogger(__name__)

# (field, prompt) in the order they are asked
CABINET_FIELDS = [
    ("name", "Name"),
    ("address", "Address"),
    ("city", "City"),
    ("phone", "Phone"),
    ("email", "Email"),
    ("website", "Website"),
    ("siret", "Siret"),
]


@dataclass
class Cabinet:
    name: str
    address: str
    city: str
    phone: str
    email: str
    website: str
    siret: str


def collect_cabinet() -> Cabinet:
    """Read the cabinet information from the user, values are not validated"""
    click.echo(" -- Cabinet Information --")
    values = {}
    for field_name, label in CABINET_FIELDS:
        values[field_name] = click.prompt(f" -- {label}", default="", show_default=False)

    return Cabinet(**values)


def write_cabinet(cabinet: Cabinet, path: str):
    """Write the cabinet as pretty printed JSON, an existing file is overwritten"""
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(cabinet), f, indent=4)
    except OSError as e:
        raise ConfigFileError(f"Could not write {path}: {e}") from e


class ConfigAction(BaseAction):
    """Create the cabinet configuration file"""

    def run(self):
        cabinet = collect_cabinet()
        write_cabinet(cabinet, self.config.config_file)
        logger.info("Cabinet configuration written to %s", self.config.config_file)
        click.echo(f"✓ Configuration saved to {self.config.config_file}")
