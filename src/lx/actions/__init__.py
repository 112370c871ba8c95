from lx.actions.base import BaseAction, HelixConfig
from lx.actions.cabinet import Cabinet, ConfigAction
from lx.actions.install import InstallAction
from lx.actions.lifecycle import BannerAction, CleanAction, StartAction, StopAction


__all__ = [
    "HelixConfig",
    "BaseAction",
    "BannerAction",
    "Cabinet",
    "CleanAction",
    "ConfigAction",
    "InstallAction",
    "StartAction",
    "StopAction",
]
