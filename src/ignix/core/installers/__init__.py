from ignix.core.installers.base import AssetInstaller, merge_packages
from ignix.core.installers.component import ComponentInstaller
from ignix.core.installers.template import TemplateInstaller
from ignix.core.installers.theme import ThemeInstaller
from ignix.core.installers.writer import write_if_absent

__all__ = [
    "AssetInstaller",
    "ComponentInstaller",
    "TemplateInstaller",
    "ThemeInstaller",
    "merge_packages",
    "write_if_absent",
]
