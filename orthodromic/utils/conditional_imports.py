"""
Import hook for optional dependencies such as geographiclib
"""

__all__ = ['ConditionalPackageInterceptor']

from importlib import util
import subprocess
import sys
from typing import Union

from orthodromic.utils.logging import LOGGER


class ConditionalPackageInterceptor:
    """
    Last finder on sys.meta_path. For registered optional packages that are not
    installed, raises a ModuleNotFoundError naming the extra to install, or pip
    installs it when auto-download is enabled. Unregistered names are ignored.
    """

    PERMITTED_PACKAGES: dict = {}
    AUTO_DOWNLOAD = False

    @classmethod
    def permit_packages(cls, packages: Union[list, dict]) -> None:
        """
        Registers optional packages.

        Args:
            packages: import names (installed under the same name), or a mapping of
                import name to pip requirement, e.g. {'geographiclib': 'orthodromic[karney]'}
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def permit_auto_download(cls, option: bool) -> None:
        """Allow pip installing registered packages on import. Default False."""
        cls.AUTO_DOWNLOAD = option

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """importlib finder hook; only reached once no other finder located `name`"""
        if name not in cls.PERMITTED_PACKAGES:
            return

        requirement = cls.PERMITTED_PACKAGES[name]
        if cls.AUTO_DOWNLOAD:
            LOGGER.warning('Optional package %r missing; installing %s', name, requirement)
            try:
                subprocess.run(
                    [sys.executable, '-m', 'pip', 'install', requirement],
                    check=True
                )
            except subprocess.CalledProcessError:
                return None

            return util.find_spec(name)

        raise ModuleNotFoundError(
            f"{name} is an optional dependency of orthodromic. Install it with:\n"
            f"    pip install {requirement}\n"
            "or allow installing on demand with:\n"
            "    ConditionalPackageInterceptor.permit_auto_download(True)"
        )
