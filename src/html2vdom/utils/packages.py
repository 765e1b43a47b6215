"""Installed-distribution lookups backing the parser dependency checks.

Each backend declares its parser packages in ``constants`` as
``(distribution, import_name, specifier)`` triples. The dependency
decorators ask this module whether a distribution is installed and whether
its version satisfies the specifier, before the backend imports it.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/html2vdom/utils/packages.py
from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging import version
from packaging.specifiers import SpecifierSet


def get_package_version(package_name: str) -> Optional[str]:
    """Look up the installed version of a parser distribution.

    Parameters
    ----------
    package_name : str
        Distribution name on the index, which can differ from the import
        name (``beautifulsoup4`` installs ``bs4``)

    Returns
    -------
    str or None
        The installed version, or None when the distribution is absent

    Examples
    --------
        >>> get_package_version("beautifulsoup4")  # doctest: +SKIP
        '4.13.4'
        >>> get_package_version("not-a-real-distribution") is None
        True

    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Test an installed parser distribution against a version specifier.

    Parameters
    ----------
    package_name : str
        Distribution name on the index
    version_spec : str
        PEP 440 specifier such as ``">=1.1"``; an empty string accepts any
        installed version

    Returns
    -------
    tuple of (bool, str or None)
        Whether the requirement holds, and the installed version (None when
        the distribution is missing, in which case the flag is False)

    Examples
    --------
        >>> check_version_requirement("html5lib", ">=1.1")  # doctest: +SKIP
        (True, '1.1')
        >>> check_version_requirement("not-a-real-distribution", ">=1.0")
        (False, None)

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None

    return version.parse(installed_version) in SpecifierSet(version_spec), installed_version
