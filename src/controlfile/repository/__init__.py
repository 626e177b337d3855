"""Repository glue: manifests, package specifications and port loaders.

Builds on :mod:`controlfile.loading` to turn CONTROL files of a ports tree
and a packages cache into manifest records.
"""

from .manifests import BinaryParagraph, SourceParagraph, parse_comma_list
from .package_spec import PackageSpec, RepositoryPaths
from .ports import (
    extract_port_names_and_versions,
    load_all_ports,
    try_load_cached_package,
    try_load_port,
)

__all__ = [
    "BinaryParagraph",
    "PackageSpec",
    "RepositoryPaths",
    "SourceParagraph",
    "extract_port_names_and_versions",
    "load_all_ports",
    "parse_comma_list",
    "try_load_cached_package",
    "try_load_port",
]
