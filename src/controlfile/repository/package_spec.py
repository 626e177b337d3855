"""Package specifications and repository directory layout.

A package specification names one built package: a port name plus the
target triplet it was built for ("zlib:x64-windows"). Cached packages live
in one directory per specification under the repository's packages root.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from pathlib import Path

from controlfile.constants import DEFAULT_TRIPLET, PACKAGES_DIRNAME, PORTS_DIRNAME

__all__ = ["PackageSpec", "RepositoryPaths"]


@dataclass(frozen=True, slots=True)
class PackageSpec:
    """Port name plus target triplet.

    Attributes:
        name: Port name (e.g., 'zlib')
        target_triplet: Target platform (e.g., 'x64-windows')
    """

    name: str
    target_triplet: str = DEFAULT_TRIPLET

    def __post_init__(self) -> None:
        """Reject empty components.

        Raises:
            ValueError: If name or target_triplet is empty
        """
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if not self.target_triplet:
            msg = f"Target triplet cannot be empty for package '{self.name}'"
            raise ValueError(msg)

    @classmethod
    def from_string(cls, spec: str, default_triplet: str = DEFAULT_TRIPLET) -> "PackageSpec":
        """Parse 'name' or 'name:triplet'.

        Args:
            spec: Specification text
            default_triplet: Triplet used when spec has none

        Raises:
            ValueError: If spec has more than one ':' or an empty component

        Example:
            >>> PackageSpec.from_string("zlib:x64-windows")
            PackageSpec(name='zlib', target_triplet='x64-windows')
            >>> PackageSpec.from_string("zlib").target_triplet
            'x86-windows'
        """
        name, sep, triplet = spec.partition(":")
        if ":" in triplet:
            msg = f"Invalid package specification (too many ':'): '{spec}'"
            raise ValueError(msg)
        return cls(name, triplet if sep else default_triplet)

    @property
    def dir_name(self) -> str:
        """Directory name of the cached package: 'name_triplet'."""
        return f"{self.name}_{self.target_triplet}"

    def __str__(self) -> str:
        return f"{self.name}:{self.target_triplet}"


@dataclass(frozen=True, slots=True)
class RepositoryPaths:
    """Directory layout of a package repository.

    Attributes:
        root: Repository root directory
    """

    root: Path

    @property
    def ports(self) -> Path:
        """Directory holding one subdirectory per port."""
        return Path(self.root) / PORTS_DIRNAME

    @property
    def packages(self) -> Path:
        """Directory holding one subdirectory per cached package."""
        return Path(self.root) / PACKAGES_DIRNAME

    def port_dir(self, name: str) -> Path:
        return self.ports / name

    def package_dir(self, spec: PackageSpec) -> Path:
        return self.packages / spec.dir_name
