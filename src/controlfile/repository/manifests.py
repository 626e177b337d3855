"""Manifest projections of parsed paragraphs.

A port's CONTROL file describes a buildable package (SourceParagraph); a
cached package's CONTROL file describes an already-built one
(BinaryParagraph). Both are projected from a Paragraph by reading the few
fields they need. Unknown fields are ignored.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from controlfile.diagnostics import ErrorTemplate, ManifestFieldMissingError
from controlfile.repository.package_spec import PackageSpec
from controlfile.types import Paragraph

__all__ = ["BinaryParagraph", "SourceParagraph", "parse_comma_list"]


def parse_comma_list(value: str) -> tuple[str, ...]:
    """Split a comma-separated dependency list.

    Entries are stripped of surrounding whitespace (including the newlines
    of continuation lines); empty entries are dropped.

    Example:
        >>> parse_comma_list("zlib, openssl,\\n bzip2")
        ('zlib', 'openssl', 'bzip2')
        >>> parse_comma_list("")
        ()
    """
    return tuple(item for item in (part.strip() for part in value.split(",")) if item)


def _require(paragraph: Paragraph, field_name: str, manifest_kind: str) -> str:
    try:
        return paragraph[field_name]
    except KeyError:
        diagnostic = ErrorTemplate.manifest_field_missing(field_name, manifest_kind)
        raise ManifestFieldMissingError(diagnostic, field_name) from None


@dataclass(frozen=True, slots=True)
class SourceParagraph:
    """Port manifest: a buildable package description.

    Attributes:
        name: Port name ('Source' field)
        version: Port version ('Version' field, opaque string)
        description: Free text, continuation lines joined by '\\n'
        maintainer: Maintainer contact
        depends: Build dependencies ('Build-Depends' field)
    """

    name: str
    version: str
    description: str = ""
    maintainer: str = ""
    depends: tuple[str, ...] = ()

    @classmethod
    def from_paragraph(cls, paragraph: Paragraph) -> "SourceParagraph":
        """Project a parsed port CONTROL paragraph.

        Raises:
            ManifestFieldMissingError: If 'Source' or 'Version' is absent
        """
        return cls(
            name=_require(paragraph, "Source", "port"),
            version=_require(paragraph, "Version", "port"),
            description=paragraph.get("Description", ""),
            maintainer=paragraph.get("Maintainer", ""),
            depends=parse_comma_list(paragraph.get("Build-Depends", "")),
        )


@dataclass(frozen=True, slots=True)
class BinaryParagraph:
    """Cached-package manifest: an already-built package description.

    Attributes:
        name: Package name ('Package' field)
        version: Package version
        architecture: Target triplet the package was built for
        description: Free text
        maintainer: Maintainer contact
        multi_arch: 'Multi-Arch' field value
        depends: Runtime dependencies ('Depends' field)
    """

    name: str
    version: str
    architecture: str
    description: str = ""
    maintainer: str = ""
    multi_arch: str = ""
    depends: tuple[str, ...] = ()

    @classmethod
    def from_paragraph(cls, paragraph: Paragraph) -> "BinaryParagraph":
        """Project a parsed cached-package CONTROL paragraph.

        Raises:
            ManifestFieldMissingError: If 'Package', 'Version' or
                'Architecture' is absent
        """
        return cls(
            name=_require(paragraph, "Package", "package"),
            version=_require(paragraph, "Version", "package"),
            architecture=_require(paragraph, "Architecture", "package"),
            description=paragraph.get("Description", ""),
            maintainer=paragraph.get("Maintainer", ""),
            multi_arch=paragraph.get("Multi-Arch", ""),
            depends=parse_comma_list(paragraph.get("Depends", "")),
        )

    @property
    def spec(self) -> PackageSpec:
        """Package specification (name plus architecture triplet)."""
        return PackageSpec(self.name, self.architecture)
