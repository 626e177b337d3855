"""Port and cached-package loaders.

Thin wrappers that read a CONTROL file through the loading layer and
project its single paragraph into a manifest.

Thread Safety:
    Every load is independent and only reads files. load_all_ports() fans
    out over a thread pool; the reader passed in must be safe for
    concurrent use (PathTextReader is).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from controlfile.constants import CONTROL_FILENAME, DEFAULT_MAX_WORKERS
from controlfile.diagnostics import ControlError
from controlfile.loading import TextReader, get_single_paragraph
from controlfile.repository.manifests import BinaryParagraph, SourceParagraph
from controlfile.repository.package_spec import PackageSpec, RepositoryPaths

__all__ = [
    "extract_port_names_and_versions",
    "load_all_ports",
    "try_load_cached_package",
    "try_load_port",
]

logger = logging.getLogger(__name__)


def try_load_port(port_dir: Path | str, *, reader: TextReader | None = None) -> SourceParagraph:
    """Load the port manifest at <port_dir>/CONTROL.

    Raises:
        OSError: If the CONTROL file cannot be read
        ControlError: If it does not parse to one valid port paragraph
    """
    paragraph = get_single_paragraph(Path(port_dir) / CONTROL_FILENAME, reader=reader)
    return SourceParagraph.from_paragraph(paragraph)


def try_load_cached_package(
    paths: RepositoryPaths, spec: PackageSpec, *, reader: TextReader | None = None
) -> BinaryParagraph:
    """Load the cached-package manifest for spec.

    Raises:
        OSError: If the CONTROL file cannot be read
        ControlError: If it does not parse to one valid package paragraph
    """
    control_path = paths.package_dir(spec) / CONTROL_FILENAME
    paragraph = get_single_paragraph(control_path, reader=reader)
    return BinaryParagraph.from_paragraph(paragraph)


def _load_port_or_none(port_dir: Path, reader: TextReader | None) -> SourceParagraph | None:
    # ValueError covers UnicodeDecodeError and the source size limit.
    try:
        return try_load_port(port_dir, reader=reader)
    except (ControlError, OSError, ValueError) as e:
        logger.debug("Skipping port %s: %s", port_dir, e)
        return None


def load_all_ports(
    ports_dir: Path | str,
    *,
    reader: TextReader | None = None,
    max_workers: int | None = None,
) -> list[SourceParagraph]:
    """Load every port under ports_dir, dropping the ones that fail.

    Subdirectories are visited in sorted name order. A subdirectory whose
    CONTROL file is missing, unreadable or invalid is omitted without an
    error. Results keep the visiting order even when loads run in parallel.

    Args:
        ports_dir: Directory with one subdirectory per port
        reader: Text reader (default: PathTextReader)
        max_workers: Thread pool size (default: DEFAULT_MAX_WORKERS);
            1 loads sequentially on the calling thread

    Returns:
        Successfully loaded ports

    Raises:
        OSError: If ports_dir itself cannot be listed
    """
    port_dirs = sorted(p for p in Path(ports_dir).iterdir() if p.is_dir())
    workers = max_workers if max_workers is not None else DEFAULT_MAX_WORKERS

    if workers == 1 or len(port_dirs) <= 1:
        results = [_load_port_or_none(p, reader) for p in port_dirs]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order, not completion order
            results = list(executor.map(lambda p: _load_port_or_none(p, reader), port_dirs))

    ports = [port for port in results if port is not None]
    logger.info(
        "Loaded %d of %d port(s) from %s", len(ports), len(port_dirs), ports_dir
    )
    return ports


def extract_port_names_and_versions(ports: Iterable[SourceParagraph]) -> dict[str, str]:
    """Map port names to versions; the first port with a given name wins.

    Example:
        >>> ports = [SourceParagraph("x", "1.0"), SourceParagraph("x", "2.0")]
        >>> extract_port_names_and_versions(ports)
        {'x': '1.0'}
    """
    names_and_versions: dict[str, str] = {}
    for port in ports:
        if port.name not in names_and_versions:
            names_and_versions[port.name] = port.version
    return names_and_versions
