"""Export builders and format dispatch.

This package turns a `BookModel` into a package manifest (`.epub`) or a
printable HTML document (`.html`) through an explicit format table.
"""

from .dispatcher import ExportDispatcher
from .formats import FORMAT_ROUTES, ExportFormat, FormatSpec
from .package_manifest import PackageManifestBuilder, build_package
from .printable import PrintableDocumentBuilder, build_printable

__all__ = [
    "ExportDispatcher",
    "ExportFormat",
    "FORMAT_ROUTES",
    "FormatSpec",
    "PackageManifestBuilder",
    "PrintableDocumentBuilder",
    "build_package",
    "build_printable",
]
