"""Exporter protocol, format registry and multi-format export manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from trusses.application.dtos import FramePlanOutput


logger = logging.getLogger(__name__)


class UnsupportedFormatError(KeyError):
    """Raised when no exporter is registered under a format name."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(format_name)

    def __str__(self) -> str:
        return (
            f"No exporter registered for format '{self.format_name}'. "
            f"Available formats: {', '.join(self.available) or 'none'}"
        )


@runtime_checkable
class Exporter(Protocol):
    """Interface shared by all frame plan exporters.

    Attributes:
        format_name: Registry key of the format (e.g., "bom").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: FramePlanOutput, path: Path) -> None:
        """Write the exported plan to ``path``."""
        ...

    def export_string(self, output: FramePlanOutput) -> str:
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Class-level registry of exporters keyed by format name.

    Example:
        @ExporterRegistry.register("bom")
        class BomGenerator:
            format_name = "bom"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator registering an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(f"Replacing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            UnsupportedFormatError: If the format is not registered.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            raise UnsupportedFormatError(format_name, cls.available_formats()) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes a frame plan to one or more registered formats.

    Files are named ``{project_name}_{format}.{ext}`` inside ``output_dir``,
    which is created on first export.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: FramePlanOutput,
        project_name: str = "truss",
        **options,
    ) -> dict[str, Path]:
        """Export ``output`` in every requested format.

        Extra keyword options are passed to each exporter's constructor.

        Raises:
            UnsupportedFormatError: If any format is not registered.
            OSError: If the directory or a file cannot be written.
        """
        exporters = {name: ExporterRegistry.get(name)(**options) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            path = self.output_dir / f"{project_name}_{name}.{exporter.file_extension}"
            logger.info(f"Exporting {name} to {path}")
            exporter.export(output, path)
            written[name] = path
        return written

    def export_single(
        self,
        format_name: str,
        output: FramePlanOutput,
        project_name: str = "truss",
        **options,
    ) -> Path:
        return self.export_all([format_name], output, project_name, **options)[format_name]
