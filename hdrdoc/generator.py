"""Drives a documentation run from source walk to written pages."""

from __future__ import annotations

from pathlib import Path

from .config import HdrDocConfig
from .extract.header import (
    HeaderDocument,
    RejectedFileError,
    build_header_document,
    check_header_path,
)
from .logging import get_logger, processing_file
from .models import GenerationReport, SkippedFile, SourceFile
from .render.page import render_header_page, render_text_page
from .scanner import SourceScanner


class Generator:
    """Sequential pipeline: each header is extracted, rendered and written in turn.

    Rejected files are skipped with a warning. Any I/O failure propagates and
    ends the run; the overview index page is written last.
    """

    def __init__(self, config: HdrDocConfig, scanner: SourceScanner | None = None) -> None:
        self.config = config
        self.scanner = scanner or SourceScanner(config.exclude_paths)
        self.logger = get_logger("generator")

    def run(self, output_dir: Path) -> GenerationReport:
        config = self.config
        output_dir = output_dir.expanduser()
        report = GenerationReport(output_dir=output_dir)

        sources = self.scanner.scan(config.source_dir)
        self.logger.debug("Found %d candidate file(s) under %s", len(sources), config.source_dir)

        for source in sources:
            with processing_file(source.path):
                try:
                    document = self.extract(source)
                except RejectedFileError as exc:
                    self.logger.warning("Skipping: %s", exc.reason)
                    report.skipped.append(SkippedFile(path=exc.path, reason=exc.reason))
                    continue
                report.pages.append(self.write_header_page(document, output_dir))

        report.index_page = self.write_index_page(output_dir)
        self.logger.info(
            "Wrote %d header page(s) and index; skipped %d file(s)",
            len(report.pages),
            len(report.skipped),
        )
        return report

    def extract(self, source: SourceFile) -> HeaderDocument:
        """Build the header document for ``source`` or raise a rejection."""
        check_header_path(
            source.path,
            header_extension=self.config.header_extension,
            implementation_marker=self.config.implementation_marker,
        )
        text = source.absolute.read_text(encoding=self.config.encoding)
        return build_header_document(source.path, text)

    def write_header_page(self, document: HeaderDocument, output_dir: Path) -> Path:
        config = self.config
        markup = render_header_page(
            document,
            f"{config.project}: {document.path}",
            language=config.language,
            charset=config.encoding,
            resolve_markers=config.resolve_markers,
        )
        target = output_dir / f"{document.path}.{config.page_extension}"
        self._write(target, markup)
        return target

    def write_index_page(self, output_dir: Path) -> Path:
        config = self.config
        if not config.overview.is_file():
            raise FileNotFoundError(f"Overview document not found: {config.overview}")
        overview = config.overview.read_text(encoding=config.encoding)
        markup = render_text_page(
            overview,
            config.project,
            language=config.language,
            charset=config.encoding,
        )
        target = output_dir / f"index.{config.page_extension}"
        self._write(target, markup)
        return target

    def _write(self, target: Path, markup: str) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(markup, encoding=self.config.encoding)
        self.logger.info("Wrote %s", target)


__all__ = ["Generator"]
