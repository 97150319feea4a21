"""Per-file entry point that patches documentation into Svelte components."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .assembler import render_comment
from .config import DocumentizeConfig, load_config
from .extractor import MetadataExtractor
from .logging import Reporter, get_logger
from .markup.meta_tag import locate_meta_tag
from .models import MetaTag, Metadata
from .typescript import TypeScriptSession

PREPROCESSOR_NAME = "documentize-preprocessor"

PROCESSED = "processed"
SKIPPED = "skipped"


@dataclass(frozen=True)
class ProcessedMarkup:
    """Outcome of processing one component."""

    code: str
    content: str
    metadata: Optional[Metadata] = None

    @property
    def processed(self) -> bool:
        return self.code == PROCESSED


class Preprocessor:
    """Locates the marker tag, extracts metadata and substitutes the documentation.

    One instance shares its :class:`TypeScriptSession` across every file it
    processes.
    """

    name = PREPROCESSOR_NAME

    def __init__(
        self,
        config: DocumentizeConfig,
        session: Optional[TypeScriptSession] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.config = config.validate()
        self.session = session or TypeScriptSession()
        self.reporter = reporter or Reporter(get_logger("preprocessor"), verbose=config.verbose)
        self.extractor = MetadataExtractor(self.session, self.config, self.reporter)

    @classmethod
    def create(
        cls, config_path: Optional[Path] = None, *, verbose: Optional[bool] = None
    ) -> "Preprocessor":
        """Build a preprocessor from ``.documentize.yml`` and its declaration files."""
        config = load_config(config_path or Path.cwd())
        if verbose is not None:
            config.verbose = verbose
        session = TypeScriptSession()
        for path in config.declaration_files:
            session.load_library(path)
        return cls(config, session)

    def markup(self, content: str, filename: str = "") -> ProcessedMarkup:
        """Process one component.

        Returns a skipped result when no marker tag is present or the patch
        cannot be applied. Fatal errors propagate to the caller.
        """
        meta_tag = locate_meta_tag(content, self.config.data_attributes.marker)
        if meta_tag is None:
            self.reporter.info("No meta tag found in '%s'", filename)
            return ProcessedMarkup(SKIPPED, content)

        metadata = self.extract_metadata(filename, content, meta_tag)
        patched = self.patch_content(content, meta_tag.pattern, metadata)
        if patched is None:
            return ProcessedMarkup(SKIPPED, content, metadata)
        return ProcessedMarkup(PROCESSED, patched, metadata)

    def extract_metadata(self, filename: str, content: str, meta_tag: MetaTag) -> Metadata:
        metadata = self.extractor.extract(filename, content, meta_tag)
        self.reporter.info(
            "Resolved %d events, %d props and %d slots for '%s'",
            len(metadata.events),
            len(metadata.props),
            len(metadata.slots),
            filename,
        )
        return metadata

    def patch_content(self, content: str, pattern: re.Pattern, metadata: Metadata) -> Optional[str]:
        """Replace the marker tag with the rendered documentation comment.

        Returns ``None`` (after reporting a warning) when the comment did not
        make it into the patched content.
        """
        comment = render_comment(metadata)
        patched = pattern.sub(lambda _match: comment, content)
        if comment not in patched:
            self.reporter.warning("Failed to patch '%s'", metadata.filename)
            return None
        return patched


__all__ = ["PREPROCESSOR_NAME", "PROCESSED", "ProcessedMarkup", "Preprocessor", "SKIPPED"]
