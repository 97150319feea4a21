"""Extraction of component metadata from Svelte markup."""

from __future__ import annotations

from typing import Optional, Tuple

from .config import DocumentizeConfig, resolve_component_symbols
from .logging import Reporter
from .markup.scripts import script_source
from .models import Event, MetaTag, Metadata, Prop, Slot, SlotProperty
from .typescript import Found, SourceUnit, SymbolResolver, TypeScriptSession


class MetadataExtractor:
    """Builds a :class:`Metadata` record for one component at a time."""

    def __init__(
        self,
        session: TypeScriptSession,
        config: DocumentizeConfig,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.session = session
        self.config = config
        self.reporter = reporter or Reporter(verbose=config.verbose)
        self.resolver = SymbolResolver(session)

    def extract(self, filename: str, content: str, meta_tag: MetaTag) -> Metadata:
        """Resolve events, props, slots and description for ``filename``.

        Missing declarations degrade to empty collections; ambiguous ones
        propagate :class:`~documentize.errors.AmbiguousSymbolError`.
        """
        symbols = resolve_component_symbols(meta_tag, self.config)
        self.reporter.info("Extracting metadata from '%s' with %s", filename, symbols)

        with self.session.unit(filename, script_source(content)) as unit:
            events = self._resolve_events(filename, symbols.events, unit)
            props = self._resolve_props(filename, symbols.props, unit)
            slots = self._resolve_slots(filename, symbols.slots, unit)

        description = meta_tag.get(self.config.data_attributes.description) or ""
        return Metadata(
            filename=filename,
            description=description,
            events=events,
            props=props,
            slots=slots,
        )

    def _resolve_events(self, filename: str, symbol: str, unit: SourceUnit) -> Tuple[Event, ...]:
        resolution = self.resolver.resolve(symbol, unit)
        if not isinstance(resolution, Found):
            self._report_missing(filename, "events", symbol)
            return ()
        return tuple(Event(member.name) for member in resolution.members)

    def _resolve_props(self, filename: str, symbol: str, unit: SourceUnit) -> Tuple[Prop, ...]:
        resolution = self.resolver.resolve(symbol, unit)
        if not isinstance(resolution, Found):
            self._report_missing(filename, "props", symbol)
            return ()
        return tuple(Prop(member.name, member.declared_type) for member in resolution.members)

    def _resolve_slots(self, filename: str, symbol: str, unit: SourceUnit) -> Tuple[Slot, ...]:
        resolution = self.resolver.resolve_nested(symbol, unit)
        if not isinstance(resolution, Found):
            self._report_missing(filename, "slots", symbol)
            return ()
        slots = []
        for member in resolution.members:
            properties = tuple(
                SlotProperty(item.name, item.declared_type)
                for item in resolution.nested.get(member.name, ())
            )
            slots.append(Slot(member.name, properties))
        return tuple(slots)

    def _report_missing(self, filename: str, kind: str, symbol: str) -> None:
        self.reporter.warning(
            "Failed to resolve %s symbol '%s' in '%s'; documenting no %s",
            kind,
            symbol,
            filename,
            kind,
        )


__all__ = ["MetadataExtractor"]
