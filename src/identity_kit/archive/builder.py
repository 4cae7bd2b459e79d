# src/identity_kit/archive/builder.py

import logging
from collections.abc import Sequence

from identity_kit.diagnostics import Diagnostics
from identity_kit.errors import ArchiveParseError, RecordConstructionError
from identity_kit.models import Item
from identity_kit.observability import names
from identity_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


def build_record(
    kind: type[Item],
    name: str,
    fields: Sequence[tuple[str, str]],
    children: Sequence[Item],
    *,
    source: str,
    line_number: int,
    diagnostics: Diagnostics,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Item:
    """
    Construct one record and attach its already built children.

    Diagnostics raised by the record kind are collected in a sink private
    to this call, then passed on to `diagnostics` with the source and the
    line of the block starter attached.

    Raises:
        ArchiveParseError: The record kind refuses to build the record, or
            a child cannot be attached.
    """
    scoped = Diagnostics()
    try:
        record = kind.from_fields(name, fields, scoped)
    except RecordConstructionError as exc:
        metrics_hook.increment(names.ARCHIVE_ERRORS_TOTAL, labels={"kind": kind.kind})
        raise ArchiveParseError(
            str(exc), source=source, line_number=line_number
        ) from exc
    finally:
        _forward(scoped, diagnostics, source, line_number, metrics_hook)

    for child in children:
        try:
            record.insert_child(child.kind, child)
        except (KeyError, TypeError) as exc:
            metrics_hook.increment(names.ARCHIVE_ERRORS_TOTAL, labels={"kind": kind.kind})
            raise ArchiveParseError(
                f"Cannot add a {child.kind} to {kind.kind} '{name}': {exc}",
                source=source,
                line_number=line_number,
            ) from exc

    metrics_hook.increment(names.ARCHIVE_RECORDS_TOTAL, labels={"kind": kind.kind})
    return record


def _forward(
    scoped: Diagnostics,
    diagnostics: Diagnostics,
    source: str,
    line_number: int,
    metrics_hook: MetricsHook,
) -> None:
    if not scoped.count:
        return

    for diagnostic in scoped:
        located = diagnostic.located(source, line_number)
        logger.warning("%s", located)
        diagnostics.emit(located)
    metrics_hook.increment(names.ARCHIVE_DIAGNOSTICS_TOTAL, scoped.count)
