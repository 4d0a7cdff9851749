"""Domain ports (interfaces for adapters)."""

from decorum.domain.ports.reporter import ReporterProtocol

__all__ = ["ReporterProtocol"]
