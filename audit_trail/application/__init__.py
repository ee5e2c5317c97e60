"""Application layer: DTOs, ports, event translation, use cases and event handlers."""
