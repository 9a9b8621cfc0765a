"""Application layer: DTOs, ports, pure services, and search use cases."""
