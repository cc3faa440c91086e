"""Service layer: registry, executable commands, and the tracker service."""
