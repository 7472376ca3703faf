"""Domain layer - Core entities and contracts.

This package contains the framework-free core of the tutorial project. It defines:

- Entities (configuration records, parsed articles, integrity findings)
- Repository interfaces for reading documentation
- Service interfaces for training and experiment tracking

The domain layer represents the "what" of the project; the infrastructure
layer supplies parsers, trackers and file access behind these contracts.
"""
