"""Infrastructure layer: adapters that feed data into the address book."""

from addressbook.infrastructure.seed_loader import (
    PersonRecord,
    SeedError,
    SeedFile,
    load_seed,
    parse_seed,
)

__all__ = ["PersonRecord", "SeedError", "SeedFile", "load_seed", "parse_seed"]
