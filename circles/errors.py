class CircleDataError(Exception):
    """Base error for schema and seed problems."""

class SchemaError(CircleDataError):
    """Tables could not be created. Nothing else can run without them."""

class SeedError(CircleDataError):
    """Seed rows could not be inserted; the seed transaction was rolled back."""
