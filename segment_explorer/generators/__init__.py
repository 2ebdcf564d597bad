"""Sample data generators for clustered customer datasets."""

from segment_explorer.generators.customer import CustomerRecordGenerator

__all__ = ["CustomerRecordGenerator"]
