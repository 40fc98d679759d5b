from rivalscatalog.parsers.source_tables import load_source_table, load_source_tables

__all__ = [
    "load_source_table",
    "load_source_tables",
]
