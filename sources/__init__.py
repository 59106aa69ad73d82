from . import datasource_candidates  # noqa: F401 ensure registration
