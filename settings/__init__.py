"""Settings package: ``base`` (Django core), ``main`` (application), ``test``."""
