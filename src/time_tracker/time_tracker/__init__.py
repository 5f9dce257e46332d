"""Time Tracker package.

Feature modules (employees, workdays, reports, ...) keep the same layering:
plain dataclass models, repository protocols with MySQL/in-memory
implementations, services and a thin Flask JSON controller. The
``worktime`` and ``reports`` packages hold the pure calculation engine.
"""
