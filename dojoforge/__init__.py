"""Build-side helpers for Dojo world projects: namespaces, selectors, manifests, artifacts and tooling."""

__version__ = "0.1.0"