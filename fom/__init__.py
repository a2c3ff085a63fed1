"""Fluid Object Model: local handles for FluidDB namespaces, tags, users and objects."""

from fom.version import CURRENT_VERSION as __version__
