"""Arithmetic helpers, a calculator, abstract collaborators and services built on them."""

__version__ = "0.1.0"
__all__ = ["mathutils", "calculator", "interfaces", "file_processor", "user_service"]