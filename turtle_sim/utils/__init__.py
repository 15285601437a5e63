"""
Shared constants, enumerations, and helper utilities.

Centralizes motor-mode and motion enumerations, configuration defaults,
and small stateless helpers used across the turtle_sim package.
"""
