"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Survey constants, meridians, section grid, advisory bounds
- exceptions: Custom exception hierarchy
- ingress: HTTP payload normalisation
"""
