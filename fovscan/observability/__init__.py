"""
Observability for fovscan.

This module contains logging setup and Prometheus metrics definitions.
"""
