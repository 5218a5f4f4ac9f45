"""
kytt is a test harness for validating the Kubernetes manifests rendered by `ytt`.
"""

__version__ = "0.1.0"
