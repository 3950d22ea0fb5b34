"""Kubeconfig discovery and trust list, with event, action-menu and dialog logic for a cluster dashboard."""

__version__ = "0.1.0"