"""
nodepools: read-only reporting of node pools/groups in a Kubernetes cluster.
"""

__version__ = "0.1.0"
