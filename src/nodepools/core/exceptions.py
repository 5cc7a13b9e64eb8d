class NodepoolsError(Exception):
    """Base exception for nodepools."""

    pass


class ClusterConfigError(NodepoolsError):
    """Raised when no Kubernetes configuration could be loaded."""

    pass


class NodeListError(NodepoolsError):
    """Raised when the cluster nodes cannot be listed."""

    pass
