import logging
import os
import typing

from kubernetes_asyncio import client, config

from .exceptions import ClusterConfigError

logger = logging.getLogger(__name__)


async def load_k8s_config(kubeconfig: typing.Optional[str] = None, context: typing.Optional[str] = None) -> None:
    """
    Loads the Kubernetes configuration.

    The kubeconfig loading rules come first (explicit file, then $KUBECONFIG,
    then ~/.kube/config). The in-cluster configuration is only a fallback when
    no kubeconfig file, context or $KUBECONFIG was asked for.

    Raises:
        ClusterConfigError: If no configuration could be loaded.
    """
    try:
        logger.debug("Attempting to load kubeconfig (file=%s, context=%s)...", kubeconfig, context)
        await config.load_kube_config(config_file=kubeconfig, context=context)
        logger.info("Loaded Kubernetes configuration from kubeconfig file.")
        return
    except (config.ConfigException, OSError) as e:
        if kubeconfig or context or os.environ.get("KUBECONFIG"):
            logger.warning("Could not load kubeconfig: %s", e)
            raise ClusterConfigError(f"unable to load Kubernetes configuration: {e}") from e
        logger.debug("Kubeconfig not usable: %s", e)

    try:
        logger.debug("Attempting to load in-cluster Kubernetes config...")
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes configuration.")
    except config.ConfigException as e:
        logger.warning("Could not load in-cluster config: %s", e)
        raise ClusterConfigError(f"unable to load Kubernetes configuration: {e}") from e


async def get_core_v1_api(
    kubeconfig: typing.Optional[str] = None, context: typing.Optional[str] = None
) -> client.CoreV1Api:
    """
    Returns a configured CoreV1Api instance.
    """
    await load_k8s_config(kubeconfig=kubeconfig, context=context)
    return client.CoreV1Api()
