"""
Deployment Errors
Exceptions raised by the deployment toolchain
"""


class DeploymentError(Exception):
    """Base class for deployment failures"""


class ArtifactNotFoundError(DeploymentError):
    """No compiled artifact matches the requested contract name"""


class AmbiguousArtifactError(DeploymentError):
    """A bare contract name matches more than one compiled artifact"""


class InvalidArtifactError(DeploymentError):
    """Artifact is missing its ABI or deployable bytecode"""


class NetworkConfigError(DeploymentError):
    """Network is unknown or misconfigured"""


class NetworkConnectionError(DeploymentError):
    """RPC endpoint could not be reached"""


class DeploymentFailedError(DeploymentError):
    """Creation transaction was mined but did not produce a contract"""


class DeploymentTimeoutError(DeploymentError):
    """Confirmation depth was not reached before the deadline"""


class DeploymentNotConfirmedError(DeploymentError):
    """Deployed address was read before confirmation completed"""
