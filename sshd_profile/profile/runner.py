from ..appliers.base_applier import BaseSSHApplier
from .._logging import get_logger
from ..options.config import SSHClassParameters, SSHDProfileConfig
from ..options.merger import build_class_parameters

logger = get_logger("profile.runner")


def configure_sshd(
    applier: BaseSSHApplier,
    config: SSHDProfileConfig | None = None,
) -> SSHClassParameters:
    """
    Run the sshd profile once for a host:
    1. Merge parameters with the fixed defaults
    2. Hand the merged options to the applier
    3. Return the parameters that were applied
    """
    parameters = build_class_parameters(config)
    logger.info(
        "Applying sshd profile applier=%s server_option_keys=%s",
        type(applier).__name__,
        list(parameters.server_options),
    )

    try:
        applier.apply(
            storeconfigs_enabled=parameters.storeconfigs_enabled,
            server_options=parameters.server_options,
            client_options=parameters.client_options,
        )
    except Exception:
        logger.exception("SSH applier %s failed", type(applier).__name__)
        raise

    return parameters
