import logging
import sys
import traceback

from launchvm.cloud.azure.api import AzureApi
from launchvm.config import LaunchConfigs
from launchvm.deployment import Lifecycle
from launchvm.parser import parse_args
from launchvm.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.logs)

    try:
        configs = LaunchConfigs.from_args(args)
        logger.debug(f"Resolved configuration: {configs.to_dict()}")

        api = AzureApi.from_configs(configs)
        Lifecycle(configs, api).run()
        return 0
    except Exception as e:
        logger.error(f"Failed: {str(e)}\n{traceback.format_exc()}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
