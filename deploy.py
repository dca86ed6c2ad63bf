"""
Contract Deployment Runner
Runs scripts/deploy_mentorship.py against a configured network
"""

import os
import sys
import argparse
from loguru import logger
from dotenv import load_dotenv

from blockchain.deploy_environment import DeployEnvironment
from scripts import deploy_mentorship

load_dotenv()


def configure_logging():
    """Console output for the deploy script, optional debug log file"""
    logger.remove()
    logger.add(
        sys.stdout,
        format="{message}",
        level=os.getenv('LOG_LEVEL', 'INFO')
    )

    log_file = os.getenv('DEPLOY_LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


def run(network=None, config_path='config/networks.json') -> int:
    """
    Build the environment and run the deploy script

    Args:
        network: Network name (None = DEPLOY_NETWORK or default)
        config_path: Path to the networks config file

    Returns:
        Process exit code
    """
    try:
        env = DeployEnvironment.from_network(network, config_path)
        deploy_mentorship.main(env)
    except Exception as e:
        logger.error(f"Deployment failed: {e}")
        logger.opt(exception=e).debug("Traceback")
        return 1

    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Deploy the Mentorship contract")
    parser.add_argument('--network', help="Network from the config (default: DEPLOY_NETWORK or localhost)")
    parser.add_argument('--config', default='config/networks.json', help="Networks config file")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    configure_logging()
    sys.exit(run(args.network, args.config))
