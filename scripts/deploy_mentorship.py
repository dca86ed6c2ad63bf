"""
Mentorship Deployment Script
Deploys the Mentorship contract against the USDC token
"""

from loguru import logger

# Sepolia USDC
USDC_ADDRESS = "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238"


def main(env):
    """
    Deploy Mentorship and report its address

    Args:
        env: DeployEnvironment for the target network
    """
    logger.info("Deploying Mentorship contract...")

    mentorship_factory = env.get_contract_factory("Mentorship")
    mentorship = mentorship_factory.deploy(USDC_ADDRESS)
    mentorship.wait_for_deployment()
    mentorship_address = mentorship.get_address()

    logger.success(f"Mentorship contract deployed to: {mentorship_address}")
