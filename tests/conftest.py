"""
Shared test fixtures
"""

import json
import pytest
from loguru import logger


HARDHAT_ACCOUNT_0 = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'
HARDHAT_KEY_0 = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'

MENTORSHIP_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "_usdcAddress", "type": "address"}],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "usdc",
        "outputs": [{"internalType": "contract IERC20", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]


@pytest.fixture
def log_records():
    """INFO+ records emitted through loguru during the test"""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def mentorship_artifact():
    return {
        "_format": "hh-sol-artifact-1",
        "contractName": "Mentorship",
        "sourceName": "contracts/Mentorship.sol",
        "abi": MENTORSHIP_ABI,
        "bytecode": "0x608060405234801561001057600080fd5b50",
        "deployedBytecode": "0x6080604052",
        "linkReferences": {},
        "deployedLinkReferences": {}
    }


@pytest.fixture
def artifacts_dir(tmp_path, mentorship_artifact):
    """Hardhat-style artifacts tree with a compiled Mentorship contract"""
    root = tmp_path / 'artifacts'
    contract_dir = root / 'contracts' / 'Mentorship.sol'
    contract_dir.mkdir(parents=True)

    (contract_dir / 'Mentorship.json').write_text(json.dumps(mentorship_artifact))
    (contract_dir / 'Mentorship.dbg.json').write_text(json.dumps({"buildInfo": "../../build-info/abc.json"}))

    build_info = root / 'build-info'
    build_info.mkdir()
    (build_info / 'abc.json').write_text(json.dumps({"id": "abc"}))

    return root
