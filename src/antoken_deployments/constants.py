"""Configuration constants for antoken-deployments library."""

from .types import ContractVariant

# Hardhat artifact (contract) name deployed for each variant
VARIANT_ARTIFACTS = {
    ContractVariant.BASIC_TOKEN: "ANToken",
    ContractVariant.MULTICHAIN_TOKEN: "ANTokenMultichain",
    ContractVariant.DATA_REGISTRY: "DataKeeper",
    ContractVariant.BATCH_SENDER: "Multisender",
}

OWNERSHIP_TRANSFER_SIGNATURE = "transferOwnership(address)"

# Network catalogue, mirrors the networks of the Hardhat config.
# RPC URLs can be overridden with <NETWORK>_RPC_URL, e.g. BASE_GOERLI_RPC_URL.
NETWORK_CONFIG = {
    "hardhat": {
        "chain_id": 31337,
        "chain_name": "Hardhat Local",
        "rpc_url": "http://127.0.0.1:8545",
        "block_explorer_url": "",
    },
    "arbitrum": {
        "chain_id": 42161,
        "chain_name": "Arbitrum One",
        "rpc_url": "https://arb1.arbitrum.io/rpc",
        "block_explorer_url": "https://arbiscan.io",
    },
    "binance": {
        "chain_id": 56,
        "chain_name": "BNB Smart Chain",
        "rpc_url": "https://rpc.ankr.com/bsc",
        "block_explorer_url": "https://bscscan.com",
    },
    "polygon": {
        "chain_id": 137,
        "chain_name": "Polygon",
        "rpc_url": "https://rpc.ankr.com/polygon",
        "block_explorer_url": "https://polygonscan.com",
    },
    "base": {
        "chain_id": 8453,
        "chain_name": "Base",
        "rpc_url": "https://rpc.ankr.com/base",
        "block_explorer_url": "https://basescan.org",
    },
    "sepolia": {
        "chain_id": 11155111,
        "chain_name": "Sepolia",
        "rpc_url": "https://rpc.ankr.com/eth_sepolia",
        "block_explorer_url": "https://sepolia.etherscan.io",
    },
    "binance_testnet": {
        "chain_id": 97,
        "chain_name": "BNB Smart Chain Testnet",
        "rpc_url": "https://rpc.ankr.com/bsc_testnet_chapel",
        "block_explorer_url": "https://testnet.bscscan.com",
    },
    "ethereum": {
        "chain_id": 1,
        "chain_name": "Ethereum Mainnet",
        "rpc_url": "https://rpc.ankr.com/eth",
        "block_explorer_url": "https://etherscan.io",
    },
    "base_goerli": {
        "chain_id": 84531,
        "chain_name": "Base Goerli",
        "rpc_url": "https://rpc.ankr.com/base_goerli",
        "block_explorer_url": "https://goerli.basescan.org",
    },
}

DEFAULT_NETWORK = "hardhat"

# Environment variables read by config.py
PRIVATE_KEY_ENV = "PRIVATE_KEY"
REPORT_GAS_ENV = "REPORT_GAS"
OWNERSHIP_BENEFICIARY_ENV = "OWNERSHIP_BENEFICIARY"
ROLE_ENV_VARS = {
    "relayer": "RELAYER_ADDRESS",
    "commissionRecipient": "COMMISSION_RECIPIENT_ADDRESS",
    "liquidityProvider": "LIQUIDITY_PROVIDER_ADDRESS",
}

DEFAULT_CONFIRMATION_TIMEOUT = 120.0  # seconds
DEFAULT_POLL_INTERVAL = 2.0  # seconds
RPC_REQUEST_TIMEOUT = 30  # seconds
