"""Configuration constants for deploy-networks library."""

# Environment variables holding the gating secrets
DEPLOYER_KEY_ENV = "DEPLOYER_KEY"
RPC_PROVIDER_KEY_ENV = "INFURA_KEY"

LOCAL_NETWORK_NAME = "hardhat"
LOCAL_CHAIN_ID = 1337

# Chain catalog, in registry order.
# "endpoint" may contain "{key}", substituted with the RPC-provider key.
# "explorer" is None for chains without contract verification support.
CHAIN_CONFIG = {
    "mainnet": {
        "chain_id": 1,
        "endpoint": "https://mainnet.infura.io/v3/{key}",
        "explorer": {
            "api_url": "https://api.etherscan.io/api",
            "browser_url": "https://etherscan.io",
            "key_env": "ETHERSCAN_KEY",
            "custom": False,
        },
    },
    "sepolia": {
        "chain_id": 11155111,
        "endpoint": "https://sepolia.infura.io/v3/{key}",
        "explorer": {
            "api_url": "https://api-sepolia.etherscan.io/api",
            "browser_url": "https://sepolia.etherscan.io",
            "key_env": "ETHERSCAN_KEY",
            "custom": False,
        },
    },
    "bera": {
        "chain_id": 80094,
        "endpoint": "https://rpc.berachain.com",
        "explorer": {
            "api_url": "https://api.berascan.com/api",
            "browser_url": "https://berascan.com",
            "key_env": "BERASCAN_KEY",
        },
    },
    "bera-bartio": {
        "chain_id": 80084,
        "endpoint": "https://bartio.rpc.berachain.com",
        "explorer": {
            "api_url": "https://api.routescan.io/v2/network/testnet/evm/80084/etherscan/api",
            "browser_url": "https://bartio.beratrail.io",
            "key_env": "BERA_EXPLORER_KEY",
        },
    },
    "story": {
        "chain_id": 1514,
        "endpoint": "https://mainnet.storyrpc.io",
        "explorer": {
            "api_url": "https://www.storyscan.io/api",
            "browser_url": "https://storyscan.io",
            "key_env": "STORYSCAN_KEY",
        },
    },
    "monad-testnet": {
        "chain_id": 10143,
        "endpoint": "https://testnet-rpc.monad.xyz",
        "explorer": None,
    },
    "tac-spb": {
        "chain_id": 2391,
        "endpoint": "https://spb.rpc.tac.build",
        "explorer": {
            "api_url": "https://spb.explorer.tac.build/api",
            "browser_url": "https://spb.explorer.tac.build",
            "key_env": "TAC_SPB_EXPLORER_KEY",
        },
    },
}
