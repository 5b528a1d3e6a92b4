"""Integration tests for hardhat config export."""

import json

from deploy_networks import CredentialBundle, resolve_environment, to_hardhat_config


class TestToHardhatConfig:
    """Test the to_hardhat_config function."""

    def test_local_only_networks(self):
        config = to_hardhat_config(resolve_environment(credentials=CredentialBundle()))

        assert config["networks"] == {
            "hardhat": {
                "chainId": 1337,
                "gas": "auto",
                "gasPrice": "auto",
                "allowUnlimitedContractSize": False,
            }
        }

    def test_remote_network_entries(self, full_credentials):
        config = to_hardhat_config(resolve_environment(credentials=full_credentials))

        assert list(config["networks"].keys()) == [
            "mainnet",
            "sepolia",
            "bera",
            "bera-bartio",
            "story",
            "monad-testnet",
            "tac-spb",
            "hardhat",
        ]
        assert config["networks"]["mainnet"] == {
            "chainId": 1,
            "url": "https://mainnet.infura.io/v3/infura123",
            "accounts": ["0xdeployer"],
        }

    def test_etherscan_api_keys(self):
        environment = resolve_environment(
            credentials=CredentialBundle(explorer_keys={"bera": "berascan-key"})
        )

        api_keys = to_hardhat_config(environment)["etherscan"]["apiKey"]

        assert api_keys == {
            "mainnet": "",
            "sepolia": "",
            "bera": "berascan-key",
            "bera-bartio": "",
            "story": "",
            "tac-spb": "",
        }

    def test_custom_chains_exclude_builtin_explorers(self):
        config = to_hardhat_config(resolve_environment(credentials=CredentialBundle()))

        custom_chains = config["etherscan"]["customChains"]
        assert [c["network"] for c in custom_chains] == [
            "bera",
            "bera-bartio",
            "story",
            "tac-spb",
        ]
        assert custom_chains[2] == {
            "network": "story",
            "chainId": 1514,
            "urls": {
                "apiURL": "https://www.storyscan.io/api",
                "browserURL": "https://storyscan.io",
            },
        }

    def test_static_sections(self):
        config = to_hardhat_config(resolve_environment(credentials=CredentialBundle()))

        assert config["paths"] == {
            "artifacts": "./artifacts",
            "cache": "./cache",
            "sources": "./contracts",
            "tests": "./test",
        }
        assert config["solidity"] == {
            "compilers": [
                {
                    "version": "0.8.20",
                    "settings": {"optimizer": {"enabled": True, "runs": 100}},
                }
            ]
        }
        assert config["sourcify"] == {"enabled": False}
        assert config["gasReporter"] == {"enabled": False}
        assert config["mocha"] == {"parallel": False, "timeout": 100000000}
        assert config["typechain"] == {"outDir": "typechain", "target": "ethers-v6"}

    def test_result_is_json_serializable(self, full_credentials):
        config = to_hardhat_config(resolve_environment(credentials=full_credentials))

        assert json.loads(json.dumps(config)) == config
