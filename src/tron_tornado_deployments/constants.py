"""Configuration constants for tron-tornado-deployments."""

DEFAULT_NETWORK = "mainnet"

# Network configuration based on the public TronGrid endpoints
# Networks not listed here resolve to https://api.{network}.trongrid.io
NETWORK_CONFIG = {
    "mainnet": {
        "full_node_url": "https://api.trongrid.io",
        "private_key_env": "DEPLOY_PRIVATE_KEY_MAINNET",
    },
    "shasta": {
        "full_node_url": "https://api.shasta.trongrid.io",
        "private_key_env": "PRIVATE_KEY",
    },
    "nile": {
        "full_node_url": "https://api.nile.trongrid.io",
        "private_key_env": "PRIVATE_KEY",
    },
}

DEFAULT_PRIVATE_KEY_ENV = "PRIVATE_KEY"

# Address store keys, in deployment order
USDT = "usdt"
HASHER = "hasher"
VERIFIER = "verifier"
ETH_TORNADO = "ethTornado"
ERC20_TORNADO = "erc20Tornado"

CONTRACT_KEYS = (USDT, HASHER, VERIFIER, ETH_TORNADO, ERC20_TORNADO)

# Store key -> compiled artifact name under build/contracts
CONTRACT_ARTIFACTS = {
    USDT: "ERC20Mock",
    HASHER: "Hasher",
    VERIFIER: "Verifier",
    ETH_TORNADO: "ETHTornado",
    ERC20_TORNADO: "ERC20Tornado",
}

EXCHANGES_KEY = "exchanges"

# Mock token fixture: constructor args and the one-off test mint
MOCK_TOKEN_NAME = "Tether USD"
MOCK_TOKEN_SYMBOL = "USDT"
MOCK_TOKEN_DECIMALS = 6
MOCK_MINT_RECIPIENT = "TDKd1uDEMhoybs95tp8R9uMLoMzD83r1jA"
MOCK_MINT_AMOUNT = 1  # whole units, converted with to_sun()
MOCK_MINT_FUNCTION = "mint(address,uint256)"

SUN_PER_TRX = 1_000_000

# Contract creation defaults (same values tronweb uses)
DEFAULT_FEE_LIMIT = 1_000_000_000
DEFAULT_ORIGIN_ENERGY_LIMIT = 10_000_000
DEFAULT_USER_FEE_PERCENTAGE = 100

ADDRESS_PREFIX = 0x41
API_KEY_HEADER = "TRON-PRO-API-KEY"
REQUEST_TIMEOUT = 30
POLL_INTERVAL = 3.0
