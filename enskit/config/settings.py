"""
Settings for enskit.

Values come from the environment (optionally a .env file). Modules read
them lazily via getattr(settings, KEY, '') so they can be overridden at
runtime.
"""
import logging.config
import os

from dotenv import load_dotenv

load_dotenv()


# ---------------- Chain ---------------------------------------------------- #

ENS_CHAIN_ID = int(os.getenv('ENS_CHAIN_ID', '1'))

# Wins over the per-chain URLs below (local devnets, forks)
ENS_RPC_URL = os.getenv('ENS_RPC_URL', '')

MAINNET_RPC_URL = os.getenv('MAINNET_RPC_URL', '')
SEPOLIA_RPC_URL = os.getenv('SEPOLIA_RPC_URL', '')
HOLESKY_RPC_URL = os.getenv('HOLESKY_RPC_URL', '')


# ---------------- Wallet --------------------------------------------------- #

ENS_PRIVATE_KEY = os.getenv('ENS_PRIVATE_KEY', '')
ENS_GAS_LIMIT = int(os.getenv('ENS_GAS_LIMIT', '300000'))


# ---------------- Contract address overrides ------------------------------- #

# Empty means "use the deployment table in enskit.contracts.addresses"
ENS_REGISTRY_ADDRESS = os.getenv('ENS_REGISTRY_ADDRESS', '')
ENS_NAME_WRAPPER_ADDRESS = os.getenv('ENS_NAME_WRAPPER_ADDRESS', '')
ENS_PUBLIC_RESOLVER_ADDRESS = os.getenv('ENS_PUBLIC_RESOLVER_ADDRESS', '')
ENS_UNIVERSAL_RESOLVER_ADDRESS = os.getenv('ENS_UNIVERSAL_RESOLVER_ADDRESS', '')
ENS_ETH_REGISTRAR_CONTROLLER_ADDRESS = os.getenv('ENS_ETH_REGISTRAR_CONTROLLER_ADDRESS', '')


# ---------------- Logging -------------------------------------------------- #

LOGGING = {
  'version': 1,
  'disable_existing_loggers': False,
  'formatters': {
    'enskit': {
      'format': '%(message)s',
    },
  },
  'handlers': {
    'enskit_console': {
      'class': 'logging.StreamHandler',
      'formatter': 'enskit',
    },
  },
  'loggers': {
    'enskit': {
      'handlers': ['enskit_console'],
      'level': os.getenv('ENS_LOG_LEVEL', 'INFO'),
      'propagate': False,
    },
  },
}


def configure_logging():
  """Install the LOGGING config. Applications opt in; importing enskit never does."""
  logging.config.dictConfig(LOGGING)
