"""
ENS contract ABIs and deployment addresses.

Addresses can be overridden per contract through settings, which is how
local devnets and forks point enskit at their own deployments.
"""
from web3 import Web3

from enskit.config import settings
from enskit.contracts.eth_registrar_controller import ETH_REGISTRAR_CONTROLLER_ABI
from enskit.contracts.name_wrapper import NAME_WRAPPER_ABI
from enskit.contracts.public_resolver import PUBLIC_RESOLVER_ABI
from enskit.contracts.registry import REGISTRY_ABI
from enskit.contracts.universal_resolver import (
  UNIVERSAL_RESOLVER_ABI,
  UNIVERSAL_RESOLVER_ERRORS,
)
from enskit.errors import ContractNotConfiguredError, UnsupportedChainError


# ─────────────────────────────────────────────────────────────────────────────
# Chain IDs
# ─────────────────────────────────────────────────────────────────────────────

CHAIN_IDS = {
  1: 'mainnet',
  11155111: 'sepolia',
  17000: 'holesky',
}

EMPTY_ADDRESS = '0x0000000000000000000000000000000000000000'


# ─────────────────────────────────────────────────────────────────────────────
# Deployments by chain ID
# ─────────────────────────────────────────────────────────────────────────────

CONTRACT_ADDRESSES = {
  1: {
    'ens_registry':                 '0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e',
    'ens_name_wrapper':             '0xD4416b13d2b3a9aBae7AcD5D6C2BbDBE25686401',
    'ens_public_resolver':          '0x231b0Ee14048e9dCcD1d247744d114a4EB5E8E63',
    'ens_universal_resolver':       '0xce01f8eee7E479C928F8919abD53E553a36CeF67',
    'ens_eth_registrar_controller': '0x253553366Da8546fC250F225fe3d25d0C782303b',
  },
  11155111: {
    'ens_registry':                 '0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e',
    'ens_name_wrapper':             '0x0635513f179D50A207757E05759CbD106d7dFcE8',
    'ens_public_resolver':          '0x8FADE66B79cC9f707aB26799354482EB93a5B7dD',
    'ens_universal_resolver':       '0xc8Af999e38273D658BE1b921b88A9Ddf005769cC',
    'ens_eth_registrar_controller': '0xFED6a969AaA60E4961FCD3EBF1A2e8913ac65B72',
  },
  17000: {
    'ens_registry':                 '0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e',
    'ens_name_wrapper':             '0xab50971078225D365994dc1Edcb9b7FD72Bb4862',
    'ens_public_resolver':          '0x9010A27463717360cAD99CEA8bD39b8705CCA238',
    'ens_universal_resolver':       '0xa6ac935d4971e3cd133b950ae053becd16fe7f3b',
    'ens_eth_registrar_controller': '0x179Be112b24Ad4cFC392eF8924DfA08C20Ad8583',
  },
}

# Contract key → settings key for an address override
CONTRACT_SETTINGS = {
  'ens_registry':                 'ENS_REGISTRY_ADDRESS',
  'ens_name_wrapper':             'ENS_NAME_WRAPPER_ADDRESS',
  'ens_public_resolver':          'ENS_PUBLIC_RESOLVER_ADDRESS',
  'ens_universal_resolver':       'ENS_UNIVERSAL_RESOLVER_ADDRESS',
  'ens_eth_registrar_controller': 'ENS_ETH_REGISTRAR_CONTROLLER_ADDRESS',
}


def get_chain_contract_address(chain_id: int, contract: str) -> str:
  """
  Resolve the checksummed address of an ENS contract.

  A non-empty settings override wins over the deployment table.

  Args:
    chain_id: Chain ID
    contract: Contract key (see CONTRACT_SETTINGS)

  Returns:
    Checksummed contract address
  """
  if contract not in CONTRACT_SETTINGS:
    raise ValueError(f'Unknown contract: {contract}. '
                     f'Available: {", ".join(CONTRACT_SETTINGS.keys())}')

  override = getattr(settings, CONTRACT_SETTINGS[contract], '')
  if override:
    return Web3.to_checksum_address(override)

  if chain_id not in CONTRACT_ADDRESSES:
    raise UnsupportedChainError(chain_id, CHAIN_IDS)

  address = CONTRACT_ADDRESSES[chain_id].get(contract)
  if not address:
    raise ContractNotConfiguredError(contract, chain_id)
  return Web3.to_checksum_address(address)


__all__ = [
  'CHAIN_IDS',
  'CONTRACT_ADDRESSES',
  'EMPTY_ADDRESS',
  'ETH_REGISTRAR_CONTROLLER_ABI',
  'NAME_WRAPPER_ABI',
  'PUBLIC_RESOLVER_ABI',
  'REGISTRY_ABI',
  'UNIVERSAL_RESOLVER_ABI',
  'UNIVERSAL_RESOLVER_ERRORS',
  'get_chain_contract_address',
]
