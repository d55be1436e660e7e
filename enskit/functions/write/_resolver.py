from web3 import Web3

from enskit.contracts import get_chain_contract_address


def resolver_target(resolver_address: str | None, chain_id: int) -> str:
  """The resolver to write to; defaults to the chain's PublicResolver."""
  if resolver_address:
    return Web3.to_checksum_address(resolver_address)
  return get_chain_contract_address(chain_id, 'ens_public_resolver')
