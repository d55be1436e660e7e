"""Point a name at a resolver."""
from enskit.contracts import (
  EMPTY_ADDRESS,
  NAME_WRAPPER_ABI,
  REGISTRY_ABI,
  get_chain_contract_address,
)
from enskit.errors import InvalidContractTypeError
from enskit.utils.abi import encode_function_data
from enskit.utils.normalise import namehash
from enskit.utils.web3_utils import resolve_chain_id, send_tx

CONTRACTS = ['registry', 'nameWrapper']

_CONTRACT_KEYS = {
  'registry':    ('ens_registry', REGISTRY_ABI),
  'nameWrapper': ('ens_name_wrapper', NAME_WRAPPER_ABI),
}


def make_function_data(
  name: str,
  contract: str,
  resolver_address: str | None,
  chain_id: int | None = None,
) -> dict:
  if contract not in _CONTRACT_KEYS:
    raise InvalidContractTypeError(contract, CONTRACTS)
  contract_key, abi = _CONTRACT_KEYS[contract]
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), contract_key),
    'data': encode_function_data(
      abi,
      'setResolver',
      [namehash(name), resolver_address or EMPTY_ADDRESS],
    ),
  }


def set_resolver(
  name: str,
  contract: str,
  resolver_address: str | None,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """Set (or with None, clear) the resolver of a name. Returns the tx hash."""
  request = make_function_data(name, contract, resolver_address, chain_id)
  return send_tx(request, chain_id, gas=gas)


set_resolver.make_function_data = make_function_data
