"""
Read the owner of a name.

Wrapped names are owned by the NameWrapper in the registry; the real
owner is then the holder of the NameWrapper token for the node.
"""
import logging
from dataclasses import dataclass

from enskit.contracts import (
  EMPTY_ADDRESS,
  NAME_WRAPPER_ABI,
  REGISTRY_ABI,
  get_chain_contract_address,
)
from enskit.errors import InvalidContractTypeError
from enskit.utils.abi import decode_function_result, encode_function_data, to_bytes
from enskit.utils.normalise import namehash
from enskit.utils.web3_utils import call, resolve_chain_id

logger = logging.getLogger('enskit')

OWNER_CONTRACTS = ['registry', 'nameWrapper']


@dataclass(frozen=True)
class OwnerResult:
  owner: str
  # 'registry' or 'nameWrapper'
  ownership_level: str


def encode(name: str, contract: str = 'registry', chain_id: int | None = None) -> dict:
  chain_id = resolve_chain_id(chain_id)
  node = namehash(name)
  if contract == 'registry':
    return {
      'to': get_chain_contract_address(chain_id, 'ens_registry'),
      'data': encode_function_data(REGISTRY_ABI, 'owner', [node]),
    }
  if contract == 'nameWrapper':
    return {
      'to': get_chain_contract_address(chain_id, 'ens_name_wrapper'),
      'data': encode_function_data(NAME_WRAPPER_ABI, 'ownerOf', [int.from_bytes(node, 'big')]),
    }
  raise InvalidContractTypeError(contract, OWNER_CONTRACTS)


def decode(data, contract: str = 'registry') -> str | None:
  raw = to_bytes(data)
  if not raw:
    return None
  if contract == 'registry':
    (owner,) = decode_function_result(REGISTRY_ABI, 'owner', raw)
  elif contract == 'nameWrapper':
    (owner,) = decode_function_result(NAME_WRAPPER_ABI, 'ownerOf', raw)
  else:
    raise InvalidContractTypeError(contract, OWNER_CONTRACTS)
  return None if owner == EMPTY_ADDRESS else owner


def get_owner(name: str, contract: str | None = None, chain_id: int | None = None) -> OwnerResult | None:
  """
  Get the owner of a name.

  Args:
    name: ENS name
    contract: Force 'registry' or 'nameWrapper'. By default the registry
              is read and followed into the NameWrapper when it holds the name.
    chain_id: Chain ID (default ENS_CHAIN_ID)

  Returns:
    OwnerResult(owner, ownership_level) or None when unowned
  """
  if contract is not None and contract not in OWNER_CONTRACTS:
    raise InvalidContractTypeError(contract, OWNER_CONTRACTS)

  chain_id = resolve_chain_id(chain_id)

  if contract == 'nameWrapper':
    owner = decode(call(encode(name, 'nameWrapper', chain_id), chain_id), 'nameWrapper')
    return OwnerResult(owner, 'nameWrapper') if owner else None

  owner = decode(call(encode(name, 'registry', chain_id), chain_id), 'registry')
  if owner is None:
    return None

  if contract is None and owner == get_chain_contract_address(chain_id, 'ens_name_wrapper'):
    logger.debug(f'{name} is wrapped, reading NameWrapper owner')
    wrapped_owner = decode(call(encode(name, 'nameWrapper', chain_id), chain_id), 'nameWrapper')
    return OwnerResult(wrapped_owner, 'nameWrapper') if wrapped_owner else None

  return OwnerResult(owner, 'registry')


get_owner.encode = encode
get_owner.decode = decode
