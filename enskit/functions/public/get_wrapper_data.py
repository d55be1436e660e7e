"""Read NameWrapper data (owner, fuses, expiry) for a name."""
from dataclasses import dataclass

from enskit.contracts import EMPTY_ADDRESS, NAME_WRAPPER_ABI, get_chain_contract_address
from enskit.utils.abi import decode_function_result, encode_function_data, to_bytes
from enskit.utils.fuses import decode_fuses
from enskit.utils.normalise import namehash
from enskit.utils.web3_utils import call, resolve_chain_id


@dataclass(frozen=True)
class WrapperData:
  owner: str
  fuses: dict
  expiry: int


def encode(name: str, chain_id: int | None = None) -> dict:
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_name_wrapper'),
    'data': encode_function_data(
      NAME_WRAPPER_ABI,
      'getData',
      [int.from_bytes(namehash(name), 'big')],
    ),
  }


def decode(data) -> WrapperData | None:
  raw = to_bytes(data)
  if not raw:
    return None
  owner, fuses, expiry = decode_function_result(NAME_WRAPPER_ABI, 'getData', raw)
  if owner == EMPTY_ADDRESS:
    return None
  return WrapperData(owner=owner, fuses=decode_fuses(fuses), expiry=expiry)


def get_wrapper_data(name: str, chain_id: int | None = None) -> WrapperData | None:
  """None when the name is not wrapped."""
  return decode(call(encode(name, chain_id), chain_id))


get_wrapper_data.encode = encode
get_wrapper_data.decode = decode
