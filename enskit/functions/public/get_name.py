"""
Reverse resolution: address → primary name.

The UniversalResolver also forward-resolves the name it finds, so the
result reports whether the name actually points back at the address.
"""
from dataclasses import dataclass

from web3 import Web3

from enskit.contracts import UNIVERSAL_RESOLVER_ABI, get_chain_contract_address
from enskit.functions.public._universal import universal_call
from enskit.utils.abi import decode_function_result, encode_function_data, to_bytes
from enskit.utils.normalise import dns_encode
from enskit.utils.web3_utils import resolve_chain_id


@dataclass(frozen=True)
class NameResult:
  name: str
  match: bool
  resolver_address: str
  reverse_resolver_address: str


def reverse_name(address: str) -> str:
  """'0xAbC...' → 'abc....addr.reverse'"""
  return f'{Web3.to_checksum_address(address)[2:].lower()}.addr.reverse'


def encode(address: str, chain_id: int | None = None) -> dict:
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_universal_resolver'),
    'data': encode_function_data(
      UNIVERSAL_RESOLVER_ABI,
      'reverse',
      [dns_encode(reverse_name(address))],
    ),
  }


def decode(data, address: str) -> NameResult | None:
  raw = to_bytes(data)
  if not raw:
    return None
  name, resolved_address, reverse_resolver, resolver = decode_function_result(
    UNIVERSAL_RESOLVER_ABI, 'reverse', raw,
  )
  if not name:
    return None
  return NameResult(
    name=name,
    match=resolved_address.lower() == address.lower(),
    resolver_address=resolver,
    reverse_resolver_address=reverse_resolver,
  )


def get_name(address: str, chain_id: int | None = None) -> NameResult | None:
  """Get the primary name of an address; None when no reverse record is set."""
  data = universal_call(encode(address, chain_id), reverse_name(address), chain_id)
  if data is None:
    return None
  return decode(data, address)


get_name.encode = encode
get_name.decode = decode
