"""Find the resolver responsible for a name (ENSIP-10 wildcard aware)."""
from enskit.contracts import EMPTY_ADDRESS, UNIVERSAL_RESOLVER_ABI, get_chain_contract_address
from enskit.functions.public._universal import universal_call
from enskit.utils.abi import decode_function_result, encode_function_data, to_bytes
from enskit.utils.normalise import dns_encode, normalise
from enskit.utils.web3_utils import resolve_chain_id


def encode(name: str, chain_id: int | None = None) -> dict:
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_universal_resolver'),
    'data': encode_function_data(
      UNIVERSAL_RESOLVER_ABI,
      'findResolver',
      [dns_encode(normalise(name))],
    ),
  }


def decode(data) -> str | None:
  raw = to_bytes(data)
  if not raw:
    return None
  resolver, _node = decode_function_result(UNIVERSAL_RESOLVER_ABI, 'findResolver', raw)
  return None if resolver == EMPTY_ADDRESS else resolver


def get_resolver(name: str, chain_id: int | None = None) -> str | None:
  data = universal_call(encode(name, chain_id), name, chain_id)
  if data is None:
    return None
  return decode(data)


get_resolver.encode = encode
get_resolver.decode = decode
