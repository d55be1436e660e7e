"""
Read an address record.

ETH (coin 60) uses the legacy addr(bytes32) and returns a checksummed
address. Other coins use addr(bytes32,uint256) and return the raw
encoded bytes as hex; EVM chain coin types (ENSIP-11, >= 0x80000000)
are checksummed when 20 bytes long.
"""
from web3 import Web3

from enskit.contracts import EMPTY_ADDRESS, PUBLIC_RESOLVER_ABI
from enskit.functions.public._universal import decode_resolve, encode_resolve, universal_call
from enskit.utils.abi import decode_function_result, encode_function_data, to_hex
from enskit.utils.encoders import ETH_COIN_TYPE
from enskit.utils.normalise import namehash

EVM_COIN_TYPE_FLAG = 0x80000000


def encode(name: str, coin: int = ETH_COIN_TYPE, chain_id: int | None = None) -> dict:
  if coin == ETH_COIN_TYPE:
    inner = encode_function_data(PUBLIC_RESOLVER_ABI, 'addr(bytes32)', [namehash(name)])
  else:
    inner = encode_function_data(PUBLIC_RESOLVER_ABI, 'addr(bytes32,uint256)', [namehash(name), coin])
  return encode_resolve(name, inner, chain_id)


def decode(data, coin: int = ETH_COIN_TYPE) -> str | None:
  unwrapped = decode_resolve(data)
  if unwrapped is None or not unwrapped[0]:
    return None

  if coin == ETH_COIN_TYPE:
    (address,) = decode_function_result(PUBLIC_RESOLVER_ABI, 'addr(bytes32)', unwrapped[0])
    return None if address == EMPTY_ADDRESS else address

  (value,) = decode_function_result(PUBLIC_RESOLVER_ABI, 'addr(bytes32,uint256)', unwrapped[0])
  if not value or not any(value):
    return None
  if coin >= EVM_COIN_TYPE_FLAG and len(value) == 20:
    return Web3.to_checksum_address(value)
  return to_hex(value)


def get_address_record(name: str, coin: int = ETH_COIN_TYPE, chain_id: int | None = None) -> str | None:
  """Get the address a name points to for a coin type; None when unset."""
  data = universal_call(encode(name, coin, chain_id), name, chain_id)
  if data is None:
    return None
  return decode(data, coin)


get_address_record.encode = encode
get_address_record.decode = decode
