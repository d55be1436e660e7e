"""
Calldata encoders for PublicResolver record setters.

Each returns 0x-prefixed calldata targeting the resolver.
"""
from web3 import Web3

from enskit.contracts import PUBLIC_RESOLVER_ABI
from enskit.utils.abi import encode_function_data, to_bytes

ETH_COIN_TYPE = 60


def encode_set_text(namehash: bytes, key: str, value: str | None) -> str:
  """setText(bytes32,string,string). A None value clears the record."""
  return encode_function_data(PUBLIC_RESOLVER_ABI, 'setText', [namehash, key, value or ''])


def coin_value_to_bytes(coin: int, value) -> bytes:
  """
  Turn an address record value into the bytes stored on-chain.

  ETH (coin 60) values must be valid 20-byte addresses; other coins are
  taken as already-encoded bytes or hex.
  """
  if value is None or value == '':
    return b''
  if coin == ETH_COIN_TYPE:
    if not Web3.is_address(value):
      raise ValueError(f'Invalid ETH address: {value}')
    return to_bytes(Web3.to_checksum_address(value))
  return to_bytes(value)


def encode_set_addr(namehash: bytes, coin: int, value) -> str:
  """setAddr(bytes32,uint256,bytes)."""
  return encode_function_data(
    PUBLIC_RESOLVER_ABI,
    'setAddr(bytes32,uint256,bytes)',
    [namehash, coin, coin_value_to_bytes(coin, value)],
  )


def encode_set_content_hash(namehash: bytes, content_hash) -> str:
  """setContenthash(bytes32,bytes). Content hash is already-encoded bytes/hex."""
  return encode_function_data(
    PUBLIC_RESOLVER_ABI,
    'setContenthash',
    [namehash, to_bytes(content_hash) if content_hash else b''],
  )


def encode_clear_records(namehash: bytes) -> str:
  return encode_function_data(PUBLIC_RESOLVER_ABI, 'clearRecords', [namehash])


def encode_multicall(calls: list[str]) -> str:
  return encode_function_data(
    PUBLIC_RESOLVER_ABI,
    'multicall',
    [[to_bytes(call) for call in calls]],
  )
