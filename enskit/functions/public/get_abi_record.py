"""
Read the ABI record of a name.

The resolver is asked for every content type enskit can decode
(SUPPORTED_CONTENT_TYPES); it answers with the first one it holds.
"""
import json
import zlib
from dataclasses import dataclass

import cbor2

from enskit.contracts import PUBLIC_RESOLVER_ABI
from enskit.functions.public._universal import decode_resolve, encode_resolve, universal_call
from enskit.utils.abi import decode_function_result, encode_function_data, to_bytes, to_hex
from enskit.utils.encoders import SUPPORTED_CONTENT_TYPES
from enskit.utils.normalise import namehash


@dataclass(frozen=True)
class DecodedAbi:
  content_type: int
  # False when the payload could not be decoded; abi then holds raw hex
  decoded: bool
  abi: object


def encode_abi_call(name: str) -> str:
  """Resolver calldata for ABI(bytes32 node, uint256 contentTypes)."""
  return encode_function_data(
    PUBLIC_RESOLVER_ABI,
    'ABI',
    [namehash(name), SUPPORTED_CONTENT_TYPES],
  )


def decode_abi_result(data) -> DecodedAbi | None:
  """
  Decode the (uint256 contentType, bytes data) result of ABI().

  Returns:
    DecodedAbi, or None when the record is empty
  """
  raw = to_bytes(data)
  if not raw:
    return None

  content_type, encoded = decode_function_result(PUBLIC_RESOLVER_ABI, 'ABI', raw)
  if not content_type or not encoded:
    return None

  if content_type == 1:
    return DecodedAbi(content_type, True, json.loads(encoded.decode('utf-8')))
  if content_type == 2:
    return DecodedAbi(content_type, True, json.loads(zlib.decompress(encoded).decode('utf-8')))
  if content_type == 4:
    return DecodedAbi(content_type, True, cbor2.loads(encoded))
  if content_type == 8:
    return DecodedAbi(content_type, True, encoded.decode('utf-8'))

  try:
    return DecodedAbi(content_type, True, encoded.decode('utf-8'))
  except UnicodeDecodeError:
    return DecodedAbi(content_type, False, to_hex(encoded))


def encode(name: str, chain_id: int | None = None) -> dict:
  return encode_resolve(name, encode_abi_call(name), chain_id)


def decode(data) -> DecodedAbi | None:
  unwrapped = decode_resolve(data)
  if unwrapped is None:
    return None
  return decode_abi_result(unwrapped[0])


def get_abi_record(name: str, chain_id: int | None = None) -> DecodedAbi | None:
  """
  Get the ABI stored for a name.

  Args:
    name: ENS name (e.g. 'alice.eth')
    chain_id: Chain ID (default ENS_CHAIN_ID)

  Returns:
    DecodedAbi(content_type, decoded, abi) or None
  """
  data = universal_call(encode(name, chain_id), name, chain_id)
  if data is None:
    return None
  return decode(data)


get_abi_record.encode = encode
get_abi_record.decode = decode
