"""Read a text record (avatar, url, com.twitter, ...)."""
from enskit.contracts import PUBLIC_RESOLVER_ABI
from enskit.functions.public._universal import decode_resolve, encode_resolve, universal_call
from enskit.utils.abi import decode_function_result, encode_function_data
from enskit.utils.normalise import namehash


def encode(name: str, key: str, chain_id: int | None = None) -> dict:
  inner = encode_function_data(PUBLIC_RESOLVER_ABI, 'text', [namehash(name), key])
  return encode_resolve(name, inner, chain_id)


def decode(data) -> str | None:
  unwrapped = decode_resolve(data)
  if unwrapped is None or not unwrapped[0]:
    return None
  (value,) = decode_function_result(PUBLIC_RESOLVER_ABI, 'text', unwrapped[0])
  return value or None


def get_text_record(name: str, key: str, chain_id: int | None = None) -> str | None:
  """Get a text record; None when unset."""
  data = universal_call(encode(name, key, chain_id), name, chain_id)
  if data is None:
    return None
  return decode(data)


get_text_record.encode = encode
get_text_record.decode = decode
