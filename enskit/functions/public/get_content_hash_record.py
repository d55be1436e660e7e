"""Read the raw (still multicodec-encoded) content hash of a name."""
from enskit.contracts import PUBLIC_RESOLVER_ABI
from enskit.functions.public._universal import decode_resolve, encode_resolve, universal_call
from enskit.utils.abi import decode_function_result, encode_function_data, to_hex
from enskit.utils.normalise import namehash


def encode(name: str, chain_id: int | None = None) -> dict:
  inner = encode_function_data(PUBLIC_RESOLVER_ABI, 'contenthash', [namehash(name)])
  return encode_resolve(name, inner, chain_id)


def decode(data) -> str | None:
  unwrapped = decode_resolve(data)
  if unwrapped is None or not unwrapped[0]:
    return None
  (content_hash,) = decode_function_result(PUBLIC_RESOLVER_ABI, 'contenthash', unwrapped[0])
  return to_hex(content_hash) if content_hash else None


def get_content_hash_record(name: str, chain_id: int | None = None) -> str | None:
  data = universal_call(encode(name, chain_id), name, chain_id)
  if data is None:
    return None
  return decode(data)


get_content_hash_record.encode = encode
get_content_hash_record.decode = decode
