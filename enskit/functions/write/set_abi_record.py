"""Write (or clear) the ABI record of a name."""
from enskit.functions.write._resolver import resolver_target
from enskit.utils.encoders import EncodedAbi, encode_set_abi
from enskit.utils.normalise import namehash
from enskit.utils.web3_utils import resolve_chain_id, send_tx


def make_function_data(
  name: str,
  encoded_abi: EncodedAbi | None,
  resolver_address: str | None = None,
  chain_id: int | None = None,
) -> dict:
  """encoded_abi=None clears the record (content type 0, empty data)."""
  if encoded_abi is None:
    encoded_abi = EncodedAbi(0, b'')
  return {
    'to': resolver_target(resolver_address, resolve_chain_id(chain_id)),
    'data': encode_set_abi(namehash(name), encoded_abi.content_type, encoded_abi.encoded_data),
  }


def set_abi_record(
  name: str,
  encoded_abi: EncodedAbi | None,
  resolver_address: str | None = None,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """
  Set the ABI record. Build `encoded_abi` with encode_abi('json' | 'zlib' | 'cbor' | 'uri', data).

  Returns:
    Transaction hash
  """
  request = make_function_data(name, encoded_abi, resolver_address, chain_id)
  return send_tx(request, chain_id, gas=gas)


set_abi_record.make_function_data = make_function_data
