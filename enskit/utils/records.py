"""
Build the list of resolver calls for a set of records.

Used both for set_records (sent through multicall) and for the `data`
argument of a registration, which the controller forwards to the resolver.
"""
from enskit.utils.encoders import (
  EncodedAbi,
  encode_clear_records,
  encode_set_abi,
  encode_set_addr,
  encode_set_content_hash,
  encode_set_text,
)


def generate_record_call_array(namehash: bytes, records: dict | None) -> list[str]:
  """
  Turn a records dict into resolver calldata.

  Supported keys (all optional):
    clear_records: bool
    content_hash: bytes/hex, or '' to clear
    abi: EncodedAbi or list of EncodedAbi
    texts: [{'key': ..., 'value': ...}]
    coins: [{'coin': int, 'value': address/bytes/hex}]

  Calls are emitted in that order so clearRecords always runs first.
  """
  if not records:
    return []

  calls = []

  if records.get('clear_records'):
    calls.append(encode_clear_records(namehash))

  if 'content_hash' in records:
    calls.append(encode_set_content_hash(namehash, records['content_hash']))

  abis = records.get('abi')
  if abis:
    if isinstance(abis, EncodedAbi):
      abis = [abis]
    for abi in abis:
      calls.append(encode_set_abi(namehash, abi.content_type, abi.encoded_data))

  for text in records.get('texts') or []:
    calls.append(encode_set_text(namehash, text['key'], text['value']))

  for coin in records.get('coins') or []:
    calls.append(encode_set_addr(namehash, int(coin['coin']), coin['value']))

  return calls
