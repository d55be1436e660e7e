"""
ABI record encoding.

Content types are bit flags so a reader can ask for several at once:
  1: JSON
  2: zlib compressed JSON
  4: CBOR
  8: URI
"""
import json
import zlib
from dataclasses import dataclass

import cbor2

from enskit.errors import UnknownContentTypeError

CONTENT_TYPES = {
  'json': 1,
  'zlib': 2,
  'cbor': 4,
  'uri':  8,
}

# OR of every content type above
SUPPORTED_CONTENT_TYPES = 0xf


@dataclass(frozen=True)
class EncodedAbi:
  content_type: int
  encoded_data: bytes


def _json_bytes(data) -> bytes:
  # Compact separators match what JSON.stringify writes on-chain
  return json.dumps(data, separators=(',', ':')).encode('utf-8')


def encode_abi(encode_as: str, data) -> EncodedAbi:
  """
  Encode an ABI for storage in a resolver's ABI record.

  Args:
    encode_as: 'json', 'zlib', 'cbor' or 'uri'
    data: ABI (list/dict) for json/zlib/cbor, a URI string for uri.
          None produces an empty record (content type 0).

  Returns:
    EncodedAbi(content_type, encoded_data)
  """
  if encode_as not in CONTENT_TYPES:
    raise UnknownContentTypeError(encode_as)
  if data is None:
    return EncodedAbi(0, b'')

  if encode_as == 'json':
    encoded = _json_bytes(data)
  elif encode_as == 'zlib':
    encoded = zlib.compress(_json_bytes(data))
  elif encode_as == 'cbor':
    encoded = cbor2.dumps(data)
  else:
    encoded = data.encode('utf-8')

  return EncodedAbi(CONTENT_TYPES[encode_as], encoded)
