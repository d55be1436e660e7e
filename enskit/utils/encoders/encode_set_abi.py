"""setABI calldata encoder."""
from enskit.contracts import PUBLIC_RESOLVER_ABI
from enskit.utils.abi import encode_function_data


def encode_set_abi(namehash: bytes, content_type: int, encoded_data: bytes | None) -> str:
  """
  Encode setABI(bytes32 node, uint256 contentType, bytes data).

  content_type=0 with encoded_data=None clears the record.
  """
  return encode_function_data(
    PUBLIC_RESOLVER_ABI,
    'setABI',
    [namehash, content_type, encoded_data or b''],
  )
