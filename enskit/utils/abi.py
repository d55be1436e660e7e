"""
ABI encode/decode helpers around the static fragment tables.

Fragment lookup and selectors come from web3/eth_utils, the wire format
from eth_abi. This module only adds checksummed addresses on decode.
"""
from eth_abi import decode, encode
from eth_utils import (
  abi_to_signature,
  filter_abi_by_type,
  function_abi_to_4byte_selector,
  function_signature_to_4byte_selector,
  get_abi_input_types,
  get_abi_output_types,
)
from web3 import Web3
from web3.exceptions import MismatchedABI
from web3.utils.abi import get_abi_element


def to_bytes(data) -> bytes:
  """Accept bytes or a (0x-prefixed) hex string."""
  if isinstance(data, (bytes, bytearray)):
    return bytes(data)
  return bytes.fromhex(data[2:] if data.startswith('0x') else data)


def to_hex(data: bytes) -> str:
  return '0x' + bytes(data).hex()


def _find_fragment(abi: list[dict], identifier: str, args: list | tuple | None = None) -> dict:
  """
  Pick a function fragment by bare name or full signature.

  With args and a bare name, overloads are resolved by web3 from the
  argument count and types.
  """
  if args is not None and '(' not in identifier:
    try:
      return get_abi_element(abi, identifier, *args)
    except MismatchedABI as e:
      raise ValueError(f'function {identifier} not found in ABI: {e}') from e

  candidates = [
    f for f in filter_abi_by_type('function', abi)
    if identifier in (f['name'], abi_to_signature(f))
  ]
  if not candidates:
    raise ValueError(f'function {identifier} not found in ABI')
  if len(candidates) > 1:
    raise ValueError(f'Ambiguous function {identifier}, pass a full signature')
  return candidates[0]


def _normalise_value(param: dict, value):
  """Checksum decoded addresses, recursing through arrays and tuples."""
  abi_type = param['type']
  if abi_type.endswith(']'):
    element = dict(param, type=abi_type[:abi_type.rindex('[')])
    return [_normalise_value(element, v) for v in value]
  if abi_type == 'address':
    return Web3.to_checksum_address(value)
  if abi_type == 'tuple':
    return tuple(
      _normalise_value(c, v) for c, v in zip(param['components'], value)
    )
  return value


def encode_function_data(abi: list[dict], function_name: str, args: list | tuple) -> str:
  """
  ABI-encode a function call.

  Args:
    abi: ABI fragment list
    function_name: Bare name, or full signature for overloads
                   (e.g. 'addr(bytes32,uint256)')
    args: Positional arguments

  Returns:
    0x-prefixed calldata
  """
  fragment = _find_fragment(abi, function_name, args)
  encoded = encode(get_abi_input_types(fragment), list(args))
  return to_hex(function_abi_to_4byte_selector(fragment) + encoded)


def decode_function_data(abi: list[dict], function_name: str, data) -> tuple:
  """Decode calldata back into arguments. The selector must match."""
  fragment = _find_fragment(abi, function_name)
  raw = to_bytes(data)
  if raw[:4] != function_abi_to_4byte_selector(fragment):
    raise ValueError(f'Calldata selector 0x{raw[:4].hex()} does not match {abi_to_signature(fragment)}')
  values = decode(get_abi_input_types(fragment), raw[4:])
  return tuple(_normalise_value(p, v) for p, v in zip(fragment['inputs'], values))


def decode_function_result(abi: list[dict], function_name: str, data) -> tuple:
  """
  Decode the return data of a function call.

  Returns:
    Tuple of outputs with addresses checksummed
  """
  fragment = _find_fragment(abi, function_name)
  values = decode(get_abi_output_types(fragment), to_bytes(data))
  return tuple(_normalise_value(p, v) for p, v in zip(fragment['outputs'], values))


def decode_error_result(abi: list[dict], data) -> tuple[str, tuple] | None:
  """
  Match revert data against the custom errors in an ABI.

  Returns:
    (error_name, args) or None when no error fragment matches
  """
  raw = to_bytes(data)
  if len(raw) < 4:
    return None
  for fragment in abi:
    if fragment.get('type') != 'error':
      continue
    if function_signature_to_4byte_selector(abi_to_signature(fragment)) == raw[:4]:
      values = decode(get_abi_input_types(fragment), raw[4:])
      return fragment['name'], tuple(
        _normalise_value(p, v) for p, v in zip(fragment['inputs'], values)
      )
  return None
